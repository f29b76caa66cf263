"""Application engine for lispy.

Both callable variants share one invocation shape, `apply(head, operands, env)`,
and differ only in how the operands are prepared:

- Lambda: operands are evaluated left to right in the calling environment,
  then bound to the parameters in a child of the captured environment (or
  handed to the native function for primitives).
- SpecialForm: operands are passed through unevaluated together with the
  calling environment; the handler decides what to evaluate and where.
"""

from lispy import EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.errors import ArityError, NotCallableError
from lispy.types.expression import Expression, Lambda, SpecialForm


def _check_arity(name: str, expected: int, provided: int) -> None:
    if provided != expected:
        raise ArityError(f"{name} expects {expected} argument(s), got {provided}")


def apply_lambda(
    fn: Lambda,
    operands: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    args = [evaluate_fn(operand, env) for operand in operands]
    _check_arity(fn.name, fn.arity, len(args))

    if fn.native is not None:
        return fn.native(*args)

    call_env = Environment(outer=fn.env)
    for param, arg in zip(fn.params, args):
        call_env.define(param, arg)
    return evaluate_fn(fn.body, call_env)


def apply_special_form(
    form: SpecialForm,
    operands: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    _check_arity(form.name, form.arity, len(operands))
    return form.handler(operands, env, evaluate_fn)


def apply(
    head: Expression,
    operands: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply an evaluated head to the raw operands of an application."""
    match head:
        case Lambda():
            return apply_lambda(head, operands, env, evaluate_fn)
        case SpecialForm():
            return apply_special_form(head, operands, env, evaluate_fn)
    raise NotCallableError(f"Cannot apply non-function {head}")
