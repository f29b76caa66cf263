from lispy import EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.errors import LispyTypeError
from lispy.types.expression import Expression, Symbol


def let_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (let name value body)
    `value` is evaluated in the current scope; `body` runs in a new child scope
    where `name` is freshly bound, so an outer `name` is shadowed, never mutated.
    """
    name, value_expr, body = tail
    if not isinstance(name, Symbol):
        raise LispyTypeError(f"let expects a symbol to bind, got {name}")

    value = evaluate_fn(value_expr, env)
    child_env = Environment(outer=env)
    child_env.define(name.name, value)
    return evaluate_fn(body, child_env)
