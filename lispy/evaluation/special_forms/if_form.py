from lispy import EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.expression import Expression, truthy


def if_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """(if cond then else): evaluates exactly one branch."""
    cond, then_branch, else_branch = tail
    if truthy(evaluate_fn(cond, env)):
        return evaluate_fn(then_branch, env)
    return evaluate_fn(else_branch, env)
