import logging

from lispy import EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.errors import LispyTypeError
from lispy.types.expression import Expression, Lambda, List, Symbol


logger = logging.getLogger(__name__)


def lambda_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    params_expr, body = tail
    if not isinstance(params_expr, List):
        raise LispyTypeError(f"lambda expects a parameter list, got {params_expr}")

    params: list[str] = []
    for param in params_expr:
        if not isinstance(param, Symbol):
            raise LispyTypeError(f"lambda parameters must be symbols, got {param}")
        if param.name in params:
            raise LispyTypeError(f"duplicate lambda parameter {param.name}")
        params.append(param.name)

    logger.debug("Creating closure: params=%s, def_env_id=%s", params, id(env))
    # The defining environment is captured by reference.
    return Lambda(tuple(params), body, env)
