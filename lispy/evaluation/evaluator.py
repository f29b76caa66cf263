"""Core evaluator for the lispy interpreter.

Evaluation is a plain recursive tree reduction: atoms reduce to themselves or
to their binding, non-empty lists are applications whose head is evaluated to
a callable and then applied to the unevaluated tail.
"""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.errors import LispyRecursionError, ParseError
from lispy.types.expression import Expression, Lambda, List, Number, SpecialForm, Symbol
from lispy.evaluation.apply import apply
from lispy.reader.parser import TokenStream


def evaluate(expr: Expression, env: Environment) -> Expression:
    match expr:
        case Number() | Lambda() | SpecialForm():
            return expr
        case Symbol(name):
            return env.lookup(name)
        case List(()):
            return expr
        case List((head, *tail)):
            return apply(evaluate(head, env), tuple(tail), env, evaluate)
    raise TypeError(f"Not an expression: {expr!r}")


def eval_string(code: str, env: Environment) -> Expression:
    """Read exactly one form from `code` and evaluate it in `env`."""
    stream = TokenStream.from_source(code)
    expr = stream.parse_expr()
    if len(stream):
        raise ParseError("unexpected trailing input", stream.peek().offset)
    return evaluate_top_level(expr, env)


def evaluate_top_level(expr: Expression, env: Environment) -> Expression:
    """Evaluate one top-level form, converting runaway recursion into a lispy error."""
    try:
        return evaluate(expr, env)
    except RecursionError:
        raise LispyRecursionError("maximum recursion depth exceeded") from None
