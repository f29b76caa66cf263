from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional

from lispy.config import get_recursion_limit
from lispy.types.environment import Environment
from lispy.types.errors import LispyError
from lispy.types.expression import EMPTY, Expression
from lispy.reader.parser import TokenStream
from lispy.evaluation.evaluator import evaluate_top_level
from lispy.builtin.prelude import make_prelude


@dataclass(frozen=True)
class EvalResult:
    ok: bool
    value: Optional[Expression] = None
    error: Optional[LispyError] = None


class Interpreter:
    """
    A session interpreter for lispy expressions.
    Owns one prelude environment that persists across calls.
    """

    def __init__(self, env: Environment | None = None):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)
        self.env: Environment = env if env is not None else make_prelude()

    def iter_eval(self, code: str) -> Iterator[Expression]:
        """Evaluate the top-level forms of `code` one at a time, yielding each result."""
        for expr in TokenStream.from_source(code).parse_all():
            yield evaluate_top_level(expr, self.env)

    def eval(self, code: str) -> Expression:
        """Evaluate every top-level form in `code` and return the last result."""
        result: Expression = EMPTY
        for result in self.iter_eval(code):
            pass
        return result

    def eval_line(self, line: str) -> EvalResult:
        """Evaluate one line of input; lispy errors are captured, not raised."""
        try:
            return EvalResult(ok=True, value=self.eval(line))
        except LispyError as ex:
            return EvalResult(ok=False, error=ex)
