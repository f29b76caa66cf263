# Core type aliases and public entry points for lispy.
#
# EvaluatorFn is the evaluator signature threaded through the application
# engine and the special forms, so they never import the evaluator directly.
# It is defined before the re-exports below, which import modules that use it.

from typing import Any, Callable

EvaluatorFn = Callable[[Any, Any], Any]

from lispy.types.errors import (  # noqa: E402
    LispyError,
    ParseError,
    UnboundSymbolError,
    NotCallableError,
    ArityError,
    LispyTypeError,
    DivisionByZeroError,
    LispyRecursionError,
    PreludeError,
)
from lispy.types.expression import (  # noqa: E402
    Expression,
    Number,
    Symbol,
    List,
    Lambda,
    SpecialForm,
    truthy,
    render,
)
from lispy.types.environment import Environment  # noqa: E402
from lispy.reader.parser import tokenize, parse, parse_all  # noqa: E402
from lispy.evaluation.evaluator import evaluate, eval_string  # noqa: E402
from lispy.builtin.prelude import make_prelude  # noqa: E402
from lispy.interpreter import Interpreter, EvalResult  # noqa: E402
