"""Expression model for lispy.

Every value the reader produces or the evaluator returns is one of five
immutable variants: Number, Symbol, List, Lambda and SpecialForm. Values are
shared by reference wherever they are stored (lists, environments, closures).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from lispy.types.environment import Environment


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class List:
    items: tuple[Expression, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True, eq=False)
class Lambda:
    """A callable whose operands are evaluated before the call.

    User closures carry `params`, `body` and the captured defining `env`.
    Native primitives carry a Python `native` function over ints instead of a
    body; `params` then only fixes their arity.
    """

    params: tuple[str, ...]
    body: Expression | None = None
    env: Environment | None = None
    native: Callable[..., Expression] | None = None
    name: str = "lambda"

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True, eq=False)
class SpecialForm:
    """A callable that receives its operands unevaluated."""

    name: str
    arity: int
    handler: Callable[..., Expression]

    def __str__(self) -> str:
        return render(self)


Expression = Union[Number, Symbol, List, Lambda, SpecialForm]

EMPTY = List()


def truthy(expr: Expression) -> bool:
    """Numbers are true iff non-zero, lists iff non-empty, everything else always."""
    match expr:
        case Number(value):
            return value != 0
        case List(items):
            return len(items) > 0
        case _:
            return True


def render(expr: Expression) -> str:
    """Human-readable rendering used by the REPL and the example runner."""
    match expr:
        case Number(value):
            return f"Number({value})"
        case Symbol(name):
            return f"Symbol({name})"
        case List(items):
            return "(" + ", ".join(render(item) for item in items) + ")"
        case Lambda():
            return "Lambda()"
        case SpecialForm():
            return "SpecialForm()"
    raise TypeError(f"Not an expression: {expr!r}")
