"""Built-in primitives for the lispy runtime environment.

This module defines the integer arithmetic, logic and comparison primitives
exposed to Lisp code, and the registration helper that installs them, along
with the special forms, into an environment.
"""
from __future__ import annotations

from typing import Callable

from lispy.types.environment import Environment
from lispy.types.errors import DivisionByZeroError, LispyTypeError
from lispy.types.expression import Expression, Lambda, Number
from lispy.evaluation.special_forms import SPECIAL_FORMS


# -------------------------------
# Arithmetic
# -------------------------------
def add(lhs: int, rhs: int) -> int:
    return lhs + rhs


def sub(lhs: int, rhs: int) -> int:
    return lhs - rhs


def mul(lhs: int, rhs: int) -> int:
    return lhs * rhs


def div(lhs: int, rhs: int) -> int:
    """Integer division truncating toward zero; errors on a zero divisor."""
    if rhs == 0:
        raise DivisionByZeroError("Division by zero")
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


# -------------------------------
# Logic and comparison (0/1 results)
# -------------------------------
def logical_not(value: int) -> int:
    return int(not value)


def logical_and(lhs: int, rhs: int) -> int:
    return int(bool(lhs) and bool(rhs))


def logical_or(lhs: int, rhs: int) -> int:
    return int(bool(lhs) or bool(rhs))


def gt(lhs: int, rhs: int) -> int:
    return int(lhs > rhs)


def equals(lhs: int, rhs: int) -> int:
    return int(lhs == rhs)


def numeric_function(name: str, fn: Callable[..., int], arity: int) -> Lambda:
    """Wrap a Python function over ints as a fixed-arity Lambda over Numbers."""

    def native(*args: Expression) -> Expression:
        values = []
        for arg in args:
            if not isinstance(arg, Number):
                raise LispyTypeError(f"All arguments to {name} must be numbers, got {arg}")
            values.append(arg.value)
        return Number(fn(*values))

    params = tuple(f"arg{i}" for i in range(arity))
    return Lambda(params, native=native, name=name)


PRIMITIVES: dict[str, tuple[Callable[..., int], int]] = {
    "+": (add, 2),
    "-": (sub, 2),
    "*": (mul, 2),
    "/": (div, 2),
    "!": (logical_not, 1),
    "&&": (logical_and, 2),
    "||": (logical_or, 2),
    ">": (gt, 2),
    "=": (equals, 2),
}


def register(env: Environment) -> None:
    """Register the special forms and native primitives into the given environment."""
    for name, form in SPECIAL_FORMS.items():
        env[name] = form
    for name, (fn, arity) in PRIMITIVES.items():
        env[name] = numeric_function(name, fn, arity)
