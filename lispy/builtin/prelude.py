"""Prelude construction.

The root environment is seeded in two phases: first the special forms and the
native primitives, then the derived comparisons, which are written in lispy
itself and evaluated against the partially built environment. Each derived
definition names the bindings its source relies on; they are checked before
the source is evaluated, so a reordering fails loudly instead of producing an
unbound-symbol error on first use.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import NamedTuple

from lispy.types.environment import Environment
from lispy.types.errors import PreludeError
from lispy.types.expression import Lambda
from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import eval_string


logger = logging.getLogger(__name__)


class DerivedDefinition(NamedTuple):
    name: str
    requires: tuple[str, ...]
    source: str


DERIVED_DEFINITIONS: tuple[DerivedDefinition, ...] = (
    DerivedDefinition(">=", ("lambda", "||", ">", "="), "(lambda (lhs rhs) (|| (> lhs rhs) (= lhs rhs)))"),
    DerivedDefinition("<", ("lambda", "!", ">="), "(lambda (lhs rhs) (! (>= lhs rhs)))"),
    DerivedDefinition("<=", ("lambda", "!", ">"), "(lambda (lhs rhs) (! (> lhs rhs)))"),
)


# Signatures for hover/signature help in editor tooling.
BUILTIN_SIGNATURES: dict[str, str] = {
    "if": "(if cond then else)",
    "let": "(let name value body)",
    "lambda": "(lambda (params) body)",
    "+": "(+ lhs rhs)",
    "-": "(- lhs rhs)",
    "*": "(* lhs rhs)",
    "/": "(/ lhs rhs)",
    "!": "(! value)",
    "&&": "(&& lhs rhs)",
    "||": "(|| lhs rhs)",
    ">": "(> lhs rhs)",
    "=": "(= lhs rhs)",
    ">=": "(>= lhs rhs)",
    "<": "(< lhs rhs)",
    "<=": "(<= lhs rhs)",
}


def install_derived(env: Environment, definitions=DERIVED_DEFINITIONS) -> None:
    for definition in definitions:
        missing = [name for name in definition.requires if name not in env]
        if missing:
            raise PreludeError(
                f"Cannot define {definition.name} before {', '.join(missing)}"
            )
        logger.debug("Bootstrapping %s from %s", definition.name, definition.source)
        value = eval_string(definition.source, env)
        if isinstance(value, Lambda):
            value = replace(value, name=definition.name)
        env[definition.name] = value


def make_prelude() -> Environment:
    """Return a fresh root environment with every builtin installed."""
    env = Environment()
    register(env)
    install_derived(env)
    return env
