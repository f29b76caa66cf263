"""Runtime environment for lispy.

The Environment stores bindings of symbol names to evaluated expressions and
supports nested scopes via an `outer` link. Many child scopes may share one
outer scope; a closure keeps its defining scope alive for as long as the
closure itself is reachable.
"""

from __future__ import annotations

from typing import Iterator, Optional

from lispy.types.errors import UnboundSymbolError
from lispy.types.expression import Expression


class Environment:
    """Hierarchical mapping from symbol names to expressions."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Expression] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Expression) -> None:
        """Bind `name` in this scope, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Expression:
        """Look up the value bound to `name`, raising UnboundSymbolError if absent."""
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(name)
        return env.vars[name]

    def bind_or_assign(self, name: str, value: Expression) -> None:
        """Overwrite `name` where it is bound in the chain, else bind it locally."""
        env = self.find(name)
        if env is None:
            env = self
        env.vars[name] = value

    def child(self) -> Environment:
        return Environment(outer=self)

    def names(self) -> Iterator[str]:
        """Every name visible from this scope, innermost first, without repeats."""
        seen: set[str] = set()
        env: Optional[Environment] = self
        while env is not None:
            for name in env.vars:
                if name not in seen:
                    seen.add(name)
                    yield name
            env = env.outer

    def __getitem__(self, name: str) -> Expression:
        return self.lookup(name)

    def __setitem__(self, name: str, value: Expression) -> None:
        self.bind_or_assign(name, value)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None
