"""Runtime environment for tinylisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Function calls and `let` create a child frame
chained to the captured environment, so creating a scope is O(1) and a lookup
walks at most the depth of the chain. Closures hold their defining frame by
reference and see definitions made in it after they were created.
"""

from __future__ import annotations

from typing import Mapping, Optional

from tinylisp import LispValue
from tinylisp.types.errors import LispInvalidSymbol, LispUnboundSymbol
from tinylisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame; last write wins.

        Raises LispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises LispUnboundSymbol if not found anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise LispUnboundSymbol(f"unbound symbol: {name}")
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def child_with(self, bindings: Mapping[Symbol, LispValue] | None = None) -> Environment:
        """Return a new frame chained to this one, holding `bindings`."""
        child = Environment(outer=self)
        if bindings:
            child.update(bindings)
        return child

