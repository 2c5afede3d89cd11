"""Runtime environment for lisp_compute.

The Environment maps Symbols to values. There are no nested scopes: an
interpreter owns exactly one top-level environment, fills it with the builtin
table and freezes it. Builtins are handed a fresh, empty scratch Environment on
every call.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from lisp_compute import LispValue
from lisp_compute.errors import (
    SchemeInvalidSymbol,
    SchemeFrozenEnvironment,
    SchemeUnknownFunction,
)
from lisp_compute.types.symbol import Symbol


class Environment:
    """Flat mapping from Symbols to values, optionally frozen."""

    __slots__ = ("vars", "_frozen")

    def __init__(self):
        self.vars: dict[Symbol, LispValue] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Environment:
        """Make the environment read-only. Returns self for chaining."""
        self._frozen = True
        return self

    def _check_writable(self, name: object) -> None:
        if self._frozen:
            raise SchemeFrozenEnvironment(f"Cannot define {name} in a frozen environment")

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`.

        Raises SchemeInvalidSymbol if `name` is not a Symbol and
        SchemeFrozenEnvironment once the environment has been frozen.
        """
        if not isinstance(name, Symbol):
            raise SchemeInvalidSymbol(f"Cannot define {name} as a symbol")
        self._check_writable(name)
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k in mapping:
            if not isinstance(k, Symbol):
                raise SchemeInvalidSymbol(f"Cannot define {k} as a symbol")
        self._check_writable(", ".join(str(k) for k in mapping))
        self.vars.update(mapping)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`; raises if unbound."""
        try:
            return self.vars[name]
        except KeyError:
            raise SchemeUnknownFunction(f"Unknown function: {name}") from None

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        return self.vars.get(name, default)

    def names(self) -> Iterator[str]:
        return (str(k) for k in self.vars)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(str(k) for k in self.vars))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<Environment {state} {self}>"
