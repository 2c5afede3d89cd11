from __future__ import annotations
import sys


class Symbol:
    """A bare name. Operators are bound to Symbols; unbound atoms evaluate to one.

    Symbols compare by name only and never equal the string of the same text,
    so ``foo`` and ``"foo"`` stay distinct values.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.id is other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Symbol, self.id))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
