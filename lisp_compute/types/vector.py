from __future__ import annotations


class Vector(tuple):
    """Fixed-size sequence of values, built by ``(vector ...)``.

    A tuple subclass so it is never confused with a List (a plain ``list``).
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"
