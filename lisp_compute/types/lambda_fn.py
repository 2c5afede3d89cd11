"""Lambda value representation.

The evaluator never builds a Lambda: there is no lambda literal syntax. The
type exists so the value model is complete and the printer can render it.
"""

from __future__ import annotations

from io import StringIO

from lisp_compute.types.environment import Environment


class Lambda:
    """A user function: parameter names, body lines and a captured environment."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: list[str], body: list[str], env: Environment | None = None
    ):
        self.params: list[str] = list(params)
        self.body: list[str] = list(body)
        self.env: Environment = env if env is not None else Environment()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(" ".join(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
