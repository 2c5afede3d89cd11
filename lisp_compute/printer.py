"""Rendering of runtime values to display strings.

    Number      3, 0.5, 0.0000001, NaN, inf
    Boolean     true / false
    List        [a, b, c]
    Vector      #(a b)
    HashTable   #<hash-table>
    Function    #<function>
    Lambda      #<lambda>
    Symbol      its name
    Nil         ()
"""

from __future__ import annotations

import math
from decimal import Decimal

from lisp_compute import LispValue
from lisp_compute.types.lambda_fn import Lambda
from lisp_compute.types.nil import Nil
from lisp_compute.types.symbol import Symbol
from lisp_compute.types.vector import Vector


def format_number(n: float) -> str:
    """Shortest round-trip decimal, positional (never exponent) notation."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n == 0:
        return "-0" if math.copysign(1.0, n) < 0 else "0"
    return format(Decimal(repr(n)).normalize(), "f")


def render(value: LispValue) -> str:
    if value is Nil:
        return "()"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Vector):
        return "#(" + " ".join(render(v) for v in value) + ")"
    if isinstance(value, list):
        return "[" + ", ".join(render(v) for v in value) + "]"
    if isinstance(value, dict):
        return "#<hash-table>"
    if isinstance(value, Lambda):
        return "#<lambda>"
    if callable(value):
        return "#<function>"
    return str(value)


def render_result(value: LispValue) -> str:
    """Runner form: strings, numbers and booleans as text; any other value is "result"."""
    if isinstance(value, (str, bool, int, float)):
        return render(value)
    return "result"
