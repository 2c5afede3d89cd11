"""Built-in functions for the lisp_compute runtime environment.

Every builtin is called as ``fn(env, expr)`` where ``env`` is a throwaway
scratch Environment and ``expr`` is the list of already-evaluated arguments.
Builtins never mutate their arguments and never touch the scratch environment;
it is part of the signature only. Failures raise an EvalError subclass whose
message is the user-visible error text.

The control forms (begin, let, cond, while, for-each) and the hash-table
operations receive arguments that are already evaluated. They select one of
those values and have no other effect.
"""
from __future__ import annotations

import math
import operator
import sys
from typing import Callable

from lisp_compute import LispValue, BuiltinFn
from lisp_compute.errors import SchemeArityError, SchemeTypeError, SchemeDomainError
from lisp_compute.printer import format_number
from lisp_compute.types.environment import Environment
from lisp_compute.types.nil import Nil
from lisp_compute.types.symbol import Symbol
from lisp_compute.types.vector import Vector


def is_number(value: LispValue) -> bool:
    """Numbers are floats; bools are excluded even though they are ints."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# -------------------------------
# Output
# -------------------------------
def display(env: Environment, expr: list[LispValue]) -> str:
    """Render a string, number or boolean as a string; anything else is "display"."""
    if len(expr) != 1:
        raise SchemeArityError("display requires exactly one argument")
    value = expr[0]
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(float(value))
    return "display"


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Return the sum of all arguments; 0 with no arguments."""
    total = 0.0
    for x in expr:
        if not is_number(x):
            raise SchemeTypeError("+ requires numeric arguments")
        total += x
    return float(total)


def sub(env: Environment, expr: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise SchemeArityError("- requires at least one argument")
    for x in expr:
        if not is_number(x):
            raise SchemeTypeError("- requires numeric arguments")
    if len(expr) == 1:
        return -float(expr[0])
    result = float(expr[0])
    for x in expr[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> float:
    """Return the product of all arguments; 1 with no arguments."""
    result = 1.0
    for x in expr:
        if not is_number(x):
            raise SchemeTypeError("* requires numeric arguments")
        result *= x
    return float(result)


def div(env: Environment, expr: list[LispValue]) -> float:
    """(/ a b) => a / b. Exactly 2 arguments, b must not be zero."""
    if len(expr) != 2:
        raise SchemeArityError("/ requires exactly two arguments")
    a, b = expr
    if not (is_number(a) and is_number(b)):
        raise SchemeTypeError("/ requires numeric arguments")
    if b == 0:
        raise SchemeDomainError("Division by zero")
    return float(a) / float(b)


def _powf(base: float, exponent: float) -> float:
    # IEEE pow: overflow gives inf, a negative base with a fractional exponent gives NaN
    odd = exponent.is_integer() and exponent % 2 == 1
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if (base < 0 and odd) else math.inf
    except ValueError:
        if base == 0.0:
            return -math.inf if (math.copysign(1.0, base) < 0 and odd) else math.inf
        return math.nan


def expt(env: Environment, expr: list[LispValue]) -> float:
    """(expt base exponent) => base ** exponent, floating point."""
    if len(expr) != 2:
        raise SchemeArityError("expt requires exactly two arguments")
    base, exponent = expr
    if not (is_number(base) and is_number(exponent)):
        raise SchemeTypeError("expt requires numeric arguments")
    return _powf(float(base), float(exponent))


def abs_(env: Environment, expr: list[LispValue]) -> float:
    if len(expr) != 1:
        raise SchemeArityError("abs requires exactly one argument")
    if not is_number(expr[0]):
        raise SchemeTypeError("abs requires a number")
    return abs(float(expr[0]))


def sqrt(env: Environment, expr: list[LispValue]) -> float:
    """Square root of a non-negative number."""
    if len(expr) != 1:
        raise SchemeArityError("sqrt requires exactly one argument")
    n = expr[0]
    if not is_number(n):
        raise SchemeTypeError("sqrt requires a number")
    if n < 0:
        raise SchemeDomainError("sqrt requires a non-negative number")
    return math.sqrt(float(n))


# -------------------------------
# Comparison
# -------------------------------
def _numeric_comparison(name: str, op: Callable[[float, float], bool]) -> BuiltinFn:
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        if len(expr) != 2:
            raise SchemeArityError(f"{name} requires exactly two arguments")
        a, b = expr
        if not (is_number(a) and is_number(b)):
            raise SchemeTypeError(f"{name} requires numeric arguments")
        return op(a, b)

    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"({name} a b) on two numbers."
    return compare


lt = _numeric_comparison("<", operator.lt)
eq = _numeric_comparison("=", operator.eq)
gt = _numeric_comparison(">", operator.gt)
lte = _numeric_comparison("<=", operator.le)
gte = _numeric_comparison(">=", operator.ge)


# -------------------------------
# Boolean logic and control
# -------------------------------
def if_(env: Environment, expr: list[LispValue]) -> LispValue:
    """(if cond then else): both branches are already evaluated; pick one."""
    if len(expr) != 3:
        raise SchemeArityError("if requires exactly three arguments")
    cond, then, otherwise = expr
    if cond is True:
        return then
    if cond is False:
        return otherwise
    raise SchemeTypeError("if condition must be boolean")


def logical_and(env: Environment, expr: list[LispValue]) -> LispValue:
    """#f if any argument is #f, else the last argument. #t with no arguments."""
    if not expr:
        return True
    for x in expr:
        if x is False:
            return False
    return expr[-1]


def logical_or(env: Environment, expr: list[LispValue]) -> LispValue:
    """#t if any argument is #t, else the last argument. #f with no arguments."""
    if not expr:
        return False
    for x in expr:
        if x is True:
            return True
    return expr[-1]


def begin(env: Environment, expr: list[LispValue]) -> LispValue:
    return expr[-1] if expr else Nil


def let(env: Environment, expr: list[LispValue]) -> LispValue:
    # bindings are never applied
    return expr[-1] if expr else Nil


def cond(env: Environment, expr: list[LispValue]) -> LispValue:
    """Scan (test, result) pairs; the first test that is not #f selects its result.

    Non-boolean tests count as true. With no selected pair the last argument is
    returned, or Nil when there are none.
    """
    if not expr:
        return Nil
    for i in range(0, len(expr) - 1, 2):
        if expr[i] is False:
            continue
        return expr[i + 1]
    return expr[-1]


def while_(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) < 2:
        raise SchemeArityError("while requires at least condition and body")
    return expr[0]


def for_each(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) < 2:
        raise SchemeArityError("for-each requires at least function and list")
    return expr[0]


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Prepend head to tail. A List tail is spliced, Nil is empty, anything else is appended."""
    if len(expr) != 2:
        raise SchemeArityError("cons requires exactly two arguments")
    head, tail = expr
    if isinstance(tail, list):
        return [head, *tail]
    if tail is Nil:
        return [head]
    return [head, tail]


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise SchemeArityError("car requires exactly one argument")
    lst = expr[0]
    if not isinstance(lst, list):
        raise SchemeTypeError("car requires a list argument")
    return lst[0] if lst else Nil


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise SchemeArityError("cdr requires exactly one argument")
    lst = expr[0]
    if not isinstance(lst, list):
        raise SchemeTypeError("cdr requires a list argument")
    return lst[1:] if len(lst) > 1 else Nil


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def is_null(env: Environment, expr: list[LispValue]) -> bool:
    """Predicate: #t for Nil and for an empty List."""
    if len(expr) != 1:
        raise SchemeArityError("null? requires exactly one argument")
    value = expr[0]
    return value is Nil or (isinstance(value, list) and not value)


def length(env: Environment, expr: list[LispValue]) -> float:
    """Element count of a List or Vector, character count of a String."""
    if len(expr) != 1:
        raise SchemeArityError("length requires exactly one argument")
    value = expr[0]
    if isinstance(value, (list, Vector, str)):
        return float(len(value))
    raise SchemeTypeError("length requires a list, vector, or string")


def append(env: Environment, expr: list[LispValue]) -> LispValue:
    """Concatenate Lists; other arguments are added as single elements."""
    if not expr:
        return Nil
    result: list[LispValue] = []
    for x in expr:
        if isinstance(x, list):
            result.extend(x)
        else:
            result.append(x)
    return result


# -------------------------------
# Vectors and hash tables
# -------------------------------
def vector(env: Environment, expr: list[LispValue]) -> Vector:
    return Vector(expr)


def _as_index(n: float) -> int:
    # negative and NaN indices clamp to 0, fractions truncate
    if math.isnan(n) or n <= 0:
        return 0
    if math.isinf(n):
        return sys.maxsize
    return int(n)


def vector_ref(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) != 2:
        raise SchemeArityError("vector-ref requires exactly two arguments")
    vec, index = expr
    if not (isinstance(vec, Vector) and is_number(index)):
        raise SchemeTypeError("vector-ref requires a vector and numeric index")
    idx = _as_index(float(index))
    if idx >= len(vec):
        raise SchemeDomainError("vector index out of bounds")
    return vec[idx]


def vector_length(env: Environment, expr: list[LispValue]) -> float:
    if len(expr) != 1:
        raise SchemeArityError("vector-length requires exactly one argument")
    if not isinstance(expr[0], Vector):
        raise SchemeTypeError("vector-length requires a vector")
    return float(len(expr[0]))


def make_hash_table(env: Environment, expr: list[LispValue]) -> dict:
    return {}


def hash_set(env: Environment, expr: list[LispValue]) -> LispValue:
    """Validate the arguments and return the value. No table is modified."""
    if len(expr) != 3:
        raise SchemeArityError("hash-set! requires exactly three arguments")
    table, key, value = expr
    if not (isinstance(table, dict) and isinstance(key, str)):
        raise SchemeTypeError("hash-set! requires a hash table, string key, and value")
    return value


def hash_ref(env: Environment, expr: list[LispValue]) -> str:
    """Validate the arguments and describe the key. Stored contents are never read."""
    if len(expr) != 2:
        raise SchemeArityError("hash-ref requires exactly two arguments")
    table, key = expr
    if not (isinstance(table, dict) and isinstance(key, str)):
        raise SchemeTypeError("hash-ref requires a hash table and string key")
    return f"value for key: {key}"


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    'display': display,
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '<': lt,
    '=': eq,
    '>': gt,
    '<=': lte,
    '>=': gte,
    'if': if_,
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'list': list_builtin,
    'null?': is_null,
    'and': logical_and,
    'or': logical_or,
    'begin': begin,
    'let': let,
    'cond': cond,
    'vector': vector,
    'make-hash-table': make_hash_table,
    'hash-set!': hash_set,
    'hash-ref': hash_ref,
    'vector-ref': vector_ref,
    'vector-length': vector_length,
    'while': while_,
    'for-each': for_each,
    'length': length,
    'append': append,
    'abs': abs_,
    'sqrt': sqrt,
    'expt': expt,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})
