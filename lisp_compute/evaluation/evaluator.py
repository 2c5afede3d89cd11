"""Core evaluator for lisp_compute.

There is no parse tree. A line of source is classified directly from its text:
an application is split into tokens and every argument token is evaluated by
calling back into the evaluator with that token's text.

Dispatch order, on the stripped text:

    1. empty             -> error "Empty expression"
    2. nil, ()           -> Nil
    3. ( ... )           -> application
    4. anything else     -> atom (number, string, boolean, bound name, symbol)
"""

from __future__ import annotations

from lisp_compute import LispValue
from lisp_compute.errors import SchemeSyntaxError, SchemeNestingError
from lisp_compute.evaluation.apply import apply
from lisp_compute.reader.atoms import parse_number, is_string_literal
from lisp_compute.reader.tokenizer import tokenize
from lisp_compute.types.environment import Environment
from lisp_compute.types.nil import Nil
from lisp_compute.types.symbol import Symbol


BOOLEAN_LITERALS = {"#t": True, "#f": False}


def evaluate(line: str, env: Environment, max_depth: int | None = None) -> LispValue:
    """Evaluate one expression. `max_depth` of None or 0 disables the nesting check."""
    return evaluate0(line, env, 0, max_depth)


def evaluate0(
    line: str,
    env: Environment,
    depth: int,
    max_depth: int | None = None,
) -> LispValue:
    if max_depth and depth > max_depth:
        raise SchemeNestingError("Maximum nesting depth exceeded")

    expr = line.strip()
    if not expr:
        raise SchemeSyntaxError("Empty expression")

    if expr == "nil" or expr == "()":
        return Nil

    if expr.startswith("(") and expr.endswith(")"):
        return evaluate_application(expr[1:-1], env, depth, max_depth)

    return evaluate_atom(expr, env)


def evaluate_application(
    inner: str,
    env: Environment,
    depth: int,
    max_depth: int | None = None,
) -> LispValue:
    tokens = tokenize(inner)
    if not tokens:
        raise SchemeSyntaxError("Empty function call")

    head, *tail = tokens
    # A bare boolean in operator position: (#t ...) is just #t.
    if head in BOOLEAN_LITERALS:
        return BOOLEAN_LITERALS[head]

    args = [evaluate0(token, env, depth + 1, max_depth) for token in tail]
    return apply(head, env, args)


def evaluate_atom(text: str, env: Environment) -> LispValue:
    number = parse_number(text)
    if number is not None:
        return number

    if is_string_literal(text):
        # no escape processing
        return text[1:-1]

    if text in BOOLEAN_LITERALS:
        return BOOLEAN_LITERALS[text]

    name = Symbol(text)
    if name in env:
        return env.lookup(name)

    # Unbound atoms are symbols, never errors.
    return name
