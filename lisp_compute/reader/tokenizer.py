"""
Tokenizer for the interior of one application.

The caller strips the outer parentheses; this module splits what is left into a
flat list of token strings:

    - whitespace (space, tab, newline) separates plain tokens
    - "..." is one token, quotes included, whitespace and parens kept verbatim
    - (...) is one token, nested parens included, copied verbatim
    - anything else, a stray ')' included, extends the current plain token

Nested runs are not re-tokenized here. Each token is a complete sub-expression
that the evaluator hands back to itself.
"""

from __future__ import annotations

from lisp_compute.errors import SchemeSyntaxError

WHITESPACE = frozenset(" \t\n")


def match_paren(text: str, start: int) -> int:
    """Return the index just past the ')' closing the '(' at `start`.

    Quotes are not tracked inside the run. Raises SchemeSyntaxError when the
    input ends with the depth still positive.
    """
    depth = 0
    pos = start
    n = len(text)
    while pos < n:
        ch = text[pos]
        pos += 1
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return pos
    raise SchemeSyntaxError("Unmatched parentheses")


def tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    in_string = False
    pos = 0
    n = len(text)

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    while pos < n:
        ch = text[pos]

        if ch == '"':
            if in_string:
                current.append(ch)
                flush()
                in_string = False
            else:
                flush()
                current.append(ch)
                in_string = True
            pos += 1
            continue

        if in_string:
            current.append(ch)
            pos += 1
            continue

        if ch == "(":
            flush()
            end = match_paren(text, pos)
            tokens.append(text[pos:end])
            pos = end
            continue

        if ch in WHITESPACE:
            flush()
        else:
            current.append(ch)
        pos += 1

    # an unterminated string is flushed like any other pending token
    flush()
    return tokens
