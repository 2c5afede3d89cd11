from __future__ import annotations

import re
from typing import Optional


NUMBER_RE = re.compile(
    r"[+-]?(?:"
    r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"  # decimal, optional exponent
    r"|inf(?:inity)?"
    r"|nan"
    r")\Z",
    re.IGNORECASE | re.ASCII,
)


def parse_number(text: str) -> Optional[float]:
    """Return `text` as a float when it is a numeric literal, else None."""
    if not NUMBER_RE.match(text):
        return None
    return float(text)


def is_string_literal(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')
