# Core type aliases for the lisp_compute data model.
# Runtime values are plain Python types where one maps cleanly
# (str, float, bool, list, dict) plus a few small classes for the tags
# Python has no native type for (Vector, Symbol, Nil, Lambda).
#
# Naming guidance:
# - LispValue:  an evaluated runtime value (any variant of the union).
# - BuiltinFn:  a native operator, called as fn(scratch_env, args).

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Native operator signature: (scratch environment, evaluated arguments) -> value
BuiltinFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
