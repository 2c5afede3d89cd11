from __future__ import annotations

from lisp_compute import LispValue
from lisp_compute.errors import SchemeUnknownFunction
from lisp_compute.types.environment import Environment
from lisp_compute.types.lambda_fn import Lambda
from lisp_compute.types.symbol import Symbol


def is_function(value: LispValue) -> bool:
    """True for native operators. Lambdas are values, not callables."""
    return callable(value) and not isinstance(value, (Lambda, type))


def apply(name: str, env: Environment, args: list[LispValue]) -> LispValue:
    """Invoke the function bound to `name` with already-evaluated `args`.

    Each call gets its own empty scratch environment, discarded afterwards.
    """
    fn = env.get(Symbol(name))
    if not is_function(fn):
        raise SchemeUnknownFunction(f"Unknown function: {name}")
    return fn(Environment(), args)
