from lisp_compute.types.nil import Nil, NilType
from lisp_compute.types.symbol import Symbol
from lisp_compute.types.vector import Vector
from lisp_compute.types.environment import Environment
from lisp_compute.types.lambda_fn import Lambda

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Vector",
    "Environment",
    "Lambda",
]
