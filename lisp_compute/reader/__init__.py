from lisp_compute.reader.tokenizer import tokenize
from lisp_compute.reader.atoms import parse_number, is_string_literal

__all__ = ["tokenize", "parse_number", "is_string_literal"]
