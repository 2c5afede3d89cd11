from __future__ import annotations

"""
Line index for lisp_compute programs.

Programs are line oriented and evaluation is pure, so the index simply runs
every program line through the evaluator, the same way the program runner
does, except that it keeps going after a failure. It records:
- diagnostics: one per failing line, with the evaluator's message
- calls: the operator name of each application line, for signature help
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from lisp_compute.errors import EvalError
from lisp_compute.interpreter import Interpreter, COMMENT_PREFIX, default_interpreter
from lisp_compute.reader.tokenizer import tokenize


BUILTIN_SIGNATURES: Dict[str, str] = {
    "display": "(display value)",
    "+": "(+ number ...)",
    "-": "(- number number ...)",
    "*": "(* number ...)",
    "/": "(/ dividend divisor)",
    "<": "(< a b)",
    "=": "(= a b)",
    ">": "(> a b)",
    "<=": "(<= a b)",
    ">=": "(>= a b)",
    "if": "(if condition then else)",
    "cons": "(cons head tail)",
    "car": "(car list)",
    "cdr": "(cdr list)",
    "list": "(list value ...)",
    "null?": "(null? value)",
    "and": "(and value ...)",
    "or": "(or value ...)",
    "begin": "(begin expr ...)",
    "let": "(let bindings body)",
    "cond": "(cond test result ...)",
    "vector": "(vector value ...)",
    "make-hash-table": "(make-hash-table)",
    "hash-set!": "(hash-set! table key value)",
    "hash-ref": "(hash-ref table key)",
    "vector-ref": "(vector-ref vector index)",
    "vector-length": "(vector-length vector)",
    "while": "(while condition body ...)",
    "for-each": "(for-each function list ...)",
    "length": "(length sequence)",
    "append": "(append list ...)",
    "abs": "(abs number)",
    "sqrt": "(sqrt number)",
    "expt": "(expt base exponent)",
}


@dataclass
class LineDiagnostic:
    line: int
    col: int
    message: str


@dataclass
class DocumentIndex:
    diagnostics: List[LineDiagnostic] = field(default_factory=list)
    calls: Dict[int, str] = field(default_factory=dict)  # line -> operator name


def _iter_program_lines(text: str):
    for i, raw in enumerate(text.split("\n")):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        col = len(raw) - len(raw.lstrip())
        yield i, col, line


def _operator_of(line: str) -> Optional[str]:
    if not (line.startswith("(") and line.endswith(")")):
        return None
    try:
        tokens = tokenize(line[1:-1])
    except EvalError:
        return None
    return tokens[0] if tokens else None


def check_document(text: str, interpreter: Interpreter | None = None) -> List[LineDiagnostic]:
    interp = interpreter or default_interpreter()
    diags: List[LineDiagnostic] = []
    for i, col, line in _iter_program_lines(text):
        try:
            interp.evaluate(line)
        except EvalError as e:
            diags.append(LineDiagnostic(line=i, col=col, message=str(e)))
    return diags


def build_index(text: str, interpreter: Interpreter | None = None) -> DocumentIndex:
    idx = DocumentIndex(diagnostics=check_document(text, interpreter))
    for i, _, line in _iter_program_lines(text):
        op = _operator_of(line)
        if op is not None:
            idx.calls[i] = op
    return idx
