import pytest
from lsprotocol.types import (
    CompletionParams,
    DiagnosticSeverity,
    HoverParams,
    Position,
    SignatureHelpParams,
    TextDocumentIdentifier,
)

from lisp_compute.builtin.env_builtin import BUILTINS
from lisp_compute_lsp.indexer import BUILTIN_SIGNATURES, build_index, check_document
from lisp_compute_lsp import server

URI = "file:///tmp/program.scm"

PROGRAM = """; sample
(+ 1 2)
  (foo 1)

(/ 1 0)
(display "ok")
"""


@pytest.fixture
def document():
    server._update_document(URI, PROGRAM)
    yield URI
    server.ls.documents.pop(URI, None)


def test_signatures_cover_every_builtin():
    assert set(BUILTIN_SIGNATURES) == set(BUILTINS)
    for name, sig in BUILTIN_SIGNATURES.items():
        assert sig.startswith(f"({name}")
        assert sig.endswith(")")


def test_check_document_reports_every_failing_line():
    diags = check_document(PROGRAM)
    assert [(d.line, d.col, d.message) for d in diags] == [
        (2, 2, "Unknown function: foo"),
        (4, 0, "Division by zero"),
    ]


def test_check_document_clean_program():
    assert check_document("(+ 1 2)\n; done\n") == []


def test_build_index_records_operators():
    idx = build_index(PROGRAM)
    assert idx.calls == {1: "+", 2: "foo", 4: "/", 5: "display"}
    assert len(idx.diagnostics) == 2


def test_build_index_tolerates_unbalanced_lines():
    idx = build_index("(f (g)\n")
    assert idx.calls == {}
    assert [d.message for d in idx.diagnostics] == ["Unmatched parentheses"]


def test_make_diagnostics(document):
    diags = server.make_diagnostics(server.ls.documents[document])
    assert [d.message for d in diags] == ["Unknown function: foo", "Division by zero"]
    first = diags[0]
    assert first.severity == DiagnosticSeverity.Error
    assert (first.range.start.line, first.range.start.character) == (2, 2)
    assert first.range.end.character == len("  (foo 1)")
    assert first.source == "lisp-compute-ls"


def test_hover_on_builtin(document):
    hover = server.on_hover(
        HoverParams(text_document=TextDocumentIdentifier(uri=document), position=Position(line=5, character=3))
    )
    assert hover is not None
    assert hover.contents.value == "(display value)"


def test_hover_on_unknown_word(document):
    params = HoverParams(text_document=TextDocumentIdentifier(uri=document), position=Position(line=2, character=4))
    assert server.on_hover(params) is None


def test_completion_lists_builtins():
    params = CompletionParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=0))
    result = server.on_completion(params)
    assert {item.label for item in result.items} == set(BUILTIN_SIGNATURES)


def test_signature_help(document):
    params = SignatureHelpParams(
        text_document=TextDocumentIdentifier(uri=document), position=Position(line=4, character=3)
    )
    help_ = server.on_signature_help(params)
    assert help_.signatures[0].label == "(/ dividend divisor)"
    assert [p.label for p in help_.signatures[0].parameters] == ["dividend", "divisor"]


def test_signature_help_at_line_start_uses_indexed_operator(document):
    params = SignatureHelpParams(
        text_document=TextDocumentIdentifier(uri=document), position=Position(line=5, character=0)
    )
    help_ = server.on_signature_help(params)
    assert help_.signatures[0].label == "(display value)"


def test_signature_help_without_call(document):
    params = SignatureHelpParams(
        text_document=TextDocumentIdentifier(uri=document), position=Position(line=0, character=0)
    )
    assert server.on_signature_help(params) is None


@pytest.mark.parametrize(
    "text,line,character,expected",
    [
        ("(vector-ref v 0)", 0, 3, "vector-ref"),
        ("(null? x)", 0, 1, "null?"),
        ("(+ 1 2)", 0, 1, "+"),
        ("(+ 1 2)", 3, 0, None),
        ('(display "x")', 0, 0, None),
    ],
)
def test_extract_word_at(text, line, character, expected):
    assert server._extract_word_at(text, Position(line=line, character=character)) == expected


@pytest.mark.parametrize(
    "prefix,expected",
    [
        ("(car ", "car"),
        ("(+ 1 (expt 2", "expt"),
        ("  (", None),
        ("no call", None),
    ],
)
def test_extract_callee_name(prefix, expected):
    assert server._extract_callee_name(prefix) == expected
