from __future__ import annotations

"""
A minimal pygls-based Language Server for lisp_compute programs.

Features:
- Text synchronization and document store
- Diagnostics: every program line that fails to evaluate, with its message
- Hover: builtin signatures
- Completion: builtin names
- Signature Help: for builtins

Evaluation has no side effects, so diagnostics come from evaluating each line.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SIGNATURE_HELP,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    ParameterInformation,
    Position,
    Range,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureInformation,
    TextDocumentSyncKind,
)
from pygls.server import LanguageServer

from lisp_compute_lsp.indexer import build_index, BUILTIN_SIGNATURES, DocumentIndex

logger = logging.getLogger(__name__)

SOURCE = "lisp-compute-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class LispComputeLanguageServer(LanguageServer):
    CMD_NAME = "lisp-compute-ls"
    VERSION = "v0.1"

    def __init__(self):
        # full sync: every change event carries the whole document
        super().__init__(
            self.CMD_NAME, self.VERSION, text_document_sync_kind=TextDocumentSyncKind.Full
        )
        self.documents: Dict[str, DocumentState] = {}


ls = LispComputeLanguageServer()


# --- Text sync ---
def _update_document(uri: str, text: str) -> DocumentState:
    state = DocumentState(text=text, index=build_index(text))
    ls.documents[uri] = state
    logger.debug("indexed %s: %d diagnostics", uri, len(state.index.diagnostics))
    return state


@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = _update_document(uri, params.text_document.text or "")
    ls.publish_diagnostics(uri, make_diagnostics(state))


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    state = _update_document(uri, text)
    ls.publish_diagnostics(uri, make_diagnostics(state))


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def make_diagnostics(state: DocumentState) -> List[Diagnostic]:
    lines = state.text.split("\n")
    diags: List[Diagnostic] = []
    for d in state.index.diagnostics:
        end = len(lines[d.line].rstrip()) if d.line < len(lines) else d.col + 1
        diags.append(
            Diagnostic(
                range=Range(
                    start=Position(line=d.line, character=d.col),
                    end=Position(line=d.line, character=max(end, d.col + 1)),
                ),
                message=d.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    if word not in BUILTIN_SIGNATURES:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=BUILTIN_SIGNATURES[word]))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    callee = _extract_callee_name(_get_line_prefix(state.text, params.position))
    if callee is None:
        # cursor before the opening paren: use the line's operator
        callee = state.index.calls.get(params.position.line)
    sig = BUILTIN_SIGNATURES.get(callee) if callee else None
    if not sig:
        return None

    # "(name p1 p2)" -> parameters p1, p2
    params_list = sig[1:-1].split()[1:]
    parameters = [ParameterInformation(label=p) for p in params_list]
    return SignatureHelp(
        signatures=[SignatureInformation(label=sig, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


# --- Helpers ---

def _get_line_prefix(text: str, pos: Position) -> str:
    # Return the text from start of line up to pos
    lines = text.split("\n")
    if pos.line >= len(lines):
        return ""
    return lines[pos.line][: pos.character]


def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.split("\n")
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in " \t()\r\"":
        start -= 1
    while end < len(line) and line[end] not in " \t()\r\"":
        end += 1
    return line[start:end] or None


def _extract_callee_name(prefix: str) -> Optional[str]:
    # last '(' and the token after it
    lp = prefix.rfind("(")
    if lp == -1:
        return None
    tail = prefix[lp + 1:].split()
    return tail[0] if tail else None


if __name__ == "__main__":
    # Run the language server over stdio
    ls.start_io()
