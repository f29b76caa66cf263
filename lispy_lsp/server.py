from __future__ import annotations

"""
A minimal pygls-based Language Server for lispy.

Features:
- Text synchronization and document store
- Diagnostics: unmatched or stray parentheses
- Hover: prelude signatures and let/lambda bindings
- Completion: prelude names and bindings
- Signature Help: for prelude names
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
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
    DocumentSymbol,
    DocumentSymbolParams,
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
    SymbolKind,
)

from lispy.builtin.prelude import BUILTIN_SIGNATURES
from lispy.config import get_log_level
from lispy_lsp.indexer import DocumentIndex, build_index, callee_before, word_at


logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class LispyLanguageServer(LanguageServer):
    CMD_NAME = "lispy-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1")
        self.documents: Dict[str, DocumentState] = {}


ls = LispyLanguageServer()


def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(problem.line, problem.col),
            message=problem.message,
            severity=DiagnosticSeverity.Error,
            source=LispyLanguageServer.CMD_NAME,
        )
        for problem in idx.problems
    ]


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, diagnostics_for(idx))


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # pygls has already applied the content changes to its workspace copy.
    doc = ls.workspace.get_text_document(uri)
    _update(uri, doc.source)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Hover ---
def hover_text(state: DocumentState, word: str) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = state.index.symbols.get(word)
    if sdef is not None:
        return f"{word} ({sdef.kind}, bound at {sdef.line + 1}:{sdef.col + 1})"
    return None


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = word_at(state.text, params.position.line, params.position.character)
    contents = hover_text(state, word) if word else None
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    state = ls.documents.get(params.text_document.uri)
    if state:
        items.extend(
            CompletionItem(label=name, kind=CompletionItemKind.Variable)
            for name in state.index.symbols
            if name not in BUILTIN_SIGNATURES
        )
    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
def signature_for(callee: str) -> Optional[SignatureInformation]:
    sig = BUILTIN_SIGNATURES.get(callee)
    if not sig:
        return None
    # "(name a b)" -> parameters a, b; lambda's "(params)" stays one parameter
    params_text = sig[1:-1].split(" ", 1)[1] if " " in sig else ""
    parameters = [ParameterInformation(label=p) for p in params_text.split(" ") if p]
    return SignatureInformation(label=sig, parameters=parameters)


@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    lines = state.text.splitlines(True)
    if params.position.line >= len(lines):
        return None
    prefix = lines[params.position.line][: params.position.character]
    callee = callee_before(prefix)
    info = signature_for(callee) if callee else None
    if info is None:
        return None
    return SignatureHelp(signatures=[info], active_signature=0, active_parameter=0)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Variable if sdef.kind == "var" else SymbolKind.TypeParameter,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


def main() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    logger.info("Starting %s over stdio", LispyLanguageServer.CMD_NAME)
    ls.start_io()


if __name__ == "__main__":
    main()
