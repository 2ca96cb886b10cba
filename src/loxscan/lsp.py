"""Minimal LSP server for Lox: lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxscan import __version__
from loxscan.errors import ErrorReporter
from loxscan.scanner import tokenize

server = LanguageServer("loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per lexical error."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    lines = source.split("\n")

    reporter = ErrorReporter()
    tokenize(source, reporter)

    diagnostics: list[Diagnostic] = []
    for err in reporter.diagnostics:
        line = err.line - 1
        # Errors carry no column, so the whole line is highlighted
        width = len(lines[line].rstrip("\r")) if 0 <= line < len(lines) else 0
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=0),
                    end=Position(line=line, character=width),
                ),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source="loxscan",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
