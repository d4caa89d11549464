"""Minimal LSP server for reference pages, unterminated span warnings only."""

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
from pygls.workspace import PositionCodec

from markterm import __version__
from markterm.lexer import InlineLexer
from markterm.render import split_lines
from markterm.tokens import BULLET_MARKER, INDENT_MARKER, TokenType

server = LanguageServer(
    "markterm-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def find_unterminated(source: str, codec: PositionCodec | None = None) -> list[Diagnostic]:
    """Warn about spans the renderer would silently drop.

    Columns are converted to the client's units by *codec* (UTF-16 by default).
    """
    codec = codec if codec is not None else PositionCodec()
    lines = split_lines(source)
    diagnostics: list[Diagnostic] = []
    for line_idx, line in enumerate(lines):
        # Only bullet and indent lines are scanned for inline spans
        if not line.startswith((BULLET_MARKER, INDENT_MARKER)):
            continue
        lexer = InlineLexer(line)
        lexer.tokenize()
        tok = lexer.unterminated
        if tok is None:
            continue
        what = "code span" if tok.type == TokenType.CODE else "link"
        diagnostics.append(
            Diagnostic(
                range=codec.range_to_client_units(
                    lines,
                    Range(
                        start=Position(line=line_idx, character=tok.start),
                        end=Position(line=line_idx, character=tok.end),
                    ),
                ),
                message=f"unterminated {what}; the rest of the line is not rendered",
                severity=DiagnosticSeverity.Warning,
                source="markterm",
            )
        )
    return diagnostics


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics = find_unterminated(doc.source, doc.position_codec)
    ls.text_document_publish_diagnostics(PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics))


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
