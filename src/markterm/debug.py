"""--debug line classification dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from markterm.lexer import InlineLexer
from markterm.render import classify_line
from markterm.theme import Theme
from markterm.tokens import BlockKind, Token

# Only these block kinds run the inline lexer
_INLINE_KINDS = (BlockKind.BULLET, BlockKind.INDENT)


def dump_lines(lines: Iterable[str], theme: Theme, *, file: TextIO | None = None) -> None:
    """Print each line's block kind and inline tokens to *file* (stderr by default)."""
    out = file if file is not None else sys.stderr
    for lineno, line in enumerate(lines, start=1):
        kind, _ = classify_line(line, theme)
        out.write(f"{lineno:>4} {kind.name} {line!r}\n")
        if kind not in _INLINE_KINDS:
            continue
        lexer = InlineLexer(line)
        for tok in lexer.tokenize():
            _dump_token(tok, out)
        if lexer.unterminated is not None:
            _dump_token(lexer.unterminated, out, prefix="Unterminated", suffix=" dropped")


def _dump_token(tok: Token, f: TextIO, prefix: str = "", suffix: str = "") -> None:
    name = tok.type.name.title()
    f.write(f"       {prefix}{name}({tok.value!r}) @{tok.start}..{tok.end}{suffix}\n")
