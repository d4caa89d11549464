"""Terminal renderer: turns markdown lines into ANSI-styled text."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from markterm.ansi import ColorChoice, colorize, hyperlink, should_colorize, strip_escapes
from markterm.lexer import tokenize
from markterm.theme import Theme
from markterm.tokens import (
    BULLET_MARKER,
    CODE_DELIMITER,
    HEADER_MARKER,
    INDENT_MARKER,
    BlockKind,
    TokenType,
)

BULLET_GLYPH = "•"
INDENT_GLYPH = "│ "

# Brace markers around user-fillable arguments in page examples
_PLACEHOLDER_MARKERS = ("{{", "}}")


def render(
    text: str,
    theme: Theme,
    *,
    color: ColorChoice = ColorChoice.ALWAYS,
    file: TextIO | None = None,
) -> None:
    """Render an in-memory document to *file* (stdout by default)."""
    _write(render_lines(split_lines(text), theme), color, file)


def render_file(
    path: str | Path,
    theme: Theme,
    *,
    color: ColorChoice = ColorChoice.ALWAYS,
    file: TextIO | None = None,
) -> None:
    """Render a markdown file line by line. Open/read failures raise OSError."""
    with open(path, encoding="utf-8", newline="\n") as f:
        lines = (_strip_eol(line) for line in f)
        _write(render_lines(lines, theme), color, file)


def split_lines(text: str) -> list[str]:
    """Split *text* on line feeds only, dropping one trailing carriage return per line.

    A final line feed does not start another line. Other line-break
    characters such as form feed stay part of their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [_strip_eol(line) for line in lines]


def _strip_eol(line: str) -> str:
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


def render_lines(lines: Iterable[str], theme: Theme) -> Iterator[str]:
    """Yield each rendered line, indented by one space, in source order."""
    for line in lines:
        _, rendered = classify_line(line, theme)
        yield f" {rendered}"


def _write(rendered: Iterable[str], color: ColorChoice, file: TextIO | None) -> None:
    out = file if file is not None else sys.stdout
    keep_escapes = should_colorize(color, out)
    for line in rendered:
        print(line if keep_escapes else strip_escapes(line), file=out)
    print("\n", file=out)


# ---------------------------------------------------------------------------
# Block level
# ---------------------------------------------------------------------------


def classify_line(line: str, theme: Theme) -> tuple[BlockKind, str]:
    """Pick the block renderer for *line* and return its kind and output.

    Checked in order: bullet, header, indent, whole-line code; anything
    else is returned unchanged as PLAIN.
    """
    if line.startswith(BULLET_MARKER):
        return BlockKind.BULLET, render_bullet(line, theme)
    if line.startswith(HEADER_MARKER):
        return BlockKind.HEADER, render_header(line, theme)
    if line.startswith(INDENT_MARKER):
        return BlockKind.INDENT, render_indent(line, theme)
    if line.startswith(CODE_DELIMITER) and line.endswith(CODE_DELIMITER):
        return BlockKind.CODE, render_code(line, theme)
    return BlockKind.PLAIN, line


def render_header(line: str, theme: Theme) -> str:
    title = f" {line[len(HEADER_MARKER):]} "
    return "\n" + str(colorize(title, theme.header).with_bold())


def render_bullet(line: str, theme: Theme) -> str:
    # Substitution runs on rendered output; the leading "-" is never inside a span.
    return render_text(line, theme).replace("-", BULLET_GLYPH, 1)


def render_indent(line: str, theme: Theme) -> str:
    return render_text(line, theme).replace(INDENT_MARKER, INDENT_GLYPH, 1)


# ---------------------------------------------------------------------------
# Inline spans
# ---------------------------------------------------------------------------


def render_text(line: str, theme: Theme) -> str:
    """Style the code and link spans of *line*, leaving other text verbatim.

    An unterminated span is dropped together with the rest of the line.
    """
    parts: list[str] = []
    for tok in tokenize(line):
        if tok.type == TokenType.CODE:
            parts.append(render_code(tok.value, theme))
        elif tok.type == TokenType.LINK:
            parts.append(render_link(tok.value, theme))
        else:
            parts.append(tok.value)
    return "".join(parts)


def render_code(span: str, theme: Theme) -> str:
    """Style a backtick-delimited span (delimiters included in *span*)."""
    inner = f" {span[1:-1]} "
    for marker in _PLACEHOLDER_MARKERS:
        inner = inner.replace(marker, "")
    return str(colorize(inner, theme.code_block))


def render_link(url: str, theme: Theme) -> str:
    label = colorize(url, theme.link).with_underline()
    return hyperlink(url, str(label))
