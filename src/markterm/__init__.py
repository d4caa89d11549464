"""Render reference-page markdown as styled terminal text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from markterm.theme import Theme

__version__ = "0.1.0"


def to_ansi(source: str, theme: Theme | None = None) -> str:
    """Render markdown source to a string with ANSI styling (default theme if none given)."""
    from markterm.render import render_lines, split_lines
    from markterm.theme import get_default_theme

    if theme is None:
        theme = get_default_theme()
    body = "".join(f"{line}\n" for line in render_lines(split_lines(source), theme))
    return body + "\n\n"
