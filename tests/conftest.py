"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from markterm.ansi import strip_escapes
from markterm.lexer import tokenize
from markterm.theme import ElementTheme, Theme, get_default_theme
from markterm.tokens import Token, TokenType

ESC = "\x1b"


@pytest.fixture
def theme() -> Theme:
    return get_default_theme()


@pytest.fixture
def bare_theme() -> Theme:
    """A theme with no colors at all."""
    empty = ElementTheme()
    return Theme(header=empty, code_block=empty, indents=empty, link=empty, list=empty)


@pytest.fixture
def lex():
    """Return a helper that tokenizes a line and returns (type, value) pairs."""

    def _lex(line: str) -> list[tuple[TokenType, str]]:
        return [(t.type, t.value) for t in tokenize(line)]

    return _lex


def visible(text: str) -> str:
    """The text a terminal would show, without escape sequences."""
    return strip_escapes(text)


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
