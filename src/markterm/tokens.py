"""Token types, block kinds, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class BlockKind(Enum):
    HEADER = auto()  # "# " prefix
    BULLET = auto()  # "- " prefix
    INDENT = auto()  # "> " prefix
    CODE = auto()  # whole line wrapped in backticks
    PLAIN = auto()  # anything else, passed through untouched


class TokenType(Enum):
    TEXT = auto()  # verbatim run of characters
    CODE = auto()  # `...`, value keeps both backticks
    LINK = auto()  # <...>, value is the text between the brackets


@dataclass(frozen=True, slots=True)
class Token:
    """An inline token with its 0-based character offsets in the line (end exclusive)."""

    type: TokenType
    value: str
    start: int
    end: int


# Block markers, checked in this order
BULLET_MARKER = "- "
HEADER_MARKER = "# "
INDENT_MARKER = "> "

CODE_DELIMITER = "`"
LINK_OPEN = "<"
LINK_CLOSE = ">"


def is_hex_digit(ch: str) -> bool:
    """Return True if ch is a hexadecimal digit."""
    return ch != "" and ch in "0123456789abcdefABCDEF"
