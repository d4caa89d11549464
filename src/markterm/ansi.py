"""ANSI SGR styling and OSC 8 hyperlinks."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import TextIO

from markterm.color import Color
from markterm.theme import ElementTheme

ESC = "\x1b"
RESET = f"{ESC}[0m"
BOLD = "1"
UNDERLINE = "4"

# OSC 8 open/close, terminated by ST (ESC \)
_LINK_OPEN = ESC + "]8;;{url}" + ESC + "\\"
_LINK_CLOSE = ESC + "]8;;" + ESC + "\\"

_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m|\x1b\]8;;[^\x1b]*\x1b\\")


class ColorChoice(Enum):
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


@dataclass(frozen=True, slots=True)
class Styled:
    """Text plus the SGR attributes to wrap it in."""

    text: str
    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    underline: bool = False

    def with_bold(self) -> Styled:
        return replace(self, bold=True)

    def with_underline(self) -> Styled:
        return replace(self, underline=True)

    def is_plain(self) -> bool:
        return self.fg is None and self.bg is None and not self.bold and not self.underline

    def codes(self) -> list[str]:
        """SGR parameters: attributes first, then background, then foreground."""
        codes: list[str] = []
        if self.bold:
            codes.append(BOLD)
        if self.underline:
            codes.append(UNDERLINE)
        if self.bg is not None:
            codes.append(f"48;2;{self.bg.r};{self.bg.g};{self.bg.b}")
        if self.fg is not None:
            codes.append(f"38;2;{self.fg.r};{self.fg.g};{self.fg.b}")
        return codes

    def __str__(self) -> str:
        if self.is_plain():
            return self.text
        return f"{ESC}[{';'.join(self.codes())}m{self.text}{RESET}"


def colorize(text: str, element: ElementTheme) -> Styled:
    """Apply an element's colors; absent colors leave the terminal default."""
    return Styled(text, fg=element.fg, bg=element.bg)


def hyperlink(url: str, label: str) -> str:
    return _LINK_OPEN.format(url=url) + label + _LINK_CLOSE


def strip_escapes(text: str) -> str:
    """Remove SGR and OSC 8 sequences, leaving only the visible text."""
    return _ESCAPE_RE.sub("", text)


def should_colorize(choice: ColorChoice, stream: TextIO) -> bool:
    if choice is ColorChoice.ALWAYS:
        return True
    if choice is ColorChoice.NEVER:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
