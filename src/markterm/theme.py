"""Element themes and the default theme."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from markterm.color import Color
from markterm.errors import ColorError, ThemeError

ELEMENT_NAMES = ("header", "code_block", "indents", "link", "list")
_ELEMENT_KEYS = ("fg", "bg")


@dataclass(frozen=True, slots=True)
class ElementTheme:
    """Foreground and background for one element; None means the terminal default."""

    fg: Color | None = None
    bg: Color | None = None

    @classmethod
    def from_hex(cls, fg: str | None = None, bg: str | None = None) -> ElementTheme:
        return cls(
            fg=Color.from_hex(fg) if fg is not None else None,
            bg=Color.from_hex(bg) if bg is not None else None,
        )


@dataclass(frozen=True, slots=True)
class Theme:
    """Styles for every element the renderer knows about."""

    # "# " lines
    header: ElementTheme
    # `...` spans and whole-line code
    code_block: ElementTheme
    # "> " lines
    indents: ElementTheme
    # <...> spans
    link: ElementTheme
    # "- " lines
    list: ElementTheme


def get_default_theme() -> Theme:
    return Theme(
        header=ElementTheme.from_hex(None, "#6155FB"),
        code_block=ElementTheme.from_hex("#FF6060", "#303030"),
        indents=ElementTheme.from_hex("#555", None),
        link=ElementTheme.from_hex("#008787", None),
        list=ElementTheme.from_hex(None, None),
    )


def theme_from_config(table: dict[str, Any], base: Theme | None = None) -> Theme:
    """Build a Theme from a ``[theme]`` TOML table.

    Each element sub-table present replaces that element outright (a missing
    ``fg`` or ``bg`` key means no color); elements not mentioned keep the
    value from *base*, which defaults to the default theme.
    """
    theme = base if base is not None else get_default_theme()

    for name, entry in table.items():
        key = f"theme.{name}"
        if name not in ELEMENT_NAMES:
            raise ThemeError(f"unknown theme element '{name}'", key)
        if not isinstance(entry, dict):
            raise ThemeError(f"theme element '{name}' must be a table", key)

        colors: dict[str, str | None] = {"fg": None, "bg": None}
        for attr, value in entry.items():
            attr_key = f"{key}.{attr}"
            if attr not in _ELEMENT_KEYS:
                raise ThemeError(f"unknown theme key '{attr}' (expected fg or bg)", attr_key)
            if not isinstance(value, str):
                raise ThemeError(f"color for '{attr}' must be a string", attr_key)
            colors[attr] = value

        try:
            element = ElementTheme.from_hex(colors["fg"], colors["bg"])
        except ColorError as exc:
            raise ThemeError(exc.message, key) from exc
        theme = replace(theme, **{name: element})

    return theme
