"""Error types for color and theme configuration."""

from __future__ import annotations


class ColorError(Exception):
    """Raised when a hex color string cannot be parsed."""

    def __init__(self, message: str, value: str) -> None:
        self.message = message
        self.value = value
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}"


class ThemeError(Exception):
    """Raised on the first invalid entry of a theme table, with its dotted key."""

    def __init__(self, message: str, key: str) -> None:
        self.message = message
        self.key = key
        super().__init__(self.format())

    def format(self, filename: str = "markterm.toml") -> str:
        gutter = " " * 2
        return f"error: {self.message}\n{gutter}--> {filename}: {self.key}"
