"""RGB colors parsed from hex strings."""

from __future__ import annotations

from dataclasses import dataclass

from markterm.errors import ColorError
from markterm.tokens import is_hex_digit


@dataclass(frozen=True, slots=True)
class Color:
    """A 24-bit color, one 0-255 channel each for red, green and blue."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Parse ``#RGB``, ``#RRGGBB`` or the same without the leading ``#``.

        Short forms expand each digit, so ``#f80`` is ``#ff8800``.
        """
        code = hex_color.replace("#", "")

        if len(code) == 3:
            pairs = [ch * 2 for ch in code]
        elif len(code) == 6:
            pairs = [code[0:2], code[2:4], code[4:6]]
        else:
            raise ColorError(
                f"invalid color length {len(code)} in '{hex_color}' (expected 3 or 6 hex digits)",
                hex_color,
            )

        for ch in code:
            if not is_hex_digit(ch):
                raise ColorError(f"invalid hex digit '{ch}' in color '{hex_color}'", hex_color)

        r, g, b = (int(pair, 16) for pair in pairs)
        return cls(r, g, b)
