"""Tests for hex color parsing."""

from __future__ import annotations

import pytest

from markterm.color import Color
from markterm.errors import ColorError


class TestValidColors:
    def test_six_digits_black(self) -> None:
        assert Color.from_hex("#000000") == Color(0, 0, 0)

    def test_three_digits_black(self) -> None:
        assert Color.from_hex("#000") == Color(0, 0, 0)

    def test_six_digits_white(self) -> None:
        assert Color.from_hex("#FFFFFF") == Color(255, 255, 255)

    def test_three_digits_white(self) -> None:
        color = Color.from_hex("#FFF")
        assert (color.r, color.g, color.b) == (255, 255, 255)

    def test_without_hash(self) -> None:
        assert Color.from_hex("6155FB") == Color(0x61, 0x55, 0xFB)

    def test_lowercase_digits(self) -> None:
        assert Color.from_hex("#ff6060") == Color(255, 96, 96)

    @pytest.mark.parametrize(
        ("short", "long"),
        [("#fff", "#ffffff"), ("#f00", "#ff0000"), ("#555", "#555555"), ("1a2", "11aa22")],
    )
    def test_short_form_expands_each_digit(self, short: str, long: str) -> None:
        assert Color.from_hex(short) == Color.from_hex(long)

    def test_immutable(self) -> None:
        color = Color.from_hex("#123")
        with pytest.raises(AttributeError):
            color.r = 0  # type: ignore[misc]


class TestInvalidLength:
    @pytest.mark.parametrize("code", ["", "0", "00", "0000", "00000", "0000000"])
    def test_bad_length(self, code: str) -> None:
        with pytest.raises(ColorError, match="invalid color length"):
            Color.from_hex(code)

    @pytest.mark.parametrize("code", ["#", "#0", "#00", "#0000", "#00000", "#0000000"])
    def test_bad_length_with_hash(self, code: str) -> None:
        with pytest.raises(ColorError, match="invalid color length"):
            Color.from_hex(code)


class TestInvalidDigits:
    @pytest.mark.parametrize("code", ["#GG0011", "#00GG11", "#00AAZZ"])
    def test_bad_channel(self, code: str) -> None:
        with pytest.raises(ColorError, match="invalid hex digit") as exc_info:
            Color.from_hex(code)
        assert exc_info.value.value == code
        assert code in exc_info.value.message

    def test_bad_short_form(self) -> None:
        with pytest.raises(ColorError, match="invalid hex digit"):
            Color.from_hex("#0g0")

    def test_sign_is_not_a_digit(self) -> None:
        with pytest.raises(ColorError, match="invalid hex digit"):
            Color.from_hex("#+1+1+1")

    def test_format_has_error_prefix(self) -> None:
        with pytest.raises(ColorError) as exc_info:
            Color.from_hex("#xyz")
        assert exc_info.value.format().startswith("error:")
