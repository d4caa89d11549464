"""Inline lexer: splits one line into text, code and link tokens."""

from __future__ import annotations

from enum import Enum, auto

from markterm.tokens import CODE_DELIMITER, LINK_CLOSE, LINK_OPEN, Token, TokenType


class _State(Enum):
    PLAIN = auto()
    IN_CODE = auto()
    IN_LINK = auto()


class InlineLexer:
    """Scan a single line left to right, one character at a time.

    Spans do not nest: inside a code span only a closing backtick is
    significant, inside a link only ``>``. A span still open at the end of
    the line produces no token at all; what was dropped is kept in
    :attr:`unterminated`.
    """

    def __init__(self, line: str) -> None:
        self._line = line
        self._state = _State.PLAIN
        self._span_start = 0
        self._text: list[str] = []
        self._text_start = 0
        self._tokens: list[Token] = []
        self.unterminated: Token | None = None

    def tokenize(self) -> list[Token]:
        """Tokenize the line and return the token list."""
        for idx, ch in enumerate(self._line):
            if self._state == _State.IN_CODE:
                if ch == CODE_DELIMITER:
                    raw = self._line[self._span_start : idx + 1]
                    self._close_span(TokenType.CODE, raw, idx + 1)
            elif self._state == _State.IN_LINK:
                if ch == LINK_CLOSE:
                    inner = self._line[self._span_start + 1 : idx]
                    self._close_span(TokenType.LINK, inner, idx + 1)
            elif ch == CODE_DELIMITER:
                self._open_span(_State.IN_CODE, idx)
            elif ch == LINK_OPEN:
                self._open_span(_State.IN_LINK, idx)
            else:
                if not self._text:
                    self._text_start = idx
                self._text.append(ch)

        if self._state == _State.PLAIN:
            self._flush_text()
        else:
            tt = TokenType.CODE if self._state == _State.IN_CODE else TokenType.LINK
            self.unterminated = Token(
                tt, self._line[self._span_start :], self._span_start, len(self._line)
            )

        return self._tokens

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def _open_span(self, state: _State, idx: int) -> None:
        self._flush_text()
        self._state = state
        self._span_start = idx

    def _close_span(self, tt: TokenType, value: str, end: int) -> None:
        self._tokens.append(Token(tt, value, self._span_start, end))
        self._state = _State.PLAIN

    def _flush_text(self) -> None:
        if self._text:
            text = "".join(self._text)
            self._tokens.append(
                Token(TokenType.TEXT, text, self._text_start, self._text_start + len(text))
            )
            self._text = []


def tokenize(line: str) -> list[Token]:
    """Convenience function: tokenize one line and return its token list."""
    return InlineLexer(line).tokenize()
