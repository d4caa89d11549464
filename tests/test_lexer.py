"""Tests for the inline lexer: text, code and link spans."""

from __future__ import annotations

from markterm.lexer import InlineLexer, tokenize
from markterm.tokens import TokenType

from .conftest import assert_types


class TestText:
    def test_plain_line_is_one_token(self, lex) -> None:
        assert lex("just text") == [(TokenType.TEXT, "just text")]

    def test_empty_line(self, lex) -> None:
        assert lex("") == []

    def test_closing_delimiters_are_text(self, lex) -> None:
        assert lex("a > b") == [(TokenType.TEXT, "a > b")]

    def test_offsets(self) -> None:
        tokens = tokenize("ab")
        assert tokens[0].start == 0
        assert tokens[0].end == 2


class TestCodeSpans:
    def test_embedded_code(self, lex) -> None:
        assert lex("this is some `code` text") == [
            (TokenType.TEXT, "this is some "),
            (TokenType.CODE, "`code`"),
            (TokenType.TEXT, " text"),
        ]

    def test_code_offsets_include_backticks(self) -> None:
        tokens = tokenize("x `y` z")
        code = tokens[1]
        assert code.start == 2
        assert code.end == 5

    def test_adjacent_code_spans(self) -> None:
        tokens = tokenize("`a``b`")
        assert_types(tokens, [TokenType.CODE, TokenType.CODE])
        assert [t.value for t in tokens] == ["`a`", "`b`"]

    def test_empty_code_span(self, lex) -> None:
        assert lex("``") == [(TokenType.CODE, "``")]

    def test_link_delimiters_inside_code(self, lex) -> None:
        assert lex("`cat <file>`") == [(TokenType.CODE, "`cat <file>`")]


class TestLinkSpans:
    def test_embedded_link(self, lex) -> None:
        assert lex("see <http://a>") == [
            (TokenType.TEXT, "see "),
            (TokenType.LINK, "http://a"),
        ]

    def test_link_value_excludes_brackets(self) -> None:
        tokens = tokenize("<x>")
        assert tokens[0].value == "x"
        assert tokens[0].start == 0
        assert tokens[0].end == 3

    def test_backtick_inside_link(self, lex) -> None:
        assert lex("<a`b>") == [(TokenType.LINK, "a`b")]

    def test_code_then_link(self) -> None:
        tokens = tokenize("`x` and <y>")
        assert_types(tokens, [TokenType.CODE, TokenType.TEXT, TokenType.LINK])


class TestUnterminated:
    # Unclosed spans are dropped to the end of the line rather than emitted literally.

    def test_code_dropped(self, lex) -> None:
        assert lex("abc `unterminated") == [(TokenType.TEXT, "abc ")]

    def test_link_dropped(self, lex) -> None:
        assert lex("go to <http://x and more") == [(TokenType.TEXT, "go to ")]

    def test_dropped_after_closed_span(self, lex) -> None:
        assert lex("`ok` then `broken") == [
            (TokenType.CODE, "`ok`"),
            (TokenType.TEXT, " then "),
        ]

    def test_unterminated_recorded(self) -> None:
        lexer = InlineLexer("abc `unterminated")
        lexer.tokenize()
        tok = lexer.unterminated
        assert tok is not None
        assert tok.type == TokenType.CODE
        assert tok.value == "`unterminated"
        assert tok.start == 4
        assert tok.end == len("abc `unterminated")

    def test_unterminated_link_recorded(self) -> None:
        lexer = InlineLexer("x <y")
        lexer.tokenize()
        assert lexer.unterminated is not None
        assert lexer.unterminated.type == TokenType.LINK

    def test_nothing_recorded_when_closed(self) -> None:
        lexer = InlineLexer("a `b` <c>")
        lexer.tokenize()
        assert lexer.unterminated is None
