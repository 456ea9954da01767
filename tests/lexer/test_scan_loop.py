"""Tests for the main scan loop."""

from pathlib import Path

import pytest

from owl.errors import (
    ErrorCode,
    UnexpectedEscapeError,
    UnexpectedTokenError,
    UnterminatedLiteralError,
)
from owl.lexer import Lexer
from owl.source import SourceFile
from owl.tokens import Token, TokenType


def types(source: str) -> list[TokenType]:
    return [t.type for t in Lexer(source).tokenize()]


class TestStructure:
    """Whitespace, newlines and end of file."""

    def test_empty_source(self) -> None:
        assert Lexer("").tokenize() == [Token(TokenType.EOF, 1)]

    def test_newlines_become_eol_tokens(self) -> None:
        tokens = Lexer("\n\n").tokenize()
        assert tokens == [
            Token(TokenType.EOL, 2),
            Token(TokenType.EOL, 3),
            Token(TokenType.EOF, 3),
        ]

    def test_horizontal_whitespace_skipped(self) -> None:
        assert types("  \t \n") == [TokenType.EOL, TokenType.EOF]

    def test_trailing_whitespace_at_end_of_input(self) -> None:
        assert types("a   ") == [TokenType.IDENTIFIER, TokenType.EOF]

    def test_crlf_normalized(self) -> None:
        tokens = Lexer("a\r\nb").tokenize()
        assert tokens == [
            Token(TokenType.IDENTIFIER, 1, "a"),
            Token(TokenType.EOL, 2),
            Token(TokenType.IDENTIFIER, 2, "b"),
            Token(TokenType.EOF, 2),
        ]

    def test_loaded_source_file_used_as_is(self) -> None:
        source = SourceFile(path=Path("/docs/page.owl").resolve(), text="a\nb")
        lexer = Lexer(source)

        assert lexer.source is source.text
        assert [t.type for t in lexer.tokenize()] == [
            TokenType.IDENTIFIER,
            TokenType.EOL,
            TokenType.IDENTIFIER,
            TokenType.EOF,
        ]

    def test_loaded_source_file_names_errors(self) -> None:
        path = Path("/docs/page.owl").resolve()
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Lexer(SourceFile(path=path, text="?")).tokenize()
        assert exc_info.value.source_file == str(path)


class TestDispatch:
    """Classification of single characters."""

    @pytest.mark.parametrize(
        "char,token_type",
        [
            ("(", TokenType.PAREN_OPEN),
            (")", TokenType.PAREN_CLOSE),
            ("{", TokenType.CURLY_OPEN),
            ("}", TokenType.CURLY_CLOSE),
            ("=", TokenType.ASSIGN),
            (",", TokenType.COMMA),
            (";", TokenType.SEMICOLON),
        ],
    )
    def test_punctuation(self, char: str, token_type: TokenType) -> None:
        assert types(char) == [token_type, TokenType.EOF]

    def test_assignment(self) -> None:
        tokens = Lexer("a = b, c").tokenize()
        assert tokens == [
            Token(TokenType.IDENTIFIER, 1, "a"),
            Token(TokenType.ASSIGN, 1),
            Token(TokenType.IDENTIFIER, 1, "b"),
            Token(TokenType.COMMA, 1),
            Token(TokenType.IDENTIFIER, 1, "c"),
            Token(TokenType.EOF, 1),
        ]

    def test_standalone_string_literal(self) -> None:
        tokens = Lexer('"abc"').tokenize()
        assert tokens == [Token(TokenType.STRING_LITERAL, 1, "abc"), Token(TokenType.EOF, 1)]

    def test_string_after_assign_is_literal(self) -> None:
        assert types('href = "x.html"') == [
            TokenType.IDENTIFIER,
            TokenType.ASSIGN,
            TokenType.STRING_LITERAL,
            TokenType.EOF,
        ]

    def test_top_level_escape_emits_nothing(self) -> None:
        assert types("\\{ a") == [TokenType.IDENTIFIER, TokenType.EOF]

    def test_line_stamping(self) -> None:
        tokens = Lexer("a\nb").tokenize()
        assert [t.lineno for t in tokens] == [1, 2, 2, 2]


class TestContentPosition:
    """Quoted blocks after { } and ; become CONTENT."""

    def test_content_after_curly_open(self) -> None:
        tokens = Lexer('title { "Hello" }').tokenize()
        assert tokens == [
            Token(TokenType.IDENTIFIER, 1, "title"),
            Token(TokenType.CURLY_OPEN, 1),
            Token(TokenType.CONTENT, 1, "Hello"),
            Token(TokenType.CURLY_CLOSE, 1),
            Token(TokenType.EOF, 1),
        ]

    def test_content_after_semicolon_spans_lines(self) -> None:
        lexer = Lexer('{;"a\nb"}')
        tokens = lexer.tokenize()
        assert [t.type for t in tokens] == [
            TokenType.CURLY_OPEN,
            TokenType.SEMICOLON,
            TokenType.CONTENT,
            TokenType.CURLY_CLOSE,
            TokenType.EOF,
        ]
        content = tokens[2]
        assert content.value == "a\nb"
        assert tokens[1].lineno == 1
        assert content.lineno == 2
        assert lexer.lineno == 2

    def test_content_after_curly_close(self) -> None:
        assert types('a { } "tail"') == [
            TokenType.IDENTIFIER,
            TokenType.CURLY_OPEN,
            TokenType.CURLY_CLOSE,
            TokenType.CONTENT,
            TokenType.EOF,
        ]

    def test_escaped_braces_in_content(self) -> None:
        lexer = Lexer('{"a\\{b\\}c"}')
        tokens = lexer.tokenize()
        assert tokens[1] == Token(TokenType.CONTENT, 1, "a{b}c")
        assert lexer.depth == 0

    def test_newline_after_brace_is_not_tokenized(self) -> None:
        lexer = Lexer("{\n}")
        assert [t.type for t in lexer.tokenize()] == [
            TokenType.CURLY_OPEN,
            TokenType.CURLY_CLOSE,
            TokenType.EOF,
        ]
        assert lexer.lineno == 2


class TestDepth:
    """Nesting depth is advisory and never enforced."""

    def test_depth_tracks_open_braces(self) -> None:
        lexer = Lexer("a { b { c")
        lexer.tokenize()
        assert lexer.depth == 2

    def test_unbalanced_close_goes_negative(self) -> None:
        lexer = Lexer("}}")
        lexer.tokenize()
        assert lexer.depth == -2

    def test_depth_before_scan(self) -> None:
        assert Lexer("{").depth == 0


class TestErrors:
    """Failures stop the scan without an EOF token."""

    def test_unexpected_token(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Lexer("a ? b").tokenize()
        assert exc_info.value.char == "?"
        assert exc_info.value.lineno == 1

    def test_digit_cannot_start_a_token(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            Lexer("1").tokenize()

    def test_non_decimal_numeric_ends_identifier(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Lexer("x\u00b2").tokenize()
        assert exc_info.value.char == "\u00b2"

    def test_unexpected_escape_in_content(self) -> None:
        with pytest.raises(UnexpectedEscapeError):
            Lexer('{ "a\\qb" }').tokenize()

    def test_unterminated_content(self) -> None:
        with pytest.raises(UnterminatedLiteralError):
            Lexer('{ "open').tokenize()

    def test_error_line_number(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Lexer("a\nb\n  #").tokenize()
        assert exc_info.value.lineno == 3

    def test_error_mentions_source_file(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            Lexer("?", source_file="page.owl").tokenize()
        assert str(exc_info.value) == "page.owl:1: Unexpected token: '?'"


class TestScanResult:
    """Status-code style results from Lexer.scan()."""

    def test_success(self) -> None:
        result = Lexer("a").scan()
        assert result.ok
        assert result.code is ErrorCode.NO_ERRORS
        assert result.error is None
        assert result.tokens[-1].type == TokenType.EOF

    def test_unexpected_escape_code(self) -> None:
        result = Lexer("a \\q").scan()
        assert not result.ok
        assert result.code is ErrorCode.UNEXPECTED_ESCAPE
        assert isinstance(result.error, UnexpectedEscapeError)
        assert all(t.type != TokenType.EOF for t in result.tokens)

    def test_partial_tokens_kept_for_diagnostics(self) -> None:
        result = Lexer("a ?").scan()
        assert result.code is ErrorCode.UNEXPECTED_TOKEN
        assert result.tokens == (Token(TokenType.IDENTIFIER, 1, "a"),)

    def test_unterminated_code(self) -> None:
        assert Lexer('"open').scan().code is ErrorCode.UNTERMINATED_LITERAL


class TestReentrancy:
    """A Lexer starts from fresh state on every scan."""

    def test_repeated_tokenize(self) -> None:
        lexer = Lexer('a { "b" }\nc')
        first = lexer.tokenize()
        second = lexer.tokenize()
        assert first == second
        assert first is not second
        assert lexer.lineno == 2
        assert lexer.depth == 0
