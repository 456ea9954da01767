"""Identifier scanning."""

from __future__ import annotations

from typing import TYPE_CHECKING

from owl.tokens import TokenType

if TYPE_CHECKING:
    from owl.lexer.cursor import Cursor


def is_identifier_char(char: str) -> bool:
    """True for letters, decimal digits and underscore."""
    return char == "_" or (char != "" and (char.isalpha() or char.isdecimal()))


def scan_identifier(cursor: Cursor) -> str:
    """Consume a maximal run of identifier characters and emit an IDENTIFIER.

    The main loop only calls this when the next character is a letter;
    called elsewhere it may emit an empty identifier.

    Returns:
        The identifier text.
    """
    start = cursor.pos
    while is_identifier_char(cursor.peek()):
        cursor.advance()
    text = cursor.source[start : cursor.pos]
    cursor.emit(TokenType.IDENTIFIER, text)
    return text
