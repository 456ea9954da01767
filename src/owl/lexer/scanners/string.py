"""Standalone string literal scanning.

String literals are raw: backslashes are kept verbatim. Compare with
content blocks (scanners/content.py), which expand escapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from owl.errors import UnterminatedLiteralError
from owl.tokens import TokenType

if TYPE_CHECKING:
    from owl.lexer.cursor import Cursor


def scan_string_literal(cursor: Cursor) -> str:
    """Consume a quoted string literal and emit a STRING_LITERAL.

    The cursor must be positioned on the opening quote. Newlines inside the
    literal advance the line counter but are not tokenized. The token is
    stamped with the line of the closing quote.

    Returns:
        The literal text without quotes.

    Raises:
        UnterminatedLiteralError: If input ends before the closing quote,
            unless the cursor allows lenient string literals, in which case
            the literal runs to end of input.
    """
    start_lineno = cursor.lineno
    cursor.advance()  # "
    start = cursor.pos

    while (char := cursor.peek()) != '"':
        if not char:
            if cursor.lenient_string_literals:
                break
            raise UnterminatedLiteralError(
                "string literal", start_lineno, cursor.lineno, cursor.source_file
            )
        if char == "\n":
            cursor.newline()
        cursor.advance()

    text = cursor.source[start : cursor.pos]
    cursor.advance()  # closing ", no-op at end of input
    cursor.emit(TokenType.STRING_LITERAL, text)
    return text
