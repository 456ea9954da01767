"""Content block scanning.

After ``{``, ``}`` and ``;`` the language allows an optional quoted
block of text::

    section { "Welcome to\tOwl" }

The block is captured as one CONTENT token with escape sequences
already expanded. Without an opening quote the scanner does nothing,
so trailing text stays an optional annotation of the punctuation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from owl.errors import UnterminatedLiteralError
from owl.lexer.scanners.escape import scan_escape
from owl.tokens import Token, TokenType

if TYPE_CHECKING:
    from owl.lexer.cursor import Cursor


def skip_whitespace(cursor: Cursor) -> None:
    """Consume all whitespace, counting newlines without tokenizing them."""
    while (char := cursor.peek()) and char.isspace():
        if char == "\n":
            cursor.newline()
        cursor.advance()


def scan_content(cursor: Cursor) -> Token | None:
    """Scan an optional quoted content block.

    Leading whitespace is always consumed, newlines included. If the next
    character is then a double quote, everything up to the matching
    unescaped quote becomes a CONTENT token, stamped with the line of the
    closing quote.

    Args:
        cursor: Scan state, positioned just after the introducing punctuation

    Returns:
        The CONTENT token, or None if no quoted block follows.

    Raises:
        UnexpectedEscapeError: On an unrecognized escape inside the block.
        UnterminatedLiteralError: If input ends before the closing quote.
    """
    skip_whitespace(cursor)
    if cursor.peek() != '"':
        return None

    start_lineno = cursor.lineno
    cursor.advance()  # "
    parts: list[str] = []

    while (char := cursor.peek()) != '"':
        if not char:
            raise UnterminatedLiteralError(
                "content", start_lineno, cursor.lineno, cursor.source_file
            )
        if char == "\n":
            cursor.newline()
            parts.append(cursor.advance())
        elif char == "\\":
            parts.append(scan_escape(cursor))
        else:
            parts.append(cursor.advance())

    cursor.advance()  # "
    return cursor.emit(TokenType.CONTENT, "".join(parts))
