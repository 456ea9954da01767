"""Escape sequence resolution.

A backslash followed by one of a fixed set of characters expands to
literal or HTML-equivalent text. Anything else is an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from owl.errors import UnexpectedEscapeError

if TYPE_CHECKING:
    from owl.lexer.cursor import Cursor

# Line break for the rendered page, plus a real newline for the HTML source
NEWLINE_EXPANSION: Final = "<br/>\n"

# Tab simulated with three non-breaking spaces
TAB_EXPANSION: Final = "&nbsp;" * 3

ESCAPES: Final[dict[str, str]] = {
    "n": NEWLINE_EXPANSION,
    "t": TAB_EXPANSION,
    "{": "{",
    "}": "}",
    "(": "(",
    ")": ")",
    '"': '"',
}


def scan_escape(cursor: Cursor) -> str:
    """Consume a backslash escape and return its expansion.

    The cursor must be positioned on the backslash.

    Args:
        cursor: Scan state

    Returns:
        Expansion text for the escape.

    Raises:
        UnexpectedEscapeError: If the character after the backslash has no
            expansion (including end of input). The offending character is
            left unconsumed.
    """
    cursor.advance()  # \
    char = cursor.peek()
    expansion = ESCAPES.get(char) if char else None
    if expansion is None:
        raise UnexpectedEscapeError(char, cursor.lineno, cursor.source_file)
    cursor.advance()
    cursor.observer.on_escape(char, expansion, cursor.lineno, cursor.depth)
    return expansion


def skip_escape(cursor: Cursor) -> None:
    """Consume a backslash escape outside of content, discarding its expansion.

    Raises:
        UnexpectedEscapeError: As for scan_escape.
    """
    scan_escape(cursor)
