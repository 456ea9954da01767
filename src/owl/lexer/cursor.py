"""Explicit scan state for the Owl lexer.

A Cursor owns everything one scan mutates: the normalized source
buffer, the read position, the line counter, the nesting depth and the
append-only token list. Scanner functions receive the cursor as their
first argument instead of sharing ambient instance fields, so each
scanner can be driven in isolation and a Lexer can scan any number of
times.

Thread Safety:
A Cursor belongs to exactly one scan. Never share one between threads.

"""

from __future__ import annotations

from owl.observers import NULL_OBSERVER, ScanObserver
from owl.tokens import Token, TokenType


class Cursor:
    """Read position over a source buffer, plus scan bookkeeping.

    ``peek()`` and ``advance()`` return ``""`` once the buffer is
    exhausted. Neither ever raises.

    Usage:
        >>> cursor = Cursor("ab")
        >>> cursor.peek(), cursor.advance(), cursor.advance(), cursor.advance()
        ('a', 'a', 'b', '')

    """

    __slots__ = (
        "source",
        "source_len",  # Cached len(source)
        "pos",
        "lineno",
        "depth",
        "tokens",
        "observer",
        "source_file",
        "lenient_string_literals",
    )

    def __init__(
        self,
        source: str,
        *,
        observer: ScanObserver | None = None,
        source_file: str | None = None,
        lenient_string_literals: bool = False,
    ) -> None:
        """Initialize cursor at the start of ``source``.

        Args:
            source: Source text with line endings already normalized
            observer: Receiver of scan events (defaults to a no-op)
            source_file: Optional source file path for error messages
            lenient_string_literals: Let string literals run to end of input
        """
        self.source = source
        self.source_len = len(source)
        self.pos = 0
        self.lineno = 1
        self.depth = 0
        self.tokens: list[Token] = []
        self.observer: ScanObserver = observer if observer is not None else NULL_OBSERVER
        self.source_file = source_file
        self.lenient_string_literals = lenient_string_literals

    # =========================================================================
    # Character navigation
    # =========================================================================

    def peek(self) -> str:
        """Return the next unconsumed character without consuming it.

        Returns:
            Next character or empty string at end of input.
        """
        if self.pos >= self.source_len:
            return ""
        return self.source[self.pos]

    def advance(self) -> str:
        """Consume and return the next character.

        Does not touch the line counter; newline bookkeeping belongs to
        the scanners, which decide whether a newline is tokenized.

        Returns:
            The consumed character or empty string at end of input.
        """
        if self.pos >= self.source_len:
            return ""
        char = self.source[self.pos]
        self.pos += 1
        return char

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= self.source_len

    # =========================================================================
    # Bookkeeping
    # =========================================================================

    def newline(self) -> None:
        """Advance the line counter by one."""
        self.lineno += 1
        self.observer.on_newline(self.lineno, self.depth)

    def emit(self, token_type: TokenType, value: str = "") -> Token:
        """Append a token stamped with the current line.

        Args:
            token_type: The token type.
            value: Text payload (text-carrying token types only).

        Returns:
            The appended token.
        """
        token = Token(token_type, self.lineno, value)
        self.tokens.append(token)
        self.observer.on_token(token, self.depth)
        return token

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, lineno={self.lineno}, depth={self.depth})"
