"""Observers for structural scan events.

The lexer never prints. It reports what it does to a ScanObserver:
tokens emitted, lines advanced, escapes resolved and errors raised.
Observers have no influence on the token stream.

- NullObserver: ignores everything (default at ERROR_ONLY/BASIC verbosity)
- LoggingObserver: writes one debug line per event through ``logging``
- RecordingObserver: keeps events in a list, for tests and tooling

Thread Safety:
Observers are called synchronously from the scanning thread. The
provided implementations hold no shared state beyond their own instance.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from owl.utils.logger import get_logger

if TYPE_CHECKING:
    from owl.errors import ScanError
    from owl.tokens import Token


class ScanObserver(Protocol):
    """Protocol for receivers of scan events."""

    def on_token(self, token: Token, depth: int) -> None:
        """Called after a token is appended to the token list."""
        ...

    def on_newline(self, lineno: int, depth: int) -> None:
        """Called after the line counter advanced to ``lineno``."""
        ...

    def on_escape(self, char: str, expansion: str, lineno: int, depth: int) -> None:
        """Called after an escape sequence was resolved."""
        ...

    def on_error(self, error: ScanError) -> None:
        """Called when a scan error is about to propagate."""
        ...


class NullObserver:
    """Observer that does nothing."""

    __slots__ = ()

    def on_token(self, token: Token, depth: int) -> None:
        pass

    def on_newline(self, lineno: int, depth: int) -> None:
        pass

    def on_escape(self, char: str, expansion: str, lineno: int, depth: int) -> None:
        pass

    def on_error(self, error: ScanError) -> None:
        pass


# Shared instance; NullObserver is stateless
NULL_OBSERVER = NullObserver()


class LoggingObserver:
    """Observer that logs every event.

    Event lines are logged at DEBUG and look like::

        D:01 L:007 CURLY_OPEN

    where D is the nesting depth and L the line number, zero-padded to
    ``line_width`` digits so that a whole file lines up. Errors are
    logged at ERROR.

    """

    __slots__ = ("_logger", "_line_width")

    def __init__(self, line_width: int = 1, logger: logging.Logger | None = None) -> None:
        """Initialize logging observer.

        Args:
            line_width: Digits to pad line numbers to
            logger: Target logger (defaults to ``owl.lexer``)
        """
        self._line_width = max(1, line_width)
        self._logger = logger or get_logger("owl.lexer")

    def _log_elem(self, lineno: int, depth: int, text: str) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "D:%02d L:%0*d %s", depth, self._line_width, lineno, text
            )

    def on_token(self, token: Token, depth: int) -> None:
        if token.has_value:
            self._log_elem(token.lineno, depth, f"{token.type.name}: {token.value}")
        else:
            self._log_elem(token.lineno, depth, token.type.name)

    def on_newline(self, lineno: int, depth: int) -> None:
        self._log_elem(lineno, depth, "Newline")

    def on_escape(self, char: str, expansion: str, lineno: int, depth: int) -> None:
        self._log_elem(lineno, depth, f"Escape: \\{char} -> {expansion!r}")

    def on_error(self, error: ScanError) -> None:
        self._logger.error("%s. Aborting.", error)


class RecordingObserver:
    """Observer that records events as tuples.

    Each entry of ``events`` is ``(kind, payload...)``, e.g.
    ``("token", Token(...), 0)`` or ``("newline", 2, 0)``.

    Usage:
        >>> observer = RecordingObserver()
        >>> _ = Lexer("a", config=ScanConfig(observer=observer)).tokenize()
        >>> observer.tokens
        [Token(IDENTIFIER, 'a', 1), Token(EOF, 1)]

    """

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def on_token(self, token: Token, depth: int) -> None:
        self.events.append(("token", token, depth))

    def on_newline(self, lineno: int, depth: int) -> None:
        self.events.append(("newline", lineno, depth))

    def on_escape(self, char: str, expansion: str, lineno: int, depth: int) -> None:
        self.events.append(("escape", char, expansion, lineno))

    def on_error(self, error: ScanError) -> None:
        self.events.append(("error", error))

    @property
    def tokens(self) -> list[Token]:
        """Tokens seen, in emission order."""
        return [e[1] for e in self.events if e[0] == "token"]

    @property
    def errors(self) -> list[ScanError]:
        """Errors seen."""
        return [e[1] for e in self.events if e[0] == "error"]

    def kinds(self) -> list[str]:
        """Event kinds in order."""
        return [e[0] for e in self.events]
