"""ContextVar-based scan configuration for Owl.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The active config is read by every Lexer created without an explicit
``config`` argument.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit configuration
    lexer = Lexer(source, config=ScanConfig(verbosity=Verbosity.DEBUG))

    # Or use the context manager
    with scan_config_context(ScanConfig(lenient_string_literals=True)):
        tokens = Lexer(source).tokenize()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from owl.observers import ScanObserver


class Verbosity(Enum):
    """How much the lexer reports while it runs.

    - ERROR_ONLY: only scan failures
    - BASIC: progress messages (file read, scan finished)
    - DEBUG: one line per token, newline and escape

    """

    ERROR_ONLY = 0
    BASIC = 1
    DEBUG = 2

    @classmethod
    def parse(cls, name: str) -> Verbosity:
        """Look up a verbosity by name, ignoring case and underscores.

        Accepts both ``"ErrorOnly"`` and ``"error_only"``.

        Raises:
            ValueError: If no verbosity has that name.
        """
        wanted = name.replace("_", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == wanted:
                return member
        raise ValueError(f"Unknown verbosity: {name!r}")


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is intentionally excluded. It is per-call state and
    lives on the Lexer instance.

    Attributes:
        verbosity: Diagnostic level; drives the default LoggingObserver
        observer: Receives structural events; None selects a default
            based on verbosity
        lenient_string_literals: Let an unterminated string literal run to
            end of input instead of failing

    """

    verbosity: Verbosity = Verbosity.BASIC
    observer: ScanObserver | None = None
    lenient_string_literals: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. ``verbosity`` may be given as a name.

        Example:
            >>> config = ScanConfig.from_dict({"verbosity": "debug", "x": 1})
            >>> config.verbosity
            <Verbosity.DEBUG: 2>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        verbosity = filtered.get("verbosity")
        if isinstance(verbosity, str):
            filtered["verbosity"] = Verbosity.parse(verbosity)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(verbosity=Verbosity.DEBUG)):
        ...     tokens = Lexer("a = b").tokenize()

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "Verbosity",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
