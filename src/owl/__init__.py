"""
Owl — a small markup language that compiles to HTML.

This package is the lexical front end: it turns Owl source into the
ordered token sequence that the tree builder and the HTML code
generator consume.

Quick Start:
    >>> from owl import tokenize
    >>> tokenize('title { "Hello\\tWorld" }')
    [Token(IDENTIFIER, 'title', 1), Token(CURLY_OPEN, 1), Token(CONTENT, 'Hello&nbsp;&nbsp;&nbsp;World', 1), Token(CURLY_CLOSE, 1), Token(EOF, 1)]

    >>> # Status-code style, as used by the command line
    >>> from owl import scan
    >>> scan("oops ?").code
    <ErrorCode.UNEXPECTED_TOKEN: 1>

Command line:
    owl -i page.owl --validate
"""

from pathlib import Path

from owl.config import (
    ScanConfig,
    Verbosity,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from owl.errors import (
    ErrorCode,
    OwlError,
    ScanError,
    SourceDecodeError,
    SourceNotFoundError,
    UnexpectedEscapeError,
    UnexpectedTokenError,
    UnterminatedLiteralError,
)
from owl.lexer import Cursor, Lexer, ScanResult
from owl.observers import LoggingObserver, NullObserver, RecordingObserver, ScanObserver
from owl.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from owl.serialization import tokens_from_json, tokens_to_json
from owl.source import SourceFile, load_source, normalize_line_endings
from owl.tokens import TEXT_TOKEN_TYPES, Token, TokenType

__version__ = "0.3.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Tokenize Owl source text.

    Args:
        source: Owl source text
        source_file: Optional source file path for error messages
        config: Scan configuration (defaults to the context config)

    Returns:
        Token list ending with exactly one EOF token.

    Raises:
        ScanError: If the source cannot be tokenized.
    """
    return Lexer(source, source_file=source_file, config=config).tokenize()


def scan(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> ScanResult:
    """Tokenize Owl source text, reporting failure as an ErrorCode."""
    return Lexer(source, source_file=source_file, config=config).scan()


def scan_file(path: str | Path, *, config: ScanConfig | None = None) -> ScanResult:
    """Load, normalize and scan an Owl file.

    Raises:
        SourceNotFoundError: If the file does not exist.
        SourceDecodeError: If the file is not valid UTF-8.
    """
    return Lexer(load_source(path), config=config).scan()


__all__ = [
    # Core API
    "tokenize",
    "scan",
    "scan_file",
    "Lexer",
    "Cursor",
    "ScanResult",
    # Tokens
    "Token",
    "TokenType",
    "TEXT_TOKEN_TYPES",
    # Source
    "SourceFile",
    "load_source",
    "normalize_line_endings",
    # Configuration
    "ScanConfig",
    "Verbosity",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Observers
    "ScanObserver",
    "NullObserver",
    "LoggingObserver",
    "RecordingObserver",
    # Errors
    "ErrorCode",
    "OwlError",
    "ScanError",
    "SourceDecodeError",
    "SourceNotFoundError",
    "UnexpectedEscapeError",
    "UnexpectedTokenError",
    "UnterminatedLiteralError",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Serialization
    "tokens_from_json",
    "tokens_to_json",
    # Version
    "__version__",
]
