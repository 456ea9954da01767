"""Exception classes for Owl.

Provides standardized exceptions for error handling throughout Owl.
Every scan failure maps onto an ErrorCode so that callers which branch
on a status value (the CLI, validate-only mode) can do so without
catching exceptions themselves.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Outcome of a scan.

    NO_ERRORS is zero; everything else is a failure and doubles as the
    CLI exit status.
    """

    NO_ERRORS = 0
    UNEXPECTED_TOKEN = 1
    UNEXPECTED_ESCAPE = 2
    UNTERMINATED_LITERAL = 3


class OwlError(Exception):
    """Base exception for all Owl errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(OwlError):
    """Error during lexical analysis.

    Raised when a scanner meets input it cannot tokenize. Scan errors are
    not recoverable: the scan stops and no EOF token is appended.
    """

    code: ErrorCode = ErrorCode.UNEXPECTED_TOKEN

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        char: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            char: Offending character ("" at end of input)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.char = char
        self.source_file = source_file

        # Build formatted message
        if source_file and lineno is not None:
            formatted = f"{source_file}:{lineno}: {message}"
        elif source_file:
            formatted = f"{source_file}: {message}"
        elif lineno is not None:
            formatted = f"{message} at line {lineno}"
        else:
            formatted = message

        super().__init__(formatted)


def describe_char(char: str) -> str:
    """Render a character for error messages."""
    if not char:
        return "end of input"
    return repr(char)


class UnexpectedTokenError(ScanError):
    """The main scan loop met a character it has no rule for."""

    code = ErrorCode.UNEXPECTED_TOKEN

    def __init__(self, char: str, lineno: int, source_file: str | None = None) -> None:
        super().__init__(
            f"Unexpected token: {describe_char(char)}",
            lineno=lineno,
            char=char,
            source_file=source_file,
        )


class UnexpectedEscapeError(ScanError):
    """A backslash was followed by a character with no escape expansion."""

    code = ErrorCode.UNEXPECTED_ESCAPE

    def __init__(self, char: str, lineno: int, source_file: str | None = None) -> None:
        super().__init__(
            f"Unexpected escape character: {describe_char(char)}",
            lineno=lineno,
            char=char,
            source_file=source_file,
        )


class UnterminatedLiteralError(ScanError):
    """A quoted block reached end of input before its closing quote."""

    code = ErrorCode.UNTERMINATED_LITERAL

    def __init__(
        self,
        kind: str,
        start_lineno: int,
        lineno: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize unterminated literal error.

        Args:
            kind: What was being scanned ("content" or "string literal")
            start_lineno: Line of the opening quote (reported as lineno)
            lineno: Line at which input ran out (kept as end_lineno)
            source_file: Path to source file (optional)
        """
        self.kind = kind
        self.end_lineno = lineno
        super().__init__(
            f"Unterminated {kind}",
            lineno=start_lineno,
            char="",
            source_file=source_file,
        )


class SourceNotFoundError(OwlError, FileNotFoundError):
    """The input file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: '{path}'")


class SourceDecodeError(OwlError, ValueError):
    """The input file is not valid text in the expected encoding."""

    def __init__(self, path: str, encoding: str, reason: str) -> None:
        self.path = path
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Cannot decode '{path}' as {encoding}: {reason}")
