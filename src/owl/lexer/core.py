"""Character-level lexer for the Owl markup language.

The main scan loop classifies the next unconsumed character and either
emits a structural token directly or delegates to a scanner:

- horizontal whitespace is skipped
- ``\\n`` runs become one EOL token per newline
- ``"`` starts a raw string literal
- a letter starts an identifier
- ``\\`` is a top-level escape (validated, expansion discarded)
- ``( ) { } = , ;`` are punctuation; ``{``, ``}`` and ``;`` may be
  followed by a quoted content block

Any other character aborts the scan.

Thread Safety:
All scan state lives in a Cursor created per call to tokenize(), so a
Lexer may be scanned repeatedly. Do not scan one Lexer from two threads
at once.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter

from owl.config import ScanConfig, Verbosity, get_scan_config
from owl.errors import ErrorCode, ScanError, UnexpectedTokenError
from owl.lexer.cursor import Cursor
from owl.lexer.scanners import (
    scan_content,
    scan_identifier,
    scan_string_literal,
    skip_escape,
)
from owl.observers import NULL_OBSERVER, LoggingObserver, ScanObserver
from owl.profiling import get_scan_accumulator
from owl.source import SourceFile, line_number_width, normalize_line_endings
from owl.tokens import CONTENT_INTRODUCERS, PUNCTUATION, Token, TokenType
from owl.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of Lexer.scan().

    Attributes:
        code: ErrorCode.NO_ERRORS on success
        tokens: Token sequence; when the scan failed this is the partial
            sequence up to the error (no EOF) and must not be handed on
        error: The ScanError that stopped the scan, if any

    """

    code: ErrorCode
    tokens: tuple[Token, ...] = field(default=())
    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        """True if the scan finished without errors."""
        return self.code is ErrorCode.NO_ERRORS


class Lexer:
    """Tokenizer for Owl source text.

    Usage:
            >>> lexer = Lexer('title { "Hi" }')
            >>> lexer.tokenize()
        [Token(IDENTIFIER, 'title', 1), Token(CURLY_OPEN, 1), Token(CONTENT, 'Hi', 1), Token(CURLY_CLOSE, 1), Token(EOF, 1)]

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_cursor",
    )

    def __init__(
        self,
        source: str | SourceFile,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Owl source text, whose ``\\r\\n`` line endings are
                normalized here, or a loaded SourceFile, whose text is
                already normalized and used as is
            source_file: Optional source file path for error messages
                (defaults to the SourceFile path)
            config: Scan configuration (defaults to the context config)
        """
        if isinstance(source, SourceFile):
            self._source = source.text
            if source_file is None:
                source_file = str(source.path)
        else:
            self._source = normalize_line_endings(source)
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()
        self._cursor: Cursor | None = None

    @property
    def source(self) -> str:
        """The normalized source buffer."""
        return self._source

    @property
    def lineno(self) -> int:
        """Line counter of the most recent scan (1 before any scan)."""
        return self._cursor.lineno if self._cursor is not None else 1

    @property
    def depth(self) -> int:
        """Nesting depth of the most recent scan (0 before any scan)."""
        return self._cursor.depth if self._cursor is not None else 0

    def _make_observer(self) -> ScanObserver:
        if self._config.observer is not None:
            return self._config.observer
        if self._config.verbosity is Verbosity.DEBUG:
            return LoggingObserver(line_width=line_number_width(self._source))
        return NULL_OBSERVER

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Token list ending with exactly one EOF token.

        Raises:
            ScanError: On the first character sequence that cannot be
                tokenized. No EOF token is appended.
        """
        cursor = Cursor(
            self._source,
            observer=self._make_observer(),
            source_file=self._source_file,
            lenient_string_literals=self._config.lenient_string_literals,
        )
        self._cursor = cursor

        logger.info("Processing %s", self._source_file or "<string>")
        start = perf_counter()
        try:
            self._scan(cursor)
        except ScanError as error:
            cursor.observer.on_error(error)
            self._record(cursor, start, failed=True)
            raise
        elapsed_ms = self._record(cursor, start, failed=False)
        logger.info("Lexical analysis finished after %.2fms", elapsed_ms)
        return cursor.tokens

    def scan(self) -> ScanResult:
        """Tokenize the whole source, reporting failure as an ErrorCode.

        Returns:
            ScanResult whose code tells the caller whether to go on to tree
            building and code generation.
        """
        try:
            tokens = self.tokenize()
        except ScanError as error:
            partial = tuple(self._cursor.tokens) if self._cursor is not None else ()
            return ScanResult(code=error.code, tokens=partial, error=error)
        return ScanResult(code=ErrorCode.NO_ERRORS, tokens=tuple(tokens))

    def _record(self, cursor: Cursor, start: float, *, failed: bool) -> float:
        elapsed_ms = (perf_counter() - start) * 1000
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(len(self._source), len(cursor.tokens), elapsed_ms, failed=failed)
        return elapsed_ms

    def _scan(self, cursor: Cursor) -> None:
        """Main scan loop."""
        while not cursor.at_end:
            while (char := cursor.peek()) and char != "\n" and char.isspace():
                cursor.advance()

            if not char:
                break

            if char == "\n":
                while cursor.peek() == "\n":
                    cursor.advance()
                    cursor.newline()
                    cursor.emit(TokenType.EOL)

            elif char == '"':
                scan_string_literal(cursor)

            elif char.isalpha():
                scan_identifier(cursor)

            elif char == "\\":
                skip_escape(cursor)

            else:
                token_type = PUNCTUATION.get(char)
                if token_type is None:
                    raise UnexpectedTokenError(char, cursor.lineno, cursor.source_file)

                cursor.advance()
                if token_type is TokenType.CURLY_OPEN:
                    cursor.depth += 1
                elif token_type is TokenType.CURLY_CLOSE:
                    cursor.depth -= 1
                cursor.emit(token_type)

                if token_type in CONTENT_INTRODUCERS:
                    scan_content(cursor)

        cursor.emit(TokenType.EOF)
