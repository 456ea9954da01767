"""Source loading and line-ending normalization.

The lexer counts lines on ``\\n`` only, so every buffer is normalized
before scanning: all ``\\r\\n`` pairs collapse to ``\\n``. Normalization
is idempotent.

Files are read in one scoped call that fully materializes the text and
releases the handle before any scanning starts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from owl.errors import SourceDecodeError, SourceNotFoundError
from owl.utils.logger import get_logger

logger = get_logger(__name__)

# A CR run before LF collapses too, so one pass leaves no \r\n behind
_CRLF = re.compile(r"\r+\n")


def normalize_line_endings(text: str) -> str:
    """Convert Windows line endings to ``\\n``.

    Example:
        >>> normalize_line_endings("a\\r\\nb\\n")
        'a\\nb\\n'
    """
    if "\r" not in text:
        return text
    return _CRLF.sub("\n", text)


def line_number_width(text: str) -> int:
    """Digits needed to print the highest line number of ``text``."""
    return len(str(text.count("\n") + 1))


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A loaded, normalized source file.

    Attributes:
        path: Absolute path of the file
        text: Contents with line endings normalized
    """

    path: Path
    text: str

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline does not open a new line)."""
        if not self.text:
            return 0
        return self.text.count("\n") + (0 if self.text.endswith("\n") else 1)

    @property
    def line_number_width(self) -> int:
        """Digits needed to print the highest line number."""
        return line_number_width(self.text)

    @property
    def name(self) -> str:
        """File name without directories."""
        return self.path.name


def load_source(path: str | Path, encoding: str = "utf-8-sig") -> SourceFile:
    """Read and normalize a source file.

    Args:
        path: File path, relative paths resolve against the working directory
        encoding: Text encoding of the file (the default drops a UTF-8 BOM)

    Returns:
        SourceFile with normalized text.

    Raises:
        SourceNotFoundError: If the file does not exist.
        SourceDecodeError: If the file is not valid text in ``encoding``.
    """
    resolved = Path(path).resolve()
    logger.info("Reading file '%s'", resolved.name)
    if not resolved.is_file():
        raise SourceNotFoundError(str(resolved))

    # newline="" keeps \r\n intact so normalization sees it
    try:
        with resolved.open(encoding=encoding, newline="") as handle:
            raw = handle.read()
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(str(resolved), encoding, exc.reason) from exc

    logger.info("Converting line endings to Linux")
    return SourceFile(path=resolved, text=normalize_line_endings(raw))
