"""Scanners for the Owl lexer.

Each scanner is a plain function over an explicit Cursor:
- escape: backslash escapes (``\\n``, ``\\t``, ``\\{`` ...)
- content: optional quoted blocks after ``{``, ``}`` and ``;``
- identifier: runs of letters, digits and underscore
- string: raw standalone string literals
"""

from __future__ import annotations

from owl.lexer.scanners.content import scan_content, skip_whitespace
from owl.lexer.scanners.escape import ESCAPES, scan_escape, skip_escape
from owl.lexer.scanners.identifier import is_identifier_char, scan_identifier
from owl.lexer.scanners.string import scan_string_literal

__all__ = [
    "ESCAPES",
    "is_identifier_char",
    "scan_content",
    "scan_escape",
    "scan_identifier",
    "scan_string_literal",
    "skip_escape",
    "skip_whitespace",
]
