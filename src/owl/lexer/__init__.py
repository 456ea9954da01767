"""Character-level lexer for the Owl markup language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Cursor, ScanResult
├── core.py              # Lexer class (main scan loop)
├── cursor.py            # Cursor (explicit scan state + navigation)
└── scanners/            # Scanner functions over a Cursor
    ├── escape.py        # Backslash escapes
    ├── content.py       # Quoted content after { } ;
    ├── identifier.py    # Identifiers
    └── string.py        # Raw string literals

Usage:
    >>> from owl.lexer import Lexer
    >>> Lexer("a = b").tokenize()
[Token(IDENTIFIER, 'a', 1), Token(ASSIGN, 1), Token(IDENTIFIER, 'b', 1), Token(EOF, 1)]

"""

from owl.lexer.core import Lexer, ScanResult
from owl.lexer.cursor import Cursor

__all__ = ["Cursor", "Lexer", "ScanResult"]
