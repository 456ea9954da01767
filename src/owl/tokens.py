"""Token and TokenType definitions for the Owl lexer.

The lexer produces an ordered list of Token objects that the tree builder
and the HTML code generator consume. Each Token has a type, the line it
was produced on, and (for text-carrying kinds) a string value.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Document structure (EOL, EOF)
    - Text-carrying tokens (identifiers, string literals, content)
    - Structural punctuation

    """

    # Document structure
    EOL = auto()  # \n
    EOF = auto()

    # Text-carrying
    STRING_LITERAL = auto()  # "raw text"
    IDENTIFIER = auto()  # name_1
    CONTENT = auto()  # "escaped text" after { } or ;

    # Structural punctuation
    PAREN_OPEN = auto()  # (
    PAREN_CLOSE = auto()  # )
    CURLY_OPEN = auto()  # {
    CURLY_CLOSE = auto()  # }
    ASSIGN = auto()  # =
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;


# Token types that carry a text payload
TEXT_TOKEN_TYPES = frozenset(
    {
        TokenType.STRING_LITERAL,
        TokenType.IDENTIFIER,
        TokenType.CONTENT,
    }
)

# Single-character punctuation and the token type each one produces
PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.PAREN_OPEN,
    ")": TokenType.PAREN_CLOSE,
    "{": TokenType.CURLY_OPEN,
    "}": TokenType.CURLY_CLOSE,
    "=": TokenType.ASSIGN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}

# Punctuation that may be followed by an optional quoted content block
CONTENT_INTRODUCERS = frozenset(
    {
        TokenType.CURLY_OPEN,
        TokenType.CURLY_CLOSE,
        TokenType.SEMICOLON,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        lineno: Line number (1-indexed) the token was produced on
        value: Text payload; only set for TEXT_TOKEN_TYPES

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    lineno: int
    value: str = ""

    def __post_init__(self) -> None:
        if self.value and self.type not in TEXT_TOKEN_TYPES:
            raise ValueError(f"{self.type.name} tokens do not carry a value")

    @property
    def has_value(self) -> bool:
        """True if this token type carries a text payload."""
        return self.type in TEXT_TOKEN_TYPES

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if not self.has_value:
            return f"Token({self.type.name}, {self.lineno})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno})"
