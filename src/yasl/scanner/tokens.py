"""
YASL Tokens
===========

Token kinds and the immutable Token value produced by the scanner.

Token Categories
----------------
- Literals: NUMBER (decimal digits), IDENTIFIER (letter then letters/digits)
- Keywords: program, val, begin, print, end, div, mod
- Operators: + - * =
- Punctuation: ; .
- EOF: returned on every call once input is exhausted
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from yasl.errors import SourceLocation


class TokenKind(Enum):
    """
    Token kinds for the YASL subset.

    Keywords are distinguished from identifiers to simplify parsing,
    even though both are scanned from the same character class.
    """

    # === Literals ===
    NUMBER = auto()         # Numeric literal
    IDENTIFIER = auto()     # Identifier

    # === Punctuation ===
    SEMICOLON = auto()      # ;
    PERIOD = auto()         # .

    # === Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    ASSIGN = auto()         # =

    # === Keywords ===
    PROGRAM = auto()        # program
    VAL = auto()            # val
    BEGIN = auto()          # begin
    PRINT = auto()          # print
    END = auto()            # end
    DIV = auto()            # div
    MOD = auto()            # mod

    # === Structural ===
    EOF = auto()            # End of input

    def is_keyword(self) -> bool:
        """Return True if this kind is a reserved word."""
        return self in _KEYWORD_KINDS

    def carries_text(self) -> bool:
        """Return True if tokens of this kind keep their lexeme."""
        return self in (TokenKind.NUMBER, TokenKind.IDENTIFIER)


_KEYWORD_KINDS = frozenset({
    TokenKind.PROGRAM,
    TokenKind.VAL,
    TokenKind.BEGIN,
    TokenKind.PRINT,
    TokenKind.END,
    TokenKind.DIV,
    TokenKind.MOD,
})


@dataclass(frozen=True)
class Token:
    """
    A single token from YASL source.

    Attributes:
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        kind: The TokenKind classification
        text: The lexeme, present only for NUMBER and IDENTIFIER
    """
    line: int
    column: int
    kind: TokenKind
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError(f"token position must be 1-based, got {self.line}:{self.column}")
        if self.kind.carries_text() and self.text is None:
            raise ValueError(f"{self.kind.name} token requires text")
        if not self.kind.carries_text() and self.text is not None:
            raise ValueError(f"{self.kind.name} token cannot carry text")

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.text is not None:
            return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)
