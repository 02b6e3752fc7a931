"""
YASL Scanner
============

This module implements the lexical analyzer for the YASL subset. Each
call to Scanner.next() drives an explicit (Mealy) state machine from
its start state until a token is produced; characters are consumed and
diagnostics reported on the transitions.

State Machine
-------------
| State              | Meaning                                        |
|--------------------|------------------------------------------------|
| START              | looking for the start of a token               |
| ZERO               | consumed a lone '0'                            |
| NUMBER             | accumulating a non-zero numeric literal        |
| WORD               | accumulating an identifier or keyword          |
| OPERATOR           | consumed one of + - * = ; .                    |
| SLASH              | consumed '/', deciding the comment kind        |
| BLOCK_COMMENT      | inside /* ... */                               |
| BLOCK_COMMENT_STAR | inside /* ... */ right after a '*'             |
| LINE_COMMENT       | inside // ... up to the newline                |

A '0' is always a token by itself, so "007" scans as 0, 0, 7.

Every transition consumes a character or emits a token, except SLASH
on a malformed comment, which returns to START without consuming so
that the character is scanned again ("/x" still yields the identifier
x).

Example Usage
-------------
>>> from yasl.scanner import Scanner
>>> with Scanner.from_string("val x = 42;") as scanner:
...     for token in scanner.tokenize():
...         print(token)
Token(VAL, 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(ASSIGN, 1:7)
Token(NUMBER, '42', 1:9)
Token(SEMICOLON, 1:11)
Token(EOF, 1:12)
"""

import io
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional, TextIO, Union

from yasl.errors import (
    IllegalCharacterError,
    MalformedCommentError,
    SourceLocation,
    UnclosedCommentError,
)
from yasl.scanner.diagnostics import DiagnosticSink, LoggingDiagnosticSink
from yasl.scanner.source import CharacterSource
from yasl.scanner.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        filename: Name used in diagnostic locations
        line_number: Line number of the first source line
        max_errors: Error cap for collectors built from these options
    """
    filename: str = "<input>"
    line_number: int = 1
    max_errors: int = 100


# =============================================================================
# States
# =============================================================================

class ScanState(Enum):
    """States of the token-scanning machine."""

    START = auto()
    ZERO = auto()
    NUMBER = auto()
    WORD = auto()
    OPERATOR = auto()
    SLASH = auto()
    BLOCK_COMMENT = auto()
    BLOCK_COMMENT_STAR = auto()
    LINE_COMMENT = auto()


@dataclass
class _Lexeme:
    """Text and start position of the token being scanned."""
    line: int
    column: int
    chars: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.chars)


_Outcome = Union[ScanState, Token]


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Tokenizes YASL source.

    Usage:
        scanner = Scanner(open("prog.yasl"))
        token = scanner.next()
        ...
        scanner.close()

    The scanner owns its input stream and closes it in close(). It is
    not safe for use from several threads at once.
    """

    def __init__(
        self,
        reader: TextIO,
        options: Optional[ScannerOptions] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        """
        Initialize the scanner over a text stream.

        Args:
            reader: Stream of source characters
            options: Scanner configuration (defaults to ScannerOptions())
            sink: Receiver for diagnostics (defaults to logging)
        """
        self.options = options or ScannerOptions()
        self.sink = sink if sink is not None else LoggingDiagnosticSink()
        self._source = CharacterSource(reader, self.options.line_number)

        self._keywords: Mapping[str, TokenKind] = MappingProxyType({
            "program": TokenKind.PROGRAM,
            "val": TokenKind.VAL,
            "begin": TokenKind.BEGIN,
            "print": TokenKind.PRINT,
            "end": TokenKind.END,
            "div": TokenKind.DIV,
            "mod": TokenKind.MOD,
        })

        self._operators: Mapping[str, TokenKind] = MappingProxyType({
            "+": TokenKind.PLUS,
            "-": TokenKind.MINUS,
            "*": TokenKind.STAR,
            "=": TokenKind.ASSIGN,
            ";": TokenKind.SEMICOLON,
            ".": TokenKind.PERIOD,
        })

        self._handlers: dict[ScanState, Callable[[_Lexeme], _Outcome]] = {
            ScanState.START: self._start,
            ScanState.ZERO: self._zero,
            ScanState.NUMBER: self._number,
            ScanState.WORD: self._word,
            ScanState.OPERATOR: self._operator,
            ScanState.SLASH: self._slash,
            ScanState.BLOCK_COMMENT: self._block_comment,
            ScanState.BLOCK_COMMENT_STAR: self._block_comment_star,
            ScanState.LINE_COMMENT: self._line_comment,
        }

    # =========================================================================
    # Construction Helpers
    # =========================================================================

    @classmethod
    def from_string(
        cls,
        text: str,
        options: Optional[ScannerOptions] = None,
        sink: Optional[DiagnosticSink] = None,
    ) -> "Scanner":
        """Create a scanner over an in-memory string."""
        return cls(io.StringIO(text), options, sink)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        options: Optional[ScannerOptions] = None,
        sink: Optional[DiagnosticSink] = None,
    ) -> "Scanner":
        """
        Open a source file and create a scanner over it.

        The file name is used for diagnostics unless options are given.
        Undecodable bytes become U+FFFD and are reported as illegal
        characters.
        """
        if options is None:
            options = ScannerOptions(filename=str(path))
        reader = open(path, encoding="utf-8", errors="replace")
        logger.debug(f"Opened {path} for scanning")
        try:
            return cls(reader, options, sink)
        except Exception:
            reader.close()
            raise

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def keywords(self) -> Mapping[str, TokenKind]:
        """Reserved words and their token kinds."""
        return self._keywords

    @property
    def operators(self) -> Mapping[str, TokenKind]:
        """Operator and punctuation characters and their token kinds."""
        return self._operators

    def next(self) -> Token:
        """
        Extract the next available token.

        Never raises for bad input: problems are reported to the sink
        and skipped. Once the input is exhausted every call returns an
        EOF token at the same position.
        """
        lexeme = _Lexeme(self._source.line, self._source.column)
        state = ScanState.START

        while True:
            outcome = self._handlers[state](lexeme)
            if isinstance(outcome, Token):
                logger.debug("Scanned %r", outcome)
                return outcome
            state = outcome

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF token.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def close(self) -> None:
        """
        Close the underlying input stream.

        Raises:
            ChannelError: If the stream cannot be closed
        """
        self._source.close()

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _location(self) -> SourceLocation:
        """Location of the current look-ahead character."""
        return SourceLocation(self.options.filename, self._source.line, self._source.column)

    def _take(self, lexeme: _Lexeme) -> None:
        """Append the current character to the lexeme and consume it."""
        lexeme.chars.append(self._source.current)
        self._source.advance()

    def _begin(self, lexeme: _Lexeme) -> None:
        """Start a token at the current character."""
        lexeme.line = self._source.line
        lexeme.column = self._source.column
        self._take(lexeme)

    # =========================================================================
    # State Handlers
    # =========================================================================

    def _start(self, lexeme: _Lexeme) -> _Outcome:
        source = self._source

        if source.at_end:
            return Token(source.line, source.column, TokenKind.EOF)

        char = source.current

        if char == "0":
            self._begin(lexeme)
            return ScanState.ZERO

        if char.isdecimal():
            self._begin(lexeme)
            return ScanState.NUMBER

        if char.isalpha():
            self._begin(lexeme)
            return ScanState.WORD

        if char in self._operators:
            self._begin(lexeme)
            return ScanState.OPERATOR

        if char == "/":
            source.advance()
            return ScanState.SLASH

        if char.isspace():
            source.advance()
            return ScanState.START

        # Resynchronize by dropping the one bad character
        self.sink.add(IllegalCharacterError(char, self._location()))
        source.advance()
        return ScanState.START

    def _zero(self, lexeme: _Lexeme) -> _Outcome:
        return Token(lexeme.line, lexeme.column, TokenKind.NUMBER, lexeme.text)

    def _number(self, lexeme: _Lexeme) -> _Outcome:
        if not self._source.at_end and self._source.current.isdecimal():
            self._take(lexeme)
            return ScanState.NUMBER
        return Token(lexeme.line, lexeme.column, TokenKind.NUMBER, lexeme.text)

    def _word(self, lexeme: _Lexeme) -> _Outcome:
        char = self._source.current
        if not self._source.at_end and (char.isalpha() or char.isdecimal()):
            self._take(lexeme)
            return ScanState.WORD

        text = lexeme.text
        kind = self._keywords.get(text)
        if kind is not None:
            return Token(lexeme.line, lexeme.column, kind)
        return Token(lexeme.line, lexeme.column, TokenKind.IDENTIFIER, text)

    def _operator(self, lexeme: _Lexeme) -> _Outcome:
        return Token(lexeme.line, lexeme.column, self._operators[lexeme.text])

    def _slash(self, lexeme: _Lexeme) -> _Outcome:
        source = self._source

        if source.at_end or source.current not in "*/":
            # Leave the character for START to classify
            self.sink.add(MalformedCommentError(source.current or None, self._location()))
            return ScanState.START

        if source.current == "*":
            source.advance()
            return ScanState.BLOCK_COMMENT

        source.advance()
        return ScanState.LINE_COMMENT

    def _block_comment(self, lexeme: _Lexeme) -> _Outcome:
        source = self._source

        if source.at_end:
            self.sink.add(UnclosedCommentError(self._location()))
            return ScanState.START

        if source.current == "*":
            source.advance()
            return ScanState.BLOCK_COMMENT_STAR

        source.advance()
        return ScanState.BLOCK_COMMENT

    def _block_comment_star(self, lexeme: _Lexeme) -> _Outcome:
        source = self._source

        if source.at_end:
            self.sink.add(UnclosedCommentError(self._location()))
            return ScanState.START

        if source.current == "/":
            source.advance()
            return ScanState.START

        if source.current == "*":
            source.advance()
            return ScanState.BLOCK_COMMENT_STAR

        source.advance()
        return ScanState.BLOCK_COMMENT

    def _line_comment(self, lexeme: _Lexeme) -> _Outcome:
        source = self._source

        if source.at_end or source.current == "\n":
            return ScanState.START

        source.advance()
        return ScanState.LINE_COMMENT
