"""
YASL - Front End for a Subset of YASL
=====================================

This package provides the lexical analyzer for a small teaching
language (YASL subset): programs built from `program`, `val`, `begin`,
`print`, `end`, integer literals, identifiers and the operators
`+ - * div mod =`.

Main Components
---------------
- **scanner**: character source, tokens and the state-machine Scanner
- **errors**: exception hierarchy and source locations
- **cli**: `yasl-lex`, a token-dump tool that drives the scanner

Quick Start
-----------
    >>> from yasl import Scanner
    >>> scanner = Scanner.from_string("program demo; begin print 1 end.")
    >>> scanner.next()
    Token(PROGRAM, 1:1)

Or from the command line:
    $ yasl-lex demo.yasl
"""

__version__ = "1.0.0"

from yasl.errors import (
    YaslError,
    SourceLocation,
    ScanError,
    IllegalCharacterError,
    MalformedCommentError,
    UnclosedCommentError,
    ScanFailedError,
    ChannelError,
)

from yasl.scanner import (
    Token,
    TokenKind,
    CharacterSource,
    DiagnosticSink,
    LoggingDiagnosticSink,
    StreamDiagnosticSink,
    TeeDiagnosticSink,
    DiagnosticCollector,
    Scanner,
    ScannerOptions,
    ScanState,
)

__all__ = [
    "__version__",
    # Errors
    "YaslError",
    "SourceLocation",
    "ScanError",
    "IllegalCharacterError",
    "MalformedCommentError",
    "UnclosedCommentError",
    "ScanFailedError",
    "ChannelError",
    # Scanner
    "Token",
    "TokenKind",
    "CharacterSource",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "StreamDiagnosticSink",
    "TeeDiagnosticSink",
    "DiagnosticCollector",
    "Scanner",
    "ScannerOptions",
    "ScanState",
]
