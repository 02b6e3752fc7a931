"""
YASL Scanner
============

Lexical analysis for the YASL subset: turns a character stream into
positioned tokens for the parser.

Quick Start
-----------
    >>> from yasl.scanner import Scanner, TokenKind
    >>> scanner = Scanner.from_string("print 7.")
    >>> [t.kind.name for t in scanner.tokenize()]
    ['PRINT', 'NUMBER', 'PERIOD', 'EOF']

Recoverable problems in the source are reported to a diagnostic sink
(logging by default); pass a DiagnosticCollector to capture them.
"""

from yasl.scanner.tokens import Token, TokenKind
from yasl.scanner.source import CharacterSource
from yasl.scanner.diagnostics import (
    DiagnosticSink,
    LoggingDiagnosticSink,
    StreamDiagnosticSink,
    TeeDiagnosticSink,
    DiagnosticCollector,
)
from yasl.scanner.lexer import Scanner, ScannerOptions, ScanState

__all__ = [
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
