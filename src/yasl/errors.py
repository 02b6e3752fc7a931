"""
YASL Error Hierarchy
====================

This module defines the exception hierarchy for the YASL front end.
All exceptions inherit from YaslError, allowing callers to catch all
YASL-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
YaslError (base)
├── ScanError - positioned problem found while scanning source text
│   ├── IllegalCharacterError - character outside every lexical class
│   ├── MalformedCommentError - '/' not followed by '*' or '/'
│   └── UnclosedCommentError - end of input inside a block comment
├── ScanFailedError - aggregate report of collected scan errors
└── ChannelError - the input stream could not be released

Reporting vs Raising
--------------------
The scanner never raises ScanError subclasses. It builds them and hands
them to a diagnostic sink, then keeps scanning. Only ChannelError (from
closing the input) propagates to the caller.

Error messages follow this two-line format:
    Illegal character: #
      at 3:14
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class YaslError(Exception):
    """
    Base exception for all YASL errors.

        try:
            scanner.close()
        except YaslError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scanning Diagnostics
# =============================================================================

class ScanError(YaslError):
    """
    A problem found while scanning source text.

    Instances are diagnostics: the scanner reports them to its sink and
    recovers, so they are only raised by code that chooses to (for
    example DiagnosticCollector.raise_if_errors).

    Attributes:
        message: The error description
        location: Where in the source the error occurred
    """

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the message followed by its position line.

            Malformed comment: found x after /
              at 1:2
        """
        if self.location is None:
            return self.message
        return f"{self.message}\n  at {self.location.line}:{self.location.column}"


class IllegalCharacterError(ScanError):
    """
    Character that matches none of the recognized classes.

    Digits, letters, whitespace, '/' and the operator characters
    '+ - * = ; .' are recognized; anything else is discarded after
    this diagnostic is reported.
    """

    def __init__(self, char: str, location: Optional[SourceLocation] = None):
        self.char = char
        super().__init__(f"Illegal character: {char}", location)


class MalformedCommentError(ScanError):
    """
    A '/' followed by something other than '*' or '/'.

    The offending character is left in place and scanned normally, so
    "/x" still yields the identifier x.
    """

    def __init__(self, found: Optional[str], location: Optional[SourceLocation] = None):
        self.found = found
        shown = found if found else "end of input"
        super().__init__(f"Malformed comment: found {shown} after /", location)


class UnclosedCommentError(ScanError):
    """End of input reached inside a /* ... */ comment."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("Unclosed comment at end of file", location)


class ScanFailedError(YaslError):
    """
    Aggregate of collected scan errors.

    The message is a pre-formatted report from DiagnosticCollector.
    """
    pass


# =============================================================================
# Resource Errors
# =============================================================================

class ChannelError(YaslError):
    """
    The underlying input stream could not be closed.

    The original OSError is available as __cause__.
    """
    pass
