"""
Diagnostic Sinks
================

The scanner reports recoverable problems (illegal characters, malformed
and unclosed comments) to a sink instead of raising. A sink is anything
with an add(error) method.

Available sinks
---------------
- LoggingDiagnosticSink: logs at ERROR level (the scanner default)
- StreamDiagnosticSink: writes to a text stream, stderr by default
- DiagnosticCollector: keeps errors for batch reporting and tests
- TeeDiagnosticSink: forwards to several sinks
"""

import logging
import sys
from typing import Iterator, List, Optional, Protocol, TextIO

from yasl.errors import ScanError, ScanFailedError

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Receiver for scan errors."""

    def add(self, error: ScanError) -> None:
        ...


class LoggingDiagnosticSink:
    """
    Report diagnostics through the logging module.

    Records are emitted at ERROR level, so they reach stderr through
    logging's last-resort handler even when logging is unconfigured.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def add(self, error: ScanError) -> None:
        self.log.error("%s", error)


class StreamDiagnosticSink:
    """Write each diagnostic to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def add(self, error: ScanError) -> None:
        # Resolved per call so redirected stderr is honoured
        stream = self.stream if self.stream is not None else sys.stderr
        print(error, file=stream)


class TeeDiagnosticSink:
    """Forward every diagnostic to each of several sinks, in order."""

    def __init__(self, *sinks: DiagnosticSink):
        self.sinks = sinks

    def add(self, error: ScanError) -> None:
        for sink in self.sinks:
            sink.add(error)


class DiagnosticCollector:
    """
    Collects scan errors for batch reporting.

    Example:
        collector = DiagnosticCollector()
        scanner = Scanner.from_string(text, sink=collector)
        tokens = list(scanner.tokenize())

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the collector.

        Args:
            max_errors: Count at which should_stop() turns true
        """
        self.errors: List[ScanError] = []
        self.max_errors = max_errors

    def add(self, error: ScanError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def __iter__(self) -> Iterator[ScanError]:
        return iter(self.errors)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors followed by a summary line."""
        lines = []

        for error in self.errors:
            lines.append(str(error))

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a ScanFailedError if any errors were collected."""
        if self.has_errors():
            raise ScanFailedError(self.report())
