"""
Character Source
================

One-character look-ahead over a text stream, with 1-based line and
column tracking for the character that will be consumed next.

The stream is anything with read(size) and close(): an open text file,
io.StringIO, sys.stdin, and so on.
"""

import logging
from typing import TextIO

from yasl.errors import ChannelError

logger = logging.getLogger(__name__)


class CharacterSource:
    """
    Look-ahead character reader.

    Attributes:
        current: The next unconsumed character, or "" at end of input
        at_end: True once the stream is exhausted (never reset)
        line: Line of `current` (1-indexed)
        column: Column of `current` (1-indexed)
    """

    def __init__(self, reader: TextIO, line_number: int = 1):
        """
        Initialize the source and load the first character.

        Args:
            reader: Text stream to read from; owned by this source
            line_number: Line number of the first character
        """
        self._reader = reader
        self.current = ""
        self.at_end = False
        self.line = line_number
        self.column = 1
        self._read_next()

    def advance(self) -> None:
        """
        Consume the current character and load the next one.

        Past a newline the line advances and the column resets to 1;
        past any other character the column advances. Does nothing once
        at end of input.
        """
        if self.at_end:
            return

        if self.current == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self._read_next()

    def close(self) -> None:
        """
        Close the underlying stream.

        Raises:
            ChannelError: If the stream fails to close
        """
        try:
            self._reader.close()
        except OSError as e:
            raise ChannelError(f"cannot close input: {e}") from e
        logger.debug("Character source closed at %d:%d", self.line, self.column)

    def _read_next(self) -> None:
        char = self._reader.read(1)
        if char:
            self.current = char
        else:
            self.current = ""
            self.at_end = True
