"""
Character Cursor
================

Owns the character source, the character under the cursor, and the
line/column counters. The cursor reads one character at a time, so it
works equally on an in-memory string and on an open text stream such as
stdin.

Position Rules
--------------
- The first character of the input is at 1:1.
- Consuming any character other than a newline advances the column.
- Consuming into a newline moves to the next line, column 0; the
  character after it is at column 1.
- End of input is one column past the last character. From there the
  cursor stops: ``advance()`` keeps returning ``END_OF_INPUT`` and the
  position no longer changes.
"""

import io
from typing import Optional, TextIO

from bminor.errors import Position


# Sentinel returned once the source is exhausted
END_OF_INPUT = ""


class Cursor:
    """
    One-character window over a text source.

    Usage:
        cursor = Cursor("x = 1")
        while cursor.current != END_OF_INPUT:
            cursor.advance()

    Attributes:
        current: The character under the cursor, or END_OF_INPUT
        line: Line of the current character (1-indexed)
        column: Column of the current character
    """

    def __init__(self, source: str | TextIO):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source

        self.current = END_OF_INPUT
        self.line = 1
        self.column = 0

        # Text of the retained lines, _first_line onward, kept for diagnostics
        self._lines: list[list[str]] = [[]]
        self._first_line = 1
        self._exhausted = False

        self.advance()

    @property
    def position(self) -> Position:
        """Position of the current character."""
        return Position(self.line, self.column)

    @property
    def at_end(self) -> bool:
        return self.current == END_OF_INPUT

    def advance(self) -> str:
        """
        Consume the current character and return the new one.

        Returns:
            The character now under the cursor, or END_OF_INPUT
        """
        if self._exhausted:
            return END_OF_INPUT

        char = self._stream.read(1)
        if char == END_OF_INPUT:
            # End of input sits one column past the last character
            self._exhausted = True
            self.current = END_OF_INPUT
            self.column += 1
            return END_OF_INPUT

        self.current = char
        self.column += 1
        if char == "\n":
            self.line += 1
            self.column = 0
            self._lines.append([])
        else:
            self._lines[-1].append(char)
        return char

    def source_line(self, line: int) -> Optional[str]:
        """
        Return the text of a line read so far, without its newline.

        The line the cursor is on is returned up to the current character.
        Lines not yet reached, or already released, return None.
        """
        index = line - self._first_line
        if 0 <= index < len(self._lines):
            return "".join(self._lines[index])
        return None

    def release_lines_before(self, line: int) -> None:
        """
        Drop the text of every line before line.

        The scanner calls this at each token start, so memory use follows
        the longest token rather than the whole input.
        """
        count = min(line, self.line) - self._first_line
        if count > 0:
            del self._lines[:count]
            self._first_line += count
