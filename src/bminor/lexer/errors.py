"""
B-Minor Lexer Error Hierarchy
=============================

Every lexical error is fatal: the scanner raises one of these on the first
malformed token and never resynchronizes. Each error carries the position
of the start of the offending token, captured before any of its characters
were consumed.

Exception Hierarchy
-------------------
LexError (base for all lexical errors)
├── EmptyCharConstantError - ''
├── UnknownEscapeSequenceError - '\\q'
├── MultiCharConstantError - 'ab'
├── UnterminatedCommentError - /* without */
├── UnterminatedStringError - newline or end of input inside "..."
├── InvalidNumberError - 12ab
├── NumberOverflowError - literal above MAX_INTEGER
├── UnrecognizedCharacterError - @, lone & or |
└── IdentifierTableFullError - too many distinct identifiers

Error Message Format
--------------------
    prog.bm:3:5: error: unknown escape sequence '\\q'
        c = '\\q';
            ^
    hint: only '\\n' and '\\\\' are recognized
"""

from typing import Optional

from bminor.errors import BMinorError, Position


# =============================================================================
# Base Lexer Exception
# =============================================================================

class LexError(BMinorError):
    """
    Base exception for all lexical errors.

    Attributes:
        message: The error description
        position: Start of the offending token
        filename: Name of the source (for the location prefix)
        hint: A suggestion for fixing the error
        source_line: The source text of the offending line, if known
    """

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        filename: str = "<input>",
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.filename = filename
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        return self.position.line if self.position else None

    @property
    def column(self) -> Optional[int]:
        return self.position.column if self.position else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            prog.bm:2:5: error: end-of-line in string
                x = "abc
                    ^
            hint: string literals may not span lines
        """
        if self.position:
            parts = [f"{self.filename}:{self.position}: error: {self.message}"]
        else:
            parts = [f"{self.filename}: error: {self.message}"]

        # Source context with caret pointer
        if self.source_line is not None and self.position is not None:
            parts.append(f"    {self.source_line}")
            if self.position.column > 0:
                padding = " " * (4 + self.position.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def with_context(self, filename: str, source_line: Optional[str]) -> "LexError":
        """
        Attach the source name and line text, rebuilding the message.

        Raising sites only know the position; the scanner fills in the rest
        before the error leaves it.
        """
        self.filename = filename
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self


# =============================================================================
# Character Literal Errors
# =============================================================================

class EmptyCharConstantError(LexError):
    """Raised for '' (a character literal with nothing inside)."""

    def __init__(self, position: Position, **kwargs):
        super().__init__(
            "empty character constant",
            position,
            hint="a character literal must contain exactly one character",
            **kwargs,
        )


class UnknownEscapeSequenceError(LexError):
    """
    Unknown escape sequence in a character literal.

    Only '\\n' (newline) and '\\\\' (backslash) are part of the language.
    """

    def __init__(self, char: str, position: Position, **kwargs):
        self.char = char
        if char:
            message = f"unknown escape sequence '\\{char}'"
        else:
            message = "unknown escape sequence at end of input"
        super().__init__(
            message,
            position,
            hint="only '\\n' and '\\\\' are recognized",
            **kwargs,
        )


class MultiCharConstantError(LexError):
    """
    Character literal not closed right after its single character.

    Raised for 'ab', and for input that ends inside the literal.
    """

    def __init__(self, position: Position, **kwargs):
        super().__init__(
            "multi-character constant",
            position,
            hint="character literals can only contain a single character",
            **kwargs,
        )


# =============================================================================
# Comment and String Errors
# =============================================================================

class UnterminatedCommentError(LexError):
    """Block comment with no closing */ before end of input."""

    def __init__(self, position: Position, **kwargs):
        super().__init__(
            "end-of-file in comment",
            position,
            hint="add closing */ to terminate the comment",
            **kwargs,
        )


class UnterminatedStringError(LexError):
    """
    String literal interrupted by a newline or end of input.

    Attributes:
        at_end_of_file: True when input ended inside the string,
            False when a newline did
    """

    def __init__(self, position: Position, at_end_of_file: bool = False, **kwargs):
        self.at_end_of_file = at_end_of_file
        message = "end-of-file in string" if at_end_of_file else "end-of-line in string"
        super().__init__(
            message,
            position,
            hint="string literals may not span lines",
            **kwargs,
        )


# =============================================================================
# Number Errors
# =============================================================================

class InvalidNumberError(LexError):
    """A token starting with a digit that also contains letters or '_'."""

    def __init__(self, text: str, position: Position, **kwargs):
        self.text = text
        super().__init__(
            f"invalid number: {text}",
            position,
            hint="identifiers cannot start with a digit",
            **kwargs,
        )


class NumberOverflowError(LexError):
    """Integer literal larger than the maximum representable value."""

    def __init__(self, text: str, position: Position, **kwargs):
        self.text = text
        super().__init__("number exceeds maximum value", position, **kwargs)


# =============================================================================
# Character and Resource Errors
# =============================================================================

class UnrecognizedCharacterError(LexError):
    """
    Character that cannot start any token.

    Also raised for a lone '&' or '|': the language has '&&' and '||' but
    no bitwise operators.
    """

    def __init__(self, char: str, position: Position, hint: Optional[str] = None, **kwargs):
        self.char = char
        super().__init__(
            f"unrecognized character '{char}' (0x{ord(char):02X})",
            position,
            hint=hint,
            **kwargs,
        )


class IdentifierTableFullError(LexError):
    """A new identifier spelling arrived with the identifier table at capacity."""

    def __init__(
        self,
        spelling: str,
        capacity: int,
        position: Optional[Position] = None,
        **kwargs,
    ):
        self.spelling = spelling
        self.capacity = capacity
        super().__init__(
            f"too many identifiers: '{spelling}' would exceed the limit of {capacity}",
            position,
            hint="raise the limit with --max-identifiers",
            **kwargs,
        )
