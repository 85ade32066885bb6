"""
B-Minor Error Hierarchy
=======================

This module defines the root of the exception hierarchy for the B-Minor
toolchain and the source position type shared by tokens and diagnostics.

Exception Hierarchy
-------------------
BMinorError (base)
└── LexError (see bminor.lexer.errors)
    ├── EmptyCharConstantError
    ├── UnknownEscapeSequenceError
    ├── MultiCharConstantError
    ├── UnterminatedCommentError
    ├── UnterminatedStringError
    ├── InvalidNumberError
    ├── NumberOverflowError
    ├── UnrecognizedCharacterError
    └── IdentifierTableFullError

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class BMinorError(Exception):
    """
    Base exception for all B-Minor errors.

    Callers can catch every toolchain error with a single except clause:

        try:
            tokens = list(tokenize(source))
        except BMinorError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Position Tracking
# =============================================================================

@dataclass(frozen=True)
class Position:
    """
    A location in the character stream.

    Lines are 1-indexed. Columns count characters consumed on the current
    line: the first character of a line is column 1, and a newline reports
    column 0 of the line it opens.

    Attributes:
        line: Line number (>= 1)
        column: Column number (>= 0)
    """
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'line:column' for diagnostics."""
        return f"{self.line}:{self.column}"
