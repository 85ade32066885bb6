"""
Tests for lexer error messages and the exception hierarchy.
"""

import pytest

from bminor.errors import BMinorError, Position
from bminor.lexer.errors import (
    EmptyCharConstantError,
    IdentifierTableFullError,
    InvalidNumberError,
    LexError,
    MultiCharConstantError,
    NumberOverflowError,
    UnknownEscapeSequenceError,
    UnrecognizedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)


class TestHierarchy:

    @pytest.mark.parametrize("error", [
        EmptyCharConstantError(Position(1, 1)),
        UnknownEscapeSequenceError("q", Position(1, 1)),
        MultiCharConstantError(Position(1, 1)),
        UnterminatedCommentError(Position(1, 1)),
        UnterminatedStringError(Position(1, 1)),
        InvalidNumberError("1a", Position(1, 1)),
        NumberOverflowError("99999999999", Position(1, 1)),
        UnrecognizedCharacterError("@", Position(1, 1)),
        IdentifierTableFullError("x", 10, Position(1, 1)),
    ])
    def test_all_are_lex_errors(self, error):
        assert isinstance(error, LexError)
        assert isinstance(error, BMinorError)


class TestFormatting:

    def test_location_prefix(self):
        error = EmptyCharConstantError(Position(4, 9), filename="prog.bm")
        assert str(error).splitlines()[0] == "prog.bm:4:9: error: empty character constant"

    def test_hint_line(self):
        error = UnterminatedCommentError(Position(1, 1))
        assert str(error).splitlines()[-1] == "hint: add closing */ to terminate the comment"

    def test_source_line_and_caret(self):
        error = MultiCharConstantError(Position(1, 5), source_line="c = 'ab';")
        lines = str(error).splitlines()
        assert lines[1] == "    c = 'ab';"
        assert lines[2] == "        ^"

    def test_no_caret_at_column_zero(self):
        error = UnterminatedStringError(Position(2, 0), source_line="")
        assert "^" not in str(error)

    def test_with_context_rebuilds_message(self):
        error = UnrecognizedCharacterError("@", Position(1, 3))
        assert str(error).startswith("<input>:1:3:")
        error.with_context("main.bm", "x @")
        assert str(error).startswith("main.bm:1:3: error: unrecognized character '@' (0x40)")
        assert "    x @" in str(error)

    def test_no_position(self):
        error = IdentifierTableFullError("x", 5)
        assert error.line is None
        assert str(error).startswith("<input>: error: too many identifiers")

    def test_string_messages(self):
        assert UnterminatedStringError(Position(1, 1)).message == "end-of-line in string"
        eof = UnterminatedStringError(Position(1, 1), at_end_of_file=True)
        assert eof.message == "end-of-file in string"
