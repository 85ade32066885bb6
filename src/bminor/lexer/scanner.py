"""
B-Minor Scanner
===============

Turns the characters under a Cursor into classified tokens, one per
``next_token()`` call.

Token Categories
----------------
- Keywords: array, boolean, char, else, false, for, function, if,
  integer, print, return, string, true, void, while
- Identifiers: letters, digits and '_', not starting with a digit
- Numbers: decimal digits; a leading 0 reads as octal, as C's strtol does
- Character literals: 'a', '\\n', '\\\\' (emitted as NUMBER)
- Strings: "double quoted", on one line, no escapes
- Operators: ^ * / % + - ! < <= > >= == != ++ -- = && ||
- Delimiters: ( ) { } [ ] ; , :

Comments
--------
- Single-line: // comment (through the newline)
- Multi-line: /* comment */

Comments never produce tokens. They are consumed inside the dispatch loop
of ``next_token()``, so any number of consecutive comments costs no stack.

Example Usage
-------------
>>> scanner = Scanner('x = 42;')
>>> scanner.next_token()
Token(IDENTIFIER, 'x', 1:1)
>>> scanner.next_token()
Token(ASSIGN, 1:3)
>>> scanner.next_token()
Token(NUMBER, 42, 1:5)
"""

import logging
import string
from typing import Iterator, Optional, TextIO

from bminor.errors import Position
from bminor.lexer.cursor import END_OF_INPUT, Cursor
from bminor.lexer.errors import (
    EmptyCharConstantError,
    InvalidNumberError,
    LexError,
    MultiCharConstantError,
    NumberOverflowError,
    UnknownEscapeSequenceError,
    UnrecognizedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from bminor.lexer.keywords import KEYWORDS, KeywordTable
from bminor.lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes and Dispatch Tables
# =============================================================================

WHITESPACE = string.whitespace
DIGITS = string.digits
OCTAL_DIGITS = string.octdigits
IDENT_CHARS = string.ascii_letters + string.digits + "_"

# Largest value an integer literal may have (signed 32-bit)
MAX_INTEGER = 2**31 - 1

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "^": TokenKind.EXP,
    "*": TokenKind.MUL,
    "%": TokenKind.MOD,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
}

# first char -> (partner, two-char kind, one-char kind or None)
DOUBLED_TOKENS: dict[str, tuple[str, TokenKind, Optional[TokenKind]]] = {
    "+": ("+", TokenKind.INC, TokenKind.ADD),
    "-": ("-", TokenKind.DEC, TokenKind.SUB),
    "<": ("=", TokenKind.LEQ, TokenKind.LSS),
    ">": ("=", TokenKind.GEQ, TokenKind.GTR),
    "=": ("=", TokenKind.EQ, TokenKind.ASSIGN),
    "!": ("=", TokenKind.NEQ, TokenKind.NOT),
    "&": ("&", TokenKind.AND, None),
    "|": ("|", TokenKind.OR, None),
}

# Escapes allowed in character literals
CHAR_ESCAPES: dict[str, int] = {
    "n": 10,        # newline
    "\\": 92,       # backslash
}


def parse_integer(digits: str) -> int:
    """
    Convert a run of decimal digits the way C's ``strtol(text, NULL, 0)`` does.

    A leading 0 selects octal and conversion stops at the first digit that
    is not octal, so "017" is 15 and "09" is 0.
    """
    if digits[0] != "0":
        return int(digits)

    octal = []
    for digit in digits[1:]:
        if digit not in OCTAL_DIGITS:
            break
        octal.append(digit)
    return int("".join(octal), 8) if octal else 0


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Produces B-Minor tokens from a character source.

    All scanning state (cursor and scratch buffer) lives on the instance,
    so independent scanners can run side by side.

    Usage:
        scanner = Scanner(source_text, "prog.bm")
        for token in scanner:
            print(token)

    Attributes:
        filename: Name of the source (for error messages)
        cursor: The character cursor being consumed
    """

    def __init__(
        self,
        source: str | TextIO,
        filename: str = "<input>",
        keywords: KeywordTable = KEYWORDS,
    ):
        """
        Initialize the scanner.

        Args:
            source: Source text, or a text stream to read from
            filename: Name of the source (for error messages)
            keywords: Reserved-word table used to classify names
        """
        self.filename = filename
        self.cursor = Cursor(source)
        self._keywords = keywords

        # Scratch buffer reused by identifier, number and string scans
        self._text: list[str] = []

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the end-of-input token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOI:
                return

    # =========================================================================
    # Dispatch
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the end-of-input token has been returned, further calls return
        it again without consuming anything.

        Raises:
            LexError: On the first malformed token
        """
        cursor = self.cursor

        while True:
            while not cursor.at_end and cursor.current in WHITESPACE:
                cursor.advance()

            start = cursor.position
            char = cursor.current
            # Diagnostics never look behind the start of the token being scanned
            cursor.release_lines_before(start.line)

            if char == END_OF_INPUT:
                return self._emit(TokenKind.EOI, start)

            if char in SINGLE_CHAR_TOKENS:
                cursor.advance()
                return self._emit(SINGLE_CHAR_TOKENS[char], start)

            if char == "/":
                cursor.advance()
                token = self._division_or_comment(start)
                if token is None:
                    continue
                return token

            if char == "'":
                cursor.advance()
                return self._char_literal(start)

            if char in DOUBLED_TOKENS:
                return self._followed_by(char, start)

            if char == '"':
                return self._string_literal(start)

            return self._identifier_or_integer(start)

    def _emit(self, kind: TokenKind, start: Position, value=None, **extra) -> Token:
        token = Token(kind, start, value, **extra)
        logger.debug(f"{self.filename}:{start}: {token!r}")
        return token

    def _fail(self, error: LexError) -> LexError:
        """Attach the source name and line to error before it is raised."""
        error.with_context(self.filename, self.cursor.source_line(error.line))
        logger.debug(f"Lexical error at {self.filename}:{error.position}: {error.message}")
        return error

    # =========================================================================
    # Operators
    # =========================================================================

    def _followed_by(self, char: str, start: Position) -> Token:
        """
        Resolve an operator that may be doubled ('+' vs '++', '<' vs '<=').

        '&' and '|' exist only doubled; alone they are rejected.
        """
        partner, double_kind, single_kind = DOUBLED_TOKENS[char]

        if self.cursor.advance() == partner:
            self.cursor.advance()
            return self._emit(double_kind, start)

        if single_kind is None:
            raise self._fail(UnrecognizedCharacterError(
                char,
                start,
                hint=f"the language has no bitwise operators; did you mean '{char}{char}'?",
            ))

        return self._emit(single_kind, start)

    # =========================================================================
    # Comments and Division
    # =========================================================================

    def _division_or_comment(self, start: Position) -> Optional[Token]:
        """
        Disambiguate a '/' that has just been consumed.

        Returns:
            A DIV token, or None after consuming a comment
        """
        cursor = self.cursor

        # Single-line comment: through and including the newline
        if cursor.current == "/":
            while cursor.current not in ("\n", END_OF_INPUT):
                cursor.advance()
            cursor.advance()
            logger.debug(f"Skipped line comment at {start}")
            return None

        if cursor.current != "*":
            return self._emit(TokenKind.DIV, start)

        # Multi-line comment: up to the first */
        cursor.advance()
        while True:
            if cursor.current == "*":
                if cursor.advance() == "/":
                    cursor.advance()
                    logger.debug(f"Skipped block comment at {start}")
                    return None
            elif cursor.at_end:
                raise self._fail(UnterminatedCommentError(start))
            else:
                cursor.advance()

    # =========================================================================
    # Literals
    # =========================================================================

    def _char_literal(self, start: Position) -> Token:
        """
        Scan a character literal; the opening quote is already consumed.

        The value is the character code, emitted as a NUMBER token.
        """
        cursor = self.cursor
        char = cursor.current

        if char == "'":
            raise self._fail(EmptyCharConstantError(start))
        if char == END_OF_INPUT:
            raise self._fail(MultiCharConstantError(start))

        if char == "\\":
            escaped = cursor.advance()
            if escaped not in CHAR_ESCAPES:
                raise self._fail(UnknownEscapeSequenceError(escaped, start))
            value = CHAR_ESCAPES[escaped]
        else:
            value = ord(char)

        if cursor.advance() != "'":
            raise self._fail(MultiCharConstantError(start))
        cursor.advance()

        return self._emit(TokenKind.NUMBER, start, value)

    def _string_literal(self, start: Position) -> Token:
        """
        Scan a string literal; the cursor is on the opening delimiter.

        Strings end at the next occurrence of the same delimiter and may
        not contain a newline.
        """
        cursor = self.cursor
        delimiter = cursor.current

        self._text.clear()
        while cursor.advance() != delimiter:
            if cursor.current == "\n":
                raise self._fail(UnterminatedStringError(start))
            if cursor.current == END_OF_INPUT:
                raise self._fail(UnterminatedStringError(start, at_end_of_file=True))
            self._text.append(cursor.current)

        cursor.advance()
        return self._emit(
            TokenKind.STR,
            start,
            "".join(self._text),
            delimiter=ord(delimiter),
        )

    def _identifier_or_integer(self, start: Position) -> Token:
        """
        Scan a run of letters, digits and underscores.

        A run starting with a digit must be all digits and becomes a
        NUMBER; any other run is a keyword or an IDENTIFIER.
        """
        cursor = self.cursor
        is_number = True

        self._text.clear()
        while not cursor.at_end and cursor.current in IDENT_CHARS:
            self._text.append(cursor.current)
            if cursor.current not in DIGITS:
                is_number = False
            cursor.advance()

        if not self._text:
            raise self._fail(UnrecognizedCharacterError(cursor.current, start))

        text = "".join(self._text)

        if text[0] in DIGITS:
            if not is_number:
                raise self._fail(InvalidNumberError(text, start))
            value = parse_integer(text)
            if value > MAX_INTEGER:
                raise self._fail(NumberOverflowError(text, start))
            return self._emit(TokenKind.NUMBER, start, value)

        kind = self._keywords.classify(text)
        if kind == TokenKind.IDENTIFIER:
            return self._emit(kind, start, text)
        return self._emit(kind, start)
