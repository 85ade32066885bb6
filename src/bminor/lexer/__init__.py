"""
B-Minor Lexer
=============

Lexical front end for B-Minor, a small imperative language. Converts a
character stream into classified, positioned tokens and assigns each
distinct identifier spelling a stable id.

Pipeline
--------
    Characters → Cursor → Scanner → Tokenizer (identifier interning) → Tokens

Components
----------
- cursor: one-character window with line/column tracking
- scanner: token dispatch and the literal/comment sub-scanners
- keywords: sorted reserved-word table with binary search
- symbols: identifier table (spelling -> id, first appearance order)
- tokenizer: run driver, generator and result-returning entry points
- trace: the human-readable one-line-per-token rendering

Usage
-----
>>> from bminor.lexer import tokenize
>>> for token in tokenize("if (n <= 10) print n;"):
...     print(token)
Token(IF, 1:1)
Token(LPAREN, 1:4)
Token(IDENTIFIER, 'n', 1:5)
Token(LEQ, 1:7)
Token(NUMBER, 10, 1:10)
Token(RPAREN, 1:12)
Token(PRINT, 1:14)
Token(IDENTIFIER, 'n', 1:20)
Token(SEMICOLON, 1:21)
Token(EOI, 1:22)
"""

from bminor.lexer.cursor import Cursor, END_OF_INPUT
from bminor.lexer.errors import (
    LexError,
    EmptyCharConstantError,
    UnknownEscapeSequenceError,
    MultiCharConstantError,
    UnterminatedCommentError,
    UnterminatedStringError,
    InvalidNumberError,
    NumberOverflowError,
    UnrecognizedCharacterError,
    IdentifierTableFullError,
)
from bminor.lexer.keywords import KEYWORDS, KeywordTable, RESERVED_WORDS
from bminor.lexer.scanner import Scanner, MAX_INTEGER
from bminor.lexer.symbols import IdentifierTable
from bminor.lexer.tokenizer import Tokenizer, ScanResult, scan_source, tokenize
from bminor.lexer.tokens import Token, TokenKind
from bminor.lexer.trace import format_token, write_trace

__all__ = [
    "Cursor",
    "END_OF_INPUT",
    "LexError",
    "EmptyCharConstantError",
    "UnknownEscapeSequenceError",
    "MultiCharConstantError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    "InvalidNumberError",
    "NumberOverflowError",
    "UnrecognizedCharacterError",
    "IdentifierTableFullError",
    "KEYWORDS",
    "KeywordTable",
    "RESERVED_WORDS",
    "Scanner",
    "MAX_INTEGER",
    "IdentifierTable",
    "Tokenizer",
    "ScanResult",
    "scan_source",
    "tokenize",
    "Token",
    "TokenKind",
    "format_token",
    "write_trace",
]
