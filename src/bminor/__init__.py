"""
B-Minor Toolchain - Lexical Front End
=====================================

This package provides the lexer for B-Minor, a small imperative language
with integer, boolean, char, string and array types, functions, and
if/for/while control flow.

Main Components
---------------
- **lexer**: character cursor, scanner, keyword classifier, identifier
  table, tokenizer driver and token trace
- **config**: run settings (identifier table capacity, source name)
- **cli**: the ``bmlex`` command-line tool

Quick Start
-----------
Tokenize a string:
    >>> from bminor import tokenize
    >>> [t.kind.name for t in tokenize("x = 'a';")]
    ['IDENTIFIER', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'EOI']

Collect the outcome without exceptions:
    >>> from bminor import scan_source
    >>> result = scan_source("12ab")
    >>> result.success, type(result.error).__name__
    (False, 'InvalidNumberError')

Or use the command-line tool:
    $ bmlex program.bm trace.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from bminor.config import LexerConfig
from bminor.errors import BMinorError, Position
from bminor.lexer import (
    LexError,
    IdentifierTable,
    Scanner,
    ScanResult,
    Token,
    TokenKind,
    Tokenizer,
    format_token,
    scan_source,
    tokenize,
    write_trace,
)

__all__ = [
    "__version__",
    "LexerConfig",
    "BMinorError",
    "Position",
    "LexError",
    "IdentifierTable",
    "Scanner",
    "ScanResult",
    "Token",
    "TokenKind",
    "Tokenizer",
    "format_token",
    "scan_source",
    "tokenize",
    "write_trace",
]
