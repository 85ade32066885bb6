"""
Tokenizer Driver
================

Drives a Scanner from the first token to end of input and interns every
identifier in the run's IdentifierTable, so IDENTIFIER tokens leave the
driver with their ``symbol_id`` set.

Two entry points:

- ``Tokenizer.tokenize()`` is a generator that raises LexError on the
  first malformed token. Tokens produced before the error have already
  been yielded, which lets a trace writer stream its output.
- ``scan_source()`` runs to completion and returns a ScanResult holding
  the tokens, the identifier table, and the error (if any) as data.

Example Usage
-------------
>>> result = scan_source("foo bar foo")
>>> [t.symbol_id for t in result.tokens if t.kind == TokenKind.IDENTIFIER]
[1, 2, 1]
"""

from dataclasses import dataclass, field, replace
import logging
from typing import Iterator, Optional, TextIO

from bminor.config import LexerConfig
from bminor.lexer.errors import LexError
from bminor.lexer.scanner import Scanner
from bminor.lexer.symbols import IdentifierTable
from bminor.lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    One tokenization run over one source.

    Usage:
        tokenizer = Tokenizer(source_text, LexerConfig(filename="prog.bm"))
        for token in tokenizer.tokenize():
            print(token)

    Attributes:
        config: Settings for this run
        scanner: The scanner consuming the source
        identifiers: Identifier table filled as tokens are produced
        token_count: Number of tokens produced so far
    """

    def __init__(self, source: str | TextIO, config: Optional[LexerConfig] = None):
        self.config = config or LexerConfig()
        self.scanner = Scanner(source, self.config.filename)
        self.identifiers = IdentifierTable(self.config.max_identifiers)
        self.token_count = 0
        self._eoi: Optional[Token] = None

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including exactly one EOI token.

        Raises:
            LexError: On the first lexical error
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOI:
                logger.info(
                    f"{self.config.filename}: {self.token_count} tokens, "
                    f"{len(self.identifiers)} distinct identifiers"
                )
                return

    def next_token(self) -> Token:
        """
        Scan the next token, interning it if it is an identifier.

        After end of input the same EOI token is returned again without
        being counted.
        """
        if self._eoi is not None:
            return self._eoi

        token = self.scanner.next_token()

        if token.kind == TokenKind.IDENTIFIER:
            try:
                symbol_id = self.identifiers.intern(token.value, token.position)
            except LexError as e:
                raise e.with_context(
                    self.config.filename,
                    self.scanner.cursor.source_line(token.line),
                )
            token = replace(token, symbol_id=symbol_id)

        self.token_count += 1
        if token.kind == TokenKind.EOI:
            self._eoi = token
        return token


# =============================================================================
# Result-Returning Entry Point
# =============================================================================

@dataclass
class ScanResult:
    """
    Outcome of a complete tokenization run.

    Attributes:
        tokens: Tokens produced before the run stopped; ends with EOI on success
        identifiers: The run's identifier table
        error: The lexical error that stopped the run, or None
    """
    tokens: list[Token] = field(default_factory=list)
    identifiers: IdentifierTable = field(default_factory=IdentifierTable)
    error: Optional[LexError] = None

    @property
    def success(self) -> bool:
        return self.error is None


def scan_source(source: str | TextIO, config: Optional[LexerConfig] = None) -> ScanResult:
    """
    Tokenize a whole source and report the outcome as data.

    Args:
        source: Source text, or a text stream to read from
        config: Run settings (defaults to LexerConfig())

    Returns:
        ScanResult; on failure ``error`` is set and ``tokens`` holds the
        tokens produced before the error
    """
    tokenizer = Tokenizer(source, config)
    result = ScanResult(identifiers=tokenizer.identifiers)

    try:
        for token in tokenizer.tokenize():
            result.tokens.append(token)
    except LexError as e:
        result.error = e

    return result


def tokenize(source: str | TextIO, config: Optional[LexerConfig] = None) -> list[Token]:
    """
    Tokenize a whole source.

    Raises:
        LexError: On the first lexical error
    """
    return list(Tokenizer(source, config).tokenize())
