"""
Keyword Classifier
==================

Distinguishes the 15 reserved words of B-Minor from plain identifiers.

The table is kept sorted by spelling and searched with ``bisect``. A table
built out of order would silently misclassify words, so KeywordTable
refuses to construct from unsorted or duplicated entries.
"""

from bisect import bisect_left
from typing import Iterable, Optional

from bminor.lexer.tokens import TokenKind


# =============================================================================
# Reserved Words (sorted by spelling)
# =============================================================================

RESERVED_WORDS: tuple[tuple[str, TokenKind], ...] = (
    ("array", TokenKind.ARRAY),
    ("boolean", TokenKind.BOOLEAN),
    ("char", TokenKind.CHAR),
    ("else", TokenKind.ELSE),
    ("false", TokenKind.FALSE),
    ("for", TokenKind.FOR),
    ("function", TokenKind.FUNCTION),
    ("if", TokenKind.IF),
    ("integer", TokenKind.INTEGER),
    ("print", TokenKind.PRINT),
    ("return", TokenKind.RETURN),
    ("string", TokenKind.STRING),
    ("true", TokenKind.TRUE),
    ("void", TokenKind.VOID),
    ("while", TokenKind.WHILE),
)


class KeywordTable:
    """
    Static sorted keyword lookup.

    Usage:
        table = KeywordTable(RESERVED_WORDS)
        table.classify("while")   # TokenKind.WHILE
        table.classify("count")   # TokenKind.IDENTIFIER

    Raises:
        ValueError: If entries are not strictly ascending by spelling
    """

    def __init__(self, entries: Iterable[tuple[str, TokenKind]]):
        entries = tuple(entries)
        for (prev, _), (word, _) in zip(entries, entries[1:]):
            if prev >= word:
                raise ValueError(
                    f"keyword table must be strictly sorted: {prev!r} before {word!r}"
                )
        self._words = [word for word, _ in entries]
        self._kinds = [kind for _, kind in entries]

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, spelling: str) -> bool:
        return self.lookup(spelling) is not None

    def lookup(self, spelling: str) -> Optional[TokenKind]:
        """Return the keyword kind for spelling, or None if it is not reserved."""
        index = bisect_left(self._words, spelling)
        if index < len(self._words) and self._words[index] == spelling:
            return self._kinds[index]
        return None

    def classify(self, spelling: str) -> TokenKind:
        """Return the keyword kind for spelling, or TokenKind.IDENTIFIER."""
        kind = self.lookup(spelling)
        return TokenKind.IDENTIFIER if kind is None else kind


KEYWORDS = KeywordTable(RESERVED_WORDS)
