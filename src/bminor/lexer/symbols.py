"""
Identifier Table
================

Assigns each distinct identifier spelling a stable 1-based id in order of
first appearance. One table belongs to one tokenization run.

The table is bounded (1000 spellings unless configured otherwise), and a
new spelling beyond the capacity raises IdentifierTableFullError instead
of being dropped.
"""

import logging
from typing import Iterator, Optional

from bminor.config import DEFAULT_MAX_IDENTIFIERS
from bminor.errors import Position
from bminor.lexer.errors import IdentifierTableFullError

logger = logging.getLogger(__name__)


class IdentifierTable:
    """
    Ordered spelling -> id mapping.

    Usage:
        table = IdentifierTable()
        table.intern("foo")   # 1
        table.intern("bar")   # 2
        table.intern("foo")   # 1

    Attributes:
        capacity: Maximum number of distinct spellings
    """

    def __init__(self, capacity: int = DEFAULT_MAX_IDENTIFIERS):
        if capacity < 1:
            raise ValueError(f"identifier table capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._ids: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, spelling: str) -> bool:
        return spelling in self._ids

    def __iter__(self) -> Iterator[tuple[int, str]]:
        """Yield (id, spelling) pairs in id order."""
        for spelling, symbol_id in self._ids.items():
            yield symbol_id, spelling

    def lookup(self, spelling: str) -> Optional[int]:
        """Return the id of spelling, or None if it has not been seen."""
        return self._ids.get(spelling)

    def spelling(self, symbol_id: int) -> str:
        """Return the spelling recorded under symbol_id."""
        if not 1 <= symbol_id <= len(self._ids):
            raise KeyError(symbol_id)
        return list(self._ids)[symbol_id - 1]

    def intern(self, spelling: str, position: Optional[Position] = None) -> int:
        """
        Return the id of spelling, assigning the next id on first sight.

        Args:
            spelling: Identifier text
            position: Where the identifier appeared (for the error)

        Raises:
            IdentifierTableFullError: If spelling is new and the table is full
        """
        symbol_id = self._ids.get(spelling)
        if symbol_id is not None:
            return symbol_id

        if len(self._ids) >= self.capacity:
            raise IdentifierTableFullError(spelling, self.capacity, position)

        symbol_id = len(self._ids) + 1
        self._ids[spelling] = symbol_id
        logger.debug(f"Interned identifier '{spelling}' as ID {symbol_id}")
        return symbol_id
