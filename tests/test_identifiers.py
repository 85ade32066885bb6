"""
Tests for the keyword table, the identifier table, and identifier
interning by the tokenizer driver.
"""

import pytest

from bminor.config import DEFAULT_MAX_IDENTIFIERS, LexerConfig
from bminor.errors import Position
from bminor.lexer.errors import IdentifierTableFullError
from bminor.lexer.keywords import KEYWORDS, RESERVED_WORDS, KeywordTable
from bminor.lexer.symbols import IdentifierTable
from bminor.lexer.tokenizer import Tokenizer, scan_source, tokenize
from bminor.lexer.tokens import TokenKind


def identifier_ids(source: str, **config) -> list:
    """Tokenize source and return (spelling, id) for each identifier."""
    return [
        (t.value, t.symbol_id)
        for t in tokenize(source, LexerConfig(**config))
        if t.kind == TokenKind.IDENTIFIER
    ]


# =============================================================================
# Keyword Table
# =============================================================================

class TestKeywordTable:
    """Sorted reserved-word lookup."""

    def test_fifteen_reserved_words(self):
        assert len(KEYWORDS) == 15

    def test_reserved_words_sorted(self):
        words = [word for word, _ in RESERVED_WORDS]
        assert words == sorted(words)

    @pytest.mark.parametrize("word,kind", RESERVED_WORDS)
    def test_classify_keyword(self, word, kind):
        assert KEYWORDS.classify(word) == kind
        assert word in KEYWORDS

    @pytest.mark.parametrize("word", ["", "a", "arrays", "zzz", "Array", "whil"])
    def test_classify_identifier(self, word):
        assert KEYWORDS.classify(word) == TokenKind.IDENTIFIER
        assert KEYWORDS.lookup(word) is None

    def test_unsorted_table_rejected(self):
        """A table out of order would misclassify, so it cannot be built."""
        with pytest.raises(ValueError, match="sorted"):
            KeywordTable([("while", TokenKind.WHILE), ("if", TokenKind.IF)])

    def test_duplicate_entry_rejected(self):
        with pytest.raises(ValueError):
            KeywordTable([("if", TokenKind.IF), ("if", TokenKind.IF)])

    def test_custom_table(self):
        table = KeywordTable([("do", TokenKind.WHILE)])
        assert table.classify("do") == TokenKind.WHILE
        assert table.classify("while") == TokenKind.IDENTIFIER


# =============================================================================
# Identifier Table
# =============================================================================

class TestIdentifierTable:
    """Spelling -> id assignment in order of first appearance."""

    def test_ids_are_sequential_from_one(self):
        table = IdentifierTable()
        assert table.intern("foo") == 1
        assert table.intern("bar") == 2
        assert table.intern("baz") == 3

    def test_repeat_reuses_id(self):
        table = IdentifierTable()
        table.intern("foo")
        table.intern("bar")
        assert table.intern("foo") == 1
        assert len(table) == 2

    def test_lookup_and_spelling(self):
        table = IdentifierTable()
        table.intern("alpha")
        table.intern("beta")
        assert table.lookup("beta") == 2
        assert table.lookup("gamma") is None
        assert table.spelling(1) == "alpha"
        with pytest.raises(KeyError):
            table.spelling(3)

    def test_iteration_in_id_order(self):
        table = IdentifierTable()
        for name in ["c", "a", "b", "a"]:
            table.intern(name)
        assert list(table) == [(1, "c"), (2, "a"), (3, "b")]

    def test_capacity_exceeded(self):
        """A new spelling beyond capacity raises instead of overflowing."""
        table = IdentifierTable(capacity=2)
        table.intern("a")
        table.intern("b")
        with pytest.raises(IdentifierTableFullError) as exc_info:
            table.intern("c", Position(3, 7))
        assert exc_info.value.spelling == "c"
        assert exc_info.value.capacity == 2
        assert exc_info.value.position == Position(3, 7)
        assert len(table) == 2

    def test_known_spelling_at_capacity(self):
        """Spellings already in a full table still resolve."""
        table = IdentifierTable(capacity=1)
        table.intern("a")
        assert table.intern("a") == 1

    def test_default_capacity(self):
        assert IdentifierTable().capacity == DEFAULT_MAX_IDENTIFIERS == 1000

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            IdentifierTable(capacity=0)


# =============================================================================
# Interning During Tokenization
# =============================================================================

class TestInterning:
    """The tokenizer driver assigns ids to identifier tokens."""

    def test_stable_order_preserving_ids(self):
        assert identifier_ids("foo bar foo") == [("foo", 1), ("bar", 2), ("foo", 1)]

    def test_keywords_are_not_interned(self):
        result = scan_source("if x while y")
        assert [spelling for _, spelling in result.identifiers] == ["x", "y"]

    def test_only_identifiers_carry_ids(self):
        tokens = tokenize('x = "s" + 1;')
        for token in tokens:
            if token.kind == TokenKind.IDENTIFIER:
                assert token.symbol_id == 1
            else:
                assert token.symbol_id is None

    def test_fresh_table_per_run(self):
        """Ids never carry over from one run to the next."""
        assert identifier_ids("a b") == [("a", 1), ("b", 2)]
        assert identifier_ids("b a") == [("b", 1), ("a", 2)]

    def test_exactly_1000_identifiers_fit(self):
        source = " ".join(f"v{i}" for i in range(1000))
        ids = identifier_ids(source)
        assert ids[-1] == ("v999", 1000)

    def test_table_full_during_tokenization(self):
        """Exceeding the configured capacity stops the run."""
        tokenizer = Tokenizer("a b a c", LexerConfig(max_identifiers=2, filename="t.bm"))
        with pytest.raises(IdentifierTableFullError) as exc_info:
            list(tokenizer.tokenize())
        error = exc_info.value
        assert error.position == Position(1, 7)
        assert str(error).startswith("t.bm:1:7: error: too many identifiers")

    def test_token_count(self):
        tokenizer = Tokenizer("a + b")
        list(tokenizer.tokenize())
        assert tokenizer.token_count == 4
