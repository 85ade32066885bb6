"""
Token Trace
===========

Renders tokens as the line-oriented trace printed by the B-Minor lexer
tool, one line per token:

    Keyword\\t\\t8
    Identifier\\tID: 1 ---> count
    Operand\\t\\t<=
    Number\\t\\t10
    Delimiter\\t)
    String\\t\\t34 ---> Address of "done" in strings buffer

Brackets print as operands (they index arrays); the remaining punctuation
prints as delimiters. The end-of-input token prints as an empty line.
"""

from typing import Iterable, TextIO

from bminor.lexer.tokens import SPELLINGS, Token, TokenKind


# Punctuation traced as "Delimiter"; all other fixed spellings are "Operand"
DELIMITER_KINDS = frozenset({
    TokenKind.COLON,
    TokenKind.SEMICOLON,
    TokenKind.COMMA,
    TokenKind.LBRACE,
    TokenKind.RBRACE,
    TokenKind.LPAREN,
    TokenKind.RPAREN,
})


def format_token(token: Token) -> str:
    """Return the trace line for token (without a newline)."""
    kind = token.kind

    if kind.is_keyword:
        return f"Keyword\t\t{int(kind)}"
    if kind in DELIMITER_KINDS:
        return f"Delimiter\t{SPELLINGS[kind]}"
    if kind in SPELLINGS:
        return f"Operand\t\t{SPELLINGS[kind]}"
    if kind == TokenKind.NUMBER:
        return f"Number\t\t{token.value}"
    if kind == TokenKind.STR:
        return f'String\t\t{token.delimiter} ---> Address of "{token.value}" in strings buffer'
    if kind == TokenKind.IDENTIFIER:
        if token.symbol_id is None:
            raise ValueError(f"identifier {token.value!r} has not been interned")
        return f"Identifier\tID: {token.symbol_id} ---> {token.value}"
    if kind == TokenKind.EOI:
        return ""

    raise ValueError(f"no trace format for {kind.name}")


def write_trace(tokens: Iterable[Token], stream: TextIO) -> int:
    """
    Write one trace line per token as the tokens arrive.

    Lines already written stay written if the token source raises.

    Returns:
        Number of lines written
    """
    count = 0
    for token in tokens:
        stream.write(format_token(token) + "\n")
        count += 1
    return count
