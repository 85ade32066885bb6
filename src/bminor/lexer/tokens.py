"""
B-Minor Token Types
===================

Token kinds and the immutable token record produced by the scanner.

The integer value of each TokenKind is the code printed in the token
trace ("Keyword\\t\\t8" for ``if``), so members carry explicit values and
new kinds must only ever be appended.

Payloads
--------
| Kind        | value          | extra                         |
|-------------|----------------|-------------------------------|
| NUMBER      | int            |                               |
| STR         | str (text)     | delimiter: int (quote code)   |
| IDENTIFIER  | str (spelling) | symbol_id: int (once interned)|
| all others  | None           |                               |
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from bminor.errors import Position


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(IntEnum):
    """Every distinguishable lexeme shape of B-Minor."""

    # === Keywords ===
    ARRAY = 1
    BOOLEAN = 2
    CHAR = 3
    ELSE = 4
    FALSE = 5
    FOR = 6
    FUNCTION = 7
    IF = 8
    INTEGER = 9
    PRINT = 10
    RETURN = 11
    STRING = 12
    TRUE = 13
    VOID = 14
    WHILE = 15

    # === Delimiter / Structural ===
    COLON = 16              # :
    EOI = 17                # end of input

    # === Arithmetic Operators ===
    EXP = 18                # ^
    MUL = 19                # *
    DIV = 20                # /
    MOD = 21                # %
    ADD = 22                # +
    SUB = 23                # -
    NEGATE = 24             # unary minus, assigned by the parser
    NOT = 25                # !

    # === Comparison Operators ===
    LSS = 26                # <
    LEQ = 27                # <=
    GTR = 28                # >
    GEQ = 29                # >=
    EQ = 30                 # ==
    NEQ = 31                # !=

    # === Increment / Decrement / Assignment ===
    INC = 32                # ++
    DEC = 33                # --
    ASSIGN = 34             # =

    # === Logical Operators ===
    AND = 35                # &&
    OR = 36                 # ||

    # === Delimiters ===
    LPAREN = 37             # (
    RPAREN = 38             # )
    LBRACE = 39             # {
    RBRACE = 40             # }
    LBRACKET = 41           # [
    RBRACKET = 42           # ]
    SEMICOLON = 43          # ;
    COMMA = 44              # ,

    # === Literals and Names ===
    NUMBER = 45
    STR = 46
    IDENTIFIER = 47

    @property
    def is_keyword(self) -> bool:
        return TokenKind.ARRAY <= self <= TokenKind.WHILE


# Fixed spellings, used for display and for the scanner's dispatch tables
SPELLINGS: dict[TokenKind, str] = {
    TokenKind.COLON: ":",
    TokenKind.EXP: "^",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
    TokenKind.MOD: "%",
    TokenKind.ADD: "+",
    TokenKind.SUB: "-",
    TokenKind.NOT: "!",
    TokenKind.LSS: "<",
    TokenKind.LEQ: "<=",
    TokenKind.GTR: ">",
    TokenKind.GEQ: ">=",
    TokenKind.EQ: "==",
    TokenKind.NEQ: "!=",
    TokenKind.INC: "++",
    TokenKind.DEC: "--",
    TokenKind.ASSIGN: "=",
    TokenKind.AND: "&&",
    TokenKind.OR: "||",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.SEMICOLON: ";",
    TokenKind.COMMA: ",",
}

# Payload type required by each kind; kinds not listed carry no payload
_PAYLOAD_TYPES: dict[TokenKind, type] = {
    TokenKind.NUMBER: int,
    TokenKind.STR: str,
    TokenKind.IDENTIFIER: str,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    The payload shape is fixed by the kind; constructing a token whose
    value does not match raises ValueError.

    Attributes:
        kind: The TokenKind classification
        position: Where the token starts
        value: int for NUMBER, str for STR and IDENTIFIER, otherwise None
        delimiter: Code of the quote character that delimited a STR
        symbol_id: Identifier-table id, set on IDENTIFIER tokens by the
            tokenizer driver (the scanner leaves it None)
    """
    kind: TokenKind
    position: Position
    value: str | int | None = None
    delimiter: Optional[int] = None
    symbol_id: Optional[int] = None

    def __post_init__(self):
        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError(f"{self.kind.name} token takes no value, got {self.value!r}")
        elif type(self.value) is not expected:
            raise ValueError(
                f"{self.kind.name} token needs a {expected.__name__} value, got {self.value!r}"
            )
        if self.delimiter is not None and self.kind != TokenKind.STR:
            raise ValueError(f"{self.kind.name} token cannot carry a delimiter")
        if self.symbol_id is not None and self.kind != TokenKind.IDENTIFIER:
            raise ValueError(f"{self.kind.name} token cannot carry a symbol id")

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.kind.name}, {self.value}, {self.position})"
            return f"Token({self.kind.name}, {self.value!r}, {self.position})"
        return f"Token({self.kind.name}, {self.position})"

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def spelling(self) -> str:
        """Source text of the token (string literals without their quotes)."""
        if self.kind in SPELLINGS:
            return SPELLINGS[self.kind]
        if self.kind == TokenKind.EOI:
            return ""
        if self.kind.is_keyword:
            return self.kind.name.lower()
        return str(self.value)
