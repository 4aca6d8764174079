"""Lexer tokens."""

from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
import math
from typing import Final, cast


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    INVALID = 2

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    NUMBER = 22

    # -------------------------
    # Operators (multi-char included)
    # -------------------------
    EQUAL = 30  # =
    EQUAL_EQUAL = 31  # ==
    BANG = 32  # !
    BANG_EQUAL = 33  # !=
    LESS = 34  # <
    LESS_EQUAL = 35  # <=
    GREATER = 36  # >
    GREATER_EQUAL = 37  # >=

    # -------------------------
    # Punctuation / separators
    # -------------------------
    LEFT_PAREN = 40  # (
    RIGHT_PAREN = 41  # )
    LEFT_BRACE = 42  # {
    RIGHT_BRACE = 43  # }
    COMMA = 44  # ,
    DOT = 45  # .
    MINUS = 46  # -
    PLUS = 47  # +
    SEMICOLON = 48  # ;
    STAR = 49  # *
    SLASH = 50  # /

    # -------------------------
    # Keywords
    # -------------------------
    AND = 60
    CLASS = 61
    ELSE = 62
    FALSE = 63
    FUN = 64
    FOR = 65
    IF = 66
    NIL = 67
    OR = 68
    PRINT = 69
    RETURN = 70
    SUPER = 71
    THIS = 72
    TRUE = 73
    VAR = 74
    WHILE = 75

    @property
    def has_literal(self) -> bool:
        return self in (TokenKind.STRING, TokenKind.NUMBER)

    @property
    def fixed_text(self) -> str | None:
        """Surface text for kinds that always look the same, else None."""
        return FIXED_TEXT.get(self)


PUNCTUATION: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}
"""Characters that always form a token on their own."""

OPERATORS: Final[dict[str, tuple[TokenKind, TokenKind]]] = {
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}
"""Operators that take a trailing `=`: (one-char kind, two-char kind)."""

KEYWORDS: Final[dict[str, TokenKind]] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "fun": TokenKind.FUN,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

FIXED_TEXT: Final[dict[TokenKind, str]] = {
    **{kind: text for text, kind in PUNCTUATION.items()},
    **{kind: text for text, (kind, _) in OPERATORS.items()},
    **{kind: text + "=" for text, (_, kind) in OPERATORS.items()},
    **{kind: text for text, kind in KEYWORDS.items()},
}


def format_number(value: float) -> str:
    """Canonical decimal text of a number literal, always with a fraction.

    >>> format_number(1234.0)
    '1234.0'
    >>> format_number(3.14)
    '3.14'
    """
    if value.is_integer():
        return f"{int(value)}.0"
    if not math.isfinite(value):
        return repr(value)
    # Expand the shortest round-tripping repr, which may use exponent form.
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `kind` is the discriminant. The other fields are only meaningful for some
    kinds:

    - `lexeme`: exact source text (empty for EOF and INVALID)
    - `value`: string contents for STRING, decoded float for NUMBER
    - `message`: error text for INVALID
    - `line`: 1-based line the token started on
    """

    kind: TokenKind
    lexeme: str = ""
    value: str | float | None = None
    message: str | None = None
    line: int = 0

    @staticmethod
    def simple(kind: TokenKind, line: int) -> "Token":
        """Create a punctuation, operator or keyword token."""
        text = kind.fixed_text
        if text is None:
            raise ValueError(f"Token kind has no fixed text: {kind!r}")
        return Token(kind, text, line=line)

    @staticmethod
    def string(contents: str, line: int) -> "Token":
        return Token(TokenKind.STRING, f'"{contents}"', contents, line=line)

    @staticmethod
    def number(text: str, line: int) -> "Token":
        return Token(TokenKind.NUMBER, text, float(text), line=line)

    @staticmethod
    def identifier(text: str, line: int) -> "Token":
        return Token(TokenKind.IDENTIFIER, text, line=line)

    @staticmethod
    def invalid(message: str, line: int) -> "Token":
        return Token(TokenKind.INVALID, message=message, line=line)

    @staticmethod
    def eof(line: int = 0) -> "Token":
        return Token(TokenKind.EOF, line=line)

    @property
    def is_invalid(self) -> bool:
        return self.kind == TokenKind.INVALID

    @property
    def literal_text(self) -> str | None:
        """Display form of the literal, or None for kinds without one."""
        if self.kind == TokenKind.STRING:
            return str(self.value)
        if self.kind == TokenKind.NUMBER:
            return format_number(cast(float, self.value))
        return None
