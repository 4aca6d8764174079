"""Display triples for tokens and the stable error-last grouping."""

from collections.abc import Iterable
from dataclasses import dataclass

from loxpy.lexer.options import TokenizeOptions, TokenOrder
from loxpy.lexer.tokens import Token, TokenKind


@dataclass(frozen=True, slots=True)
class Chunk:
    """(kind, lexeme, literal) view of a well-formed token."""

    token_type: TokenKind
    lexeme: str
    literal: str | None = None

    @staticmethod
    def from_token(token: Token) -> "Chunk":
        """Build the display triple for a token.

        Raises if called with an INVALID token; those are rendered with
        `format_diagnostic` instead.
        """
        if token.is_invalid:
            raise ValueError(f"Invalid tokens have no chunk: {token.message!r}")
        return Chunk(token.kind, token.lexeme, token.literal_text)

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.token_type.name} {self.lexeme} {literal}"


def to_chunks(tokens: Iterable[Token]) -> list[Chunk]:
    """Chunks for every well-formed token, skipping INVALID ones."""
    return [Chunk.from_token(token) for token in tokens if not token.is_invalid]


def format_diagnostic(token: Token) -> str:
    return f"[line {token.line}] Error: {token.message}"


def render(token: Token) -> str:
    if token.is_invalid:
        return format_diagnostic(token)
    return str(Chunk.from_token(token))


def partition_tokens(tokens: Iterable[Token]) -> tuple[list[Token], list[Token]]:
    """Split tokens into (well_formed, invalid), each in its original order."""
    well_formed: list[Token] = []
    invalid: list[Token] = []
    for token in tokens:
        if token.is_invalid:
            invalid.append(token)
        else:
            well_formed.append(token)
    return well_formed, invalid


def order_tokens(tokens: list[Token], options: TokenizeOptions | None = None) -> list[Token]:
    """Arrange tokens for presentation according to `options.order`."""
    if options is None:
        options = TokenizeOptions()
    if options.order == TokenOrder.SOURCE:
        return list(tokens)
    well_formed, invalid = partition_tokens(tokens)
    return [*well_formed, *invalid]
