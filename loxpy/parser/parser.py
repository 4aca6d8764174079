"""Literal-only parser over the token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from loxpy.diagnostics import Diagnostic, collect_diagnostics, has_errors
from loxpy.diagnostics.codes import PARSER_UNSUPPORTED_TOKEN
from loxpy.lexer import Chunk, Lexer, Token, TokenKind

logger = logging.getLogger(__name__)

_KEYWORD_LITERALS = (TokenKind.TRUE, TokenKind.FALSE, TokenKind.NIL)


@dataclass(slots=True)
class ParseResult:
    """Rendered literal values plus lexer and parser diagnostics."""

    source_text: str
    values: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def parse(text: str) -> ParseResult:
    """Parse `text` as a sequence of literal expressions.

    Only `true`, `false`, `nil` and numbers are understood. Any other
    well-formed token yields a PARSER_UNSUPPORTED_TOKEN diagnostic.
    """
    lexer = Lexer(text)
    tokens = lexer.lex()

    values: list[str] = []
    parser_diagnostics: list[Diagnostic] = []
    for token in tokens:
        if token.is_invalid:
            continue
        value = _parse_literal(token)
        if value is not None:
            values.append(value)
        elif token.kind != TokenKind.EOF:
            parser_diagnostics.append(_unsupported(token))

    logger.debug("parsed %d literal(s), %d unsupported token(s)", len(values), len(parser_diagnostics))
    return ParseResult(
        source_text=text,
        values=values,
        diagnostics=collect_diagnostics(lexer.diagnostics, parser_diagnostics),
    )


def _parse_literal(token: Token) -> str | None:
    chunk = Chunk.from_token(token)
    if chunk.token_type in _KEYWORD_LITERALS:
        return chunk.lexeme
    if chunk.token_type == TokenKind.NUMBER:
        return chunk.literal
    return None


def _unsupported(token: Token) -> Diagnostic:
    spec = PARSER_UNSUPPORTED_TOKEN
    return Diagnostic(
        code=spec.code,
        message=spec.format(lexeme=token.lexeme),
        line=token.line,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
