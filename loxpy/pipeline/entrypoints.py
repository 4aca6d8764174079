"""Unified entrypoints that scan or parse source text in one call."""

from __future__ import annotations

from loxpy.diagnostics import format_line, has_errors
from loxpy.lexer import Lexer, TokenizeOptions, order_tokens
from loxpy.parser import parse
from loxpy.pipeline.results import ParseRunResult, TokenizeRunResult


def run_tokenize(text: str, options: TokenizeOptions | None = None) -> TokenizeRunResult:
    """Scan `text` and arrange the tokens for display."""
    lexer = Lexer(text)
    tokens = lexer.lex()
    return TokenizeRunResult(
        source_text=text,
        tokens=tokens,
        ordered_tokens=order_tokens(tokens, options),
        diagnostics=lexer.diagnostics,
        has_errors=any(token.is_invalid for token in tokens),
    )


def run_parse(text: str) -> ParseRunResult:
    """Parse `text` and render the literal values and diagnostics."""
    result = parse(text)
    return ParseRunResult(
        parse=result,
        output_lines=list(result.values),
        error_lines=[format_line(diagnostic) for diagnostic in result.diagnostics],
        has_errors=has_errors(result.diagnostics),
    )
