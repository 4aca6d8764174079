"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from loxpy.diagnostics import Diagnostic
from loxpy.lexer import Token, render
from loxpy.parser import ParseResult


@dataclass(frozen=True, slots=True)
class TokenizeRunResult:
    """Result of scanning one source text.

    `tokens` keeps scan order; `ordered_tokens` is the presentation order
    selected by the tokenize options.
    """

    source_text: str
    tokens: list[Token]
    ordered_tokens: list[Token]
    diagnostics: list[Diagnostic]
    has_errors: bool

    @property
    def output_lines(self) -> list[str]:
        return [render(token) for token in self.ordered_tokens if not token.is_invalid]

    @property
    def error_lines(self) -> list[str]:
        return [render(token) for token in self.ordered_tokens if token.is_invalid]


@dataclass(frozen=True, slots=True)
class ParseRunResult:
    """Result of parsing literal expressions from one source text."""

    parse: ParseResult
    output_lines: list[str]
    error_lines: list[str]
    has_errors: bool
