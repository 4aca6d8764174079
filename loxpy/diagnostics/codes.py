"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def format(self, **kwargs: object) -> str:
        return self.message.format(**kwargs)


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character: {char}",
    hint="Remove the character or place it inside a string literal.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string.",
    hint="Close the string with a double quote on the same line.",
    severity="error",
    category="lexer",
)

PARSER_UNSUPPORTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNSUPPORTED_TOKEN",
    message="Unsupported token: {lexeme}",
    hint="Only `true`, `false`, `nil` and number literals can be parsed.",
    severity="error",
    category="parser",
)
