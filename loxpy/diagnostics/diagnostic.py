"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser.

    `line` and `column` are 1-based and point at the first character of the
    offending construct.
    """

    code: str
    message: str
    line: int
    column: int = 1
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
