"""Diagnostics."""

from loxpy.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_UNSUPPORTED_TOKEN,
    DiagnosticSpec,
)
from loxpy.diagnostics.diagnostic import Diagnostic, Severity
from loxpy.diagnostics.report import collect_diagnostics, format_line, has_errors

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_UNSUPPORTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_line",
    "has_errors",
]
