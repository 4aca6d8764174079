"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from loxpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_line(diagnostic: Diagnostic) -> str:
    """Render a diagnostic the way the command line reports it."""
    label = "Error" if diagnostic.severity == "error" else "Warning"
    return f"[line {diagnostic.line}] {label}: {diagnostic.message}"
