"""Parser for literal expressions."""

from loxpy.parser.parser import ParseResult, parse

__all__ = [
    "ParseResult",
    "parse",
]
