"""Lexer."""

from loxpy.lexer.chunk import (
    Chunk,
    format_diagnostic,
    order_tokens,
    partition_tokens,
    render,
    to_chunks,
)
from loxpy.lexer.cursor import Cursor, iter_lines
from loxpy.lexer.lexer import Lexer, dump_tokens, scan
from loxpy.lexer.options import TokenizeOptions, TokenOrder
from loxpy.lexer.tokens import KEYWORDS, Token, TokenKind, format_number

__all__ = [
    "KEYWORDS",
    "Chunk",
    "Cursor",
    "Lexer",
    "Token",
    "TokenKind",
    "TokenOrder",
    "TokenizeOptions",
    "dump_tokens",
    "format_diagnostic",
    "format_number",
    "iter_lines",
    "order_tokens",
    "partition_tokens",
    "render",
    "scan",
    "to_chunks",
]
