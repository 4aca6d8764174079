"""Tokenize/parse entrypoints and their result carriers."""

from loxpy.pipeline.entrypoints import run_parse, run_tokenize
from loxpy.pipeline.results import ParseRunResult, TokenizeRunResult

__all__ = [
    "ParseRunResult",
    "TokenizeRunResult",
    "run_parse",
    "run_tokenize",
]
