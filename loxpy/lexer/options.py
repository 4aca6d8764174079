"""Tokenize output ordering and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class TokenOrder(StrEnum):
    """Order in which tokens are presented after scanning."""

    GROUPED = "grouped"
    SOURCE = "source"


@dataclass(frozen=True, slots=True)
class TokenizeOptions:
    """Flags controlling how a token stream is presented.

    GROUPED puts every well-formed token before every invalid one while
    keeping each group in source order. SOURCE keeps the scan order.
    """

    order: TokenOrder = TokenOrder.GROUPED

    @staticmethod
    def for_order(order: TokenOrder | str) -> "TokenizeOptions":
        return TokenizeOptions(order=TokenOrder(order))
