
import re
import logging
from typing import Mapping, Optional, Sequence

from .model import Bid
from .config import COLUMNS, CURRENCY_SYMBOL, THOUSANDS_SEPARATOR

logger = logging.getLogger(__name__)

# Longest leading decimal number, e.g. "12.5" in "12.5 USD"
_NUMBER_PREFIX = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def str_to_double(value: Optional[str], ch: str,
                  separator: Optional[str] = THOUSANDS_SEPARATOR) -> float:
    """
    Convert a string to a float after stripping out every occurrence of `ch`.

    `separator` (a thousands separator, "," by default) is removed too, so
    "$1,200.50" with ch="$" gives 1200.5. Pass separator=None to strip only
    `ch`. Parsing is permissive on purpose:

        str_to_double("12abc", "$")  -> 12.0   (leading number only)
        str_to_double("", "$")       -> 0.0
        str_to_double("N/A", "$")    -> 0.0

    Callers never see an exception; malformed input silently becomes 0.0.

    Args:
        value: Raw cell text
        ch: Single character to remove before parsing (e.g. a currency symbol)
        separator: Grouping character to remove as well, or None

    Returns:
        Parsed value, or 0.0 when nothing numeric is left
    """
    if not value:
        return 0.0

    cleaned = value.replace(ch, "")
    if separator:
        cleaned = cleaned.replace(separator, "")
    cleaned = cleaned.strip()
    match = _NUMBER_PREFIX.match(cleaned)
    if not match:
        logger.debug(f"Non-numeric amount {value!r}, using 0.0")
        return 0.0

    return float(match.group())


class BidParser:
    def __init__(self, columns: Optional[Mapping[str, int]] = None):
        self.columns = dict(columns or COLUMNS)

    def parse_row(self, row: Sequence[str]) -> Bid:
        """
        Build a Bid from one data row of cells.

        Raises IndexError when the row is shorter than the column map needs.
        """
        return Bid(
            bid_id=self._cell(row, "bid_id"),
            title=self._cell(row, "title"),
            fund=self._cell(row, "fund"),
            amount=str_to_double(self._cell(row, "amount"), CURRENCY_SYMBOL),
        )

    def _cell(self, row: Sequence[str], field: str) -> str:
        return row[self.columns[field]]
