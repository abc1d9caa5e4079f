"""
Market transaction parser: parses "operation,amount" lines.
"""
import re

from market_report import config
from market_report.errors import (
    InvalidNumberError,
    MalformedRecordError,
    UnknownOperationError,
)
from .base import BaseRecordParser, Operation, Record

_AMOUNT_RE = re.compile(r"(?P<sign>[+-]?)0*(?P<digits>[0-9]+)")

# 2**63 has 19 digits
_MAX_DIGITS = 19


def parse_amount(token: str, line: str) -> int:
    """
    Parse a signed base-10 integer that fits in 64 bits.
    `line` is the raw record, quoted in the error on failure.
    """
    match = _AMOUNT_RE.fullmatch(token)
    if not match or len(match["digits"]) > _MAX_DIGITS:
        raise InvalidNumberError(line)
    amount = int(match["sign"] + match["digits"])
    if not config.AMOUNT_MIN <= amount <= config.AMOUNT_MAX:
        raise InvalidNumberError(line)
    return amount


class MarketRecordParser(BaseRecordParser):
    """
    Parses lines from a market transactions CSV file.
    Each line is like:
      'supply,100'
      '  buy , 30  '
    Blank lines are skipped; anything else must have exactly two fields.
    """
    def parse_row(self, line: str):
        stripped = line.strip()
        if not stripped:
            return None

        parts = stripped.split(config.DELIMITER)
        # trailing empty fields are dropped: "supply,10," is "supply,10"
        while parts and not parts[-1]:
            parts.pop()
        if len(parts) != config.EXPECTED_PARTS:
            raise MalformedRecordError(line)

        op_token, amount_token = (part.strip() for part in parts)
        amount = parse_amount(amount_token, line)

        try:
            operation = Operation(op_token)
        except ValueError as exc:
            raise UnknownOperationError(line) from exc

        return Record(operation=operation, amount=amount, line=line)
