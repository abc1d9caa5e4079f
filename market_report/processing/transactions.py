"""
transactions.py
-------------
Core routines to read, parse, and total market transactions.
"""
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from market_report import config
from market_report.errors import SourceReadError
from market_report.parsers import MarketRecordParser, Operation


@dataclass(frozen=True)
class Totals:
    """Supply and buy sums; `result` is always derived from them."""
    supply: int = 0
    buy: int = 0

    @property
    def result(self) -> int:
        return self.supply - self.buy

    def as_dict(self) -> dict:
        """Report rows in output order: supply, buy, result."""
        return {
            Operation.SUPPLY.value: self.supply,
            Operation.BUY.value: self.buy,
            config.RESULT: self.result,
        }


def read_lines(file_name: str | Path) -> list[str]:
    """
    Read every line of file_name, blank ones included, without line terminators.
    """
    path = Path(file_name)
    try:
        with open(path, 'r', encoding=config.ENCODING) as f:
            return [line.rstrip('\n') for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(file_name) from exc


def build_records(lines, parser=None):
    """
    Parse lines in file order, dropping blanks.
    The first invalid line raises and stops processing.
    """
    parser = parser or MarketRecordParser()
    records = []
    for line in lines:
        record = parser.parse_row(line)
        if record is None:
            continue
        records.append(record)
    return records


def compute_totals(records) -> Totals:
    """
    Sum AMOUNT per OPERATION. Operations with no records total 0.
    AMOUNT stays object dtype so sums are exact Python ints and cannot
    overflow 64 bits.
    """
    df = pd.DataFrame(
        [(r.operation.value, r.amount) for r in records],
        columns=['OPERATION', 'AMOUNT'],
        dtype=object,
    )
    sums = (
        df.groupby('OPERATION')['AMOUNT']
        .sum()
        .reindex([op.value for op in Operation], fill_value=0)
    )
    return Totals(
        supply=int(sums[Operation.SUPPLY.value]),
        buy=int(sums[Operation.BUY.value]),
    )


def process_lines(lines) -> Totals:
    """Raw lines -> Totals (parse, validate, then fold)."""
    return compute_totals(build_records(lines))
