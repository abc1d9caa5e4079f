"""
Base parser abstraction for market transaction lines.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class Operation(Enum):
    """Recognized operation tokens (first CSV field)."""
    SUPPLY = "supply"
    BUY = "buy"


@dataclass(frozen=True)
class Record:
    operation: Operation
    amount: int
    line: str = field(default="", compare=False, repr=False)


class BaseRecordParser(ABC):
    @abstractmethod
    def parse_row(self, line: str):  # noqa: U100
        """
        Parse one raw line of transaction data and return a Record,
        or None if the line carries no record (e.g. it is blank).
        Raises a RecordError subclass if the line is not a valid record.
        """
        pass
