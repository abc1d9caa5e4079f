# market_report/parsers package
from .base import BaseRecordParser, Operation, Record
from .market import MarketRecordParser, parse_amount
