"""
errors.py
---------
Exception hierarchy for reading, parsing and writing market transaction files.
"""


class MarketReportError(Exception):
    """Base class for every error raised by market_report."""


class ReportIOError(MarketReportError, OSError):
    """A source or destination file could not be accessed."""

    def __init__(self, message, file_name):
        super().__init__(message)
        self.file_name = str(file_name)

    def __str__(self):
        return self.args[0]


class SourceReadError(ReportIOError):
    def __init__(self, file_name):
        super().__init__(f"Can't read data from the file {file_name}", file_name)


class ReportWriteError(ReportIOError):
    def __init__(self, file_name):
        super().__init__(f"Can't write data to the file {file_name}", file_name)


class RecordError(MarketReportError, ValueError):
    """A single input line could not be turned into a record."""

    reason = "Invalid record"

    def __init__(self, line: str):
        super().__init__(f'{self.reason}: "{line}"')
        self.line = line


class MalformedRecordError(RecordError):
    reason = "Invalid record (wrong number of fields)"


class InvalidNumberError(RecordError):
    reason = "Invalid number in record"


class UnknownOperationError(RecordError):
    reason = "Unknown operation in record"
