"""
renderer.py
-----------
Render the supply/buy/result report from a Jinja2 template and write it out.
"""
from jinja2 import Template

from market_report import config
from market_report.errors import ReportWriteError

_TEMPLATE = Template(config.REPORT_TEMPLATE, keep_trailing_newline=True)


def build_report(totals) -> str:
    """
    Return the report text: one "<label>,<value>" line each for
    supply, buy and result, every line ending in a newline.
    """
    return _TEMPLATE.render(totals=totals.as_dict(), delimiter=config.DELIMITER)


def write_report(file_name, report: str) -> None:
    """
    Write report to file_name, replacing any existing content.
    """
    try:
        with open(file_name, 'w', encoding=config.ENCODING) as f:
            f.write(report)
    except OSError as exc:
        raise ReportWriteError(file_name) from exc
