"""
process_activity.py
-------------------
Orchestrates reading a transactions file and writing its summary report.
"""
from pathlib import Path

from market_report.processing.transactions import read_lines, process_lines
from market_report.report.renderer import build_report, write_report


def get_statistic(from_file_name: str | Path, to_file_name: str | Path) -> None:
    """
    Read transactions from from_file_name, total supply and buy amounts,
    and write the supply/buy/result report to to_file_name.

    Nothing is written unless every line was valid.
    """
    # 1) Read and total
    lines = read_lines(from_file_name)
    totals = process_lines(lines)

    # 2) Render and write
    report = build_report(totals)
    write_report(to_file_name, report)
