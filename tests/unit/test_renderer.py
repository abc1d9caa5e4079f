"""Unit tests for report rendering and writing."""

import pytest

from market_report.errors import ReportWriteError
from market_report.processing import Totals
from market_report.report import build_report, write_report


def test_build_report_layout():
    """Three lines: supply, buy, result, each newline-terminated."""
    assert build_report(Totals(120, 30)) == "supply,120\nbuy,30\nresult,90\n"


def test_build_report_zero():
    assert build_report(Totals()) == "supply,0\nbuy,0\nresult,0\n"


def test_build_report_negative_result():
    assert build_report(Totals(5, 12)) == "supply,5\nbuy,12\nresult,-7\n"


def test_write_report_overwrites(tmp_path):
    dst = tmp_path / "report.csv"
    dst.write_text("old content that is longer than the report\n", encoding="utf-8")
    write_report(dst, "supply,1\nbuy,0\nresult,1\n")
    assert dst.read_text(encoding="utf-8") == "supply,1\nbuy,0\nresult,1\n"


def test_write_report_missing_directory(tmp_path):
    """Unwritable destination -> ReportWriteError naming the path."""
    dst = tmp_path / "no_such_dir" / "report.csv"
    with pytest.raises(ReportWriteError) as exc_info:
        write_report(dst, "supply,0\nbuy,0\nresult,0\n")
    assert str(dst) in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, OSError)
    assert isinstance(exc_info.value, OSError)
