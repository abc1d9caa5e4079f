#!/usr/bin/env python3
"""
CLI wrapper: total a market transactions CSV into a supply/buy/result report.

Usage: write_statistic.py [FROM_FILE [TO_FILE]]
"""
import os, sys
# ensure repo root is on PYTHONPATH so market_report can be imported
_SCRIPT_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_SCRIPT_DIR, os.pardir))
sys.path.insert(0, _REPO_ROOT)
from pathlib import Path

from market_report import config, get_statistic
from market_report.errors import MarketReportError


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    from_file = Path(args[0] if len(args) > 0 else config.DEFAULT_INPUT_FILE)
    to_file = Path(args[1] if len(args) > 1 else config.DEFAULT_OUTPUT_FILE)

    try:
        get_statistic(from_file, to_file)
    except MarketReportError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    print(f"✔ report written to {to_file}")


if __name__ == '__main__':
    main()
