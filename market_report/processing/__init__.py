# market_report.processing package
from .process_activity import get_statistic
from .transactions import (
    read_lines,
    build_records,
    compute_totals,
    process_lines,
    Totals,
)
