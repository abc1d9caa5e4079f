# market_report.report package
from .renderer import build_report, write_report
