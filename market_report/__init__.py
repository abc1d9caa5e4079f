"""
market_report: aggregate supply/buy market transactions into a summary report.
"""
from .processing import get_statistic

__version__ = "0.1.0"
