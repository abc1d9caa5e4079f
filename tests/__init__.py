"""
Test suite for market_report

Contains:
- tests/unit/          : Unit tests for parsing, totals, rendering and the file pipeline
"""
