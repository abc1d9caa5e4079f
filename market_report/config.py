"""
config.py
--------
Centralized constants for the market transaction report.
"""
# Field delimiter in both the input records and the report lines
DELIMITER = ","

# Each record is exactly: operation, amount
EXPECTED_PARTS = 2

# Label of the derived net balance line (supply - buy)
RESULT = "result"

# Text encoding used for reading input and writing the report
ENCODING = "utf-8"

# Amounts are signed 64-bit integers
AMOUNT_MIN = -(2 ** 63)
AMOUNT_MAX = 2 ** 63 - 1

# Report layout: one "<label>,<value>" line each for supply, buy and result
REPORT_TEMPLATE = (
    "{% for label, value in totals.items() %}"
    "{{ label }}{{ delimiter }}{{ value }}\n"
    "{% endfor %}"
)

# --- CLI defaults (scripts/write_statistic.py) ---
DEFAULT_INPUT_FILE = "data/transactions.csv"
DEFAULT_OUTPUT_FILE = "data/report.csv"
