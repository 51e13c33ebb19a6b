"""Fiscal year labels and invoice number formatting.

Fiscal years run April 1 to March 31 and are labelled by the two-digit
years they span, e.g. 2024-04-01 .. 2025-03-31 is ``FY24-25``.
"""

from datetime import date

FISCAL_YEAR_START_MONTH = 4
INVOICE_NUMBER_PREFIX = "INV"
SEQUENCE_WIDTH = 4


def fiscal_year_for(day: date) -> str:
    if day.month >= FISCAL_YEAR_START_MONTH:
        start = day.year
    else:
        start = day.year - 1
    return f"FY{start % 100:02d}-{(start + 1) % 100:02d}"


def format_invoice_number(fiscal_year: str, sequence: int) -> str:
    """INV/{fiscal_year}/{sequence:04d}; wider sequences are not truncated"""
    if sequence < 1:
        raise ValueError(f"Invoice sequence must be positive, got {sequence}")
    return f"{INVOICE_NUMBER_PREFIX}/{fiscal_year}/{sequence:0{SEQUENCE_WIDTH}d}"
