"""Utility functions for ledgerbook."""

from ledgerbook.utils.date_parser import parse_date, normalize_qif_date, get_month_range
from ledgerbook.utils.amount_parser import parse_amount, parse_qif_amount
from ledgerbook.utils.qif_parser import parse_qif_content

__all__ = [
    "parse_date",
    "normalize_qif_date",
    "get_month_range",
    "parse_amount",
    "parse_qif_amount",
    "parse_qif_content",
]
