"""Utility functions for hotelledger."""

from hotelledger.utils.amount_parser import NumberFormat, parse_amount
from hotelledger.utils.formatting import format_currency, format_percent
from hotelledger.utils.period import month_name, previous_month, previous_year

__all__ = [
    "NumberFormat",
    "parse_amount",
    "format_currency",
    "format_percent",
    "month_name",
    "previous_month",
    "previous_year",
]
