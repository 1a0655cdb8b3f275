"""Utility functions for billable."""

from billable.utils.date_parser import parse_date, parse_month_param, format_month_param
from billable.utils.amount_parser import parse_amount
from billable.utils.rates import build_rates, load_rates, parse_rate_pairs

__all__ = [
    "parse_date",
    "parse_month_param",
    "format_month_param",
    "parse_amount",
    "build_rates",
    "load_rates",
    "parse_rate_pairs",
]
