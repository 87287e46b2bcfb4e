"""Utility functions for bukukas."""

from bukukas.utils.date_parser import parse_date
from bukukas.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
