"""Utility functions for lalurecf."""

from lalurecf.utils.date_parser import parse_date
from lalurecf.utils.amount_parser import format_amount, parse_amount
from lalurecf.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "format_amount", "resolve_account"]
