"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-01-15"
    - Day-first dates: "15/01/2024", "15-01-2024", "15 jan 2024"
    - Relative dates: "today", "yesterday", "this month", "last year", etc.

    Args:
        date_str: Date string
        today: Reference date for relative dates; defaults to date.today()

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    if ISO_DATE.match(date_str):
        return date.fromisoformat(date_str)

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, this-year, last-month, last-year
        today: Reference date; defaults to date.today()

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: "
            "this-month, this-year, last-month, last-year"
        )
