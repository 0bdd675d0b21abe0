"""Tests for date parsing."""

import pytest
from datetime import date
from lalurecf.utils.date_parser import parse_date, get_date_range

TODAY = date(2024, 3, 15)


def test_parse_iso_date():
    """ISO dates are never read day-first."""
    assert parse_date("2024-03-01") == date(2024, 3, 1)


def test_parse_day_first_date():
    """Brazilian dd/mm/yyyy dates."""
    assert parse_date("01/03/2024") == date(2024, 3, 1)
    assert parse_date("31/12/2023") == date(2023, 12, 31)


def test_parse_strips_whitespace():
    assert parse_date("  2024-03-01 ") == date(2024, 3, 1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("today", date(2024, 3, 15)),
        ("yesterday", date(2024, 3, 14)),
        ("this month", date(2024, 3, 1)),
        ("this year", date(2024, 1, 1)),
        ("last month", date(2024, 2, 1)),
        ("last year", date(2023, 1, 1)),
    ],
)
def test_parse_relative_dates(text, expected):
    assert parse_date(text, today=TODAY) == expected


def test_parse_invalid_date():
    """Test that unparseable text raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not-a-date-at-all")


def test_parse_invalid_iso_date():
    with pytest.raises(ValueError):
        parse_date("2024-02-30")


@pytest.mark.parametrize(
    "period, expected",
    [
        ("this-month", (date(2024, 3, 1), date(2024, 3, 15))),
        ("this-year", (date(2024, 1, 1), date(2024, 3, 15))),
        ("last-month", (date(2024, 2, 1), date(2024, 2, 29))),
        ("last-year", (date(2023, 1, 1), date(2023, 12, 31))),
    ],
)
def test_get_date_range(period, expected):
    assert get_date_range(period, today=TODAY) == expected


def test_get_date_range_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
