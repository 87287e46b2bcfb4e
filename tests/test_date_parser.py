"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from bukukas.utils.date_parser import get_date_range, parse_date, parse_month

TODAY = date(2024, 3, 15)


def test_parse_absolute_date():
    """Test parsing ISO dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_iso_is_not_day_first():
    """ISO dates keep month before day."""
    assert parse_date("2024-03-05") == date(2024, 3, 5)


def test_parse_day_first_formats():
    """Test parsing day-first dates."""
    assert parse_date("05/03/2024") == date(2024, 3, 5)
    assert parse_date("5 March 2024") == date(2024, 3, 5)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_relative_words():
    """Relative words resolve against the reference date."""
    assert parse_date("yesterday", today=TODAY) == TODAY - timedelta(days=1)
    assert parse_date("tomorrow", today=TODAY) == TODAY + timedelta(days=1)
    assert parse_date("this month", today=TODAY) == date(2024, 3, 1)
    assert parse_date("last month", today=TODAY) == date(2024, 2, 1)
    assert parse_date("this year", today=TODAY) == date(2024, 1, 1)
    assert parse_date("Last Year", today=TODAY) == date(2023, 1, 1)


def test_last_month_in_january():
    assert parse_date("last month", today=date(2024, 1, 10)) == date(2023, 12, 1)


def test_parse_invalid_date():
    """Test parsing invalid dates raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "period, expected",
    [
        ("this-month", (date(2024, 3, 1), date(2024, 3, 31))),
        ("last-month", (date(2024, 2, 1), date(2024, 2, 29))),
        ("this-year", (date(2024, 1, 1), date(2024, 12, 31))),
        ("last-year", (date(2023, 1, 1), date(2023, 12, 31))),
    ],
)
def test_get_date_range_full_calendar_periods(period, expected):
    assert get_date_range(period, today=TODAY) == expected


def test_get_date_range_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("this-week", today=TODAY)


def test_parse_month():
    assert parse_month("3") == 3
    assert parse_month("Mar") == 3
    assert parse_month("december") == 12
    # out-of-range numbers pass through for the period resolver to reject
    assert parse_month("13") == 13
    with pytest.raises(ValueError, match="Could not parse month"):
        parse_month("Foo")


@pytest.mark.parametrize("value", ["Marzipan", "Decade", "Ma", "Junee", "Sept"])
def test_parse_month_rejects_words_starting_with_a_month(value):
    with pytest.raises(ValueError, match="Could not parse month"):
        parse_month(value)


@pytest.mark.parametrize(
    "value, expected",
    [("Mar", 3), ("MARCH", 3), ("  sep ", 9), ("September", 9), ("may", 5)],
)
def test_parse_month_accepts_abbreviations_and_full_names(value, expected):
    assert parse_month(value) == expected
