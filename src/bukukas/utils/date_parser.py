"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from bukukas.domain.periods import MONTH_NAMES, last_day_of_month

SUPPORTED_PERIODS = ("this-month", "last-month", "this-year", "last-year")

MONTH_FULL_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - ISO dates: "2024-03-05"
    - Day-first dates: "05/03/2024", "5 March 2024"
    - Relative dates: "today", "yesterday", "this month", "last month", etc.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # ISO first: dateutil with dayfirst=True would swap month and day of "2024-03-05"
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get inclusive start and end dates for a named calendar period.

    Unlike a running "to date" window, each period covers the full calendar
    month or year.

    Args:
        period: One of this-month, last-month, this-year, last-year
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        start_date = today.replace(day=1)
    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
    elif period == "this-year":
        return (date(today.year, 1, 1), date(today.year, 12, 31))
    elif period == "last-year":
        return (date(today.year - 1, 1, 1), date(today.year - 1, 12, 31))
    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(SUPPORTED_PERIODS)}"
        )

    end_date = start_date.replace(day=last_day_of_month(start_date.year, start_date.month))
    return (start_date, end_date)


def parse_month(value: str) -> int:
    """Parse a month number, abbreviation ("Mar") or full name ("March") into 1..12.

    Numbers are returned as-is, even when out of range, so that the period
    resolver can reject them with its own error.

    Raises:
        ValueError: If the value is neither a number nor a month name
    """
    value = value.strip()
    if value.lstrip("-").isdigit():
        return int(value)
    wanted = value.lower()
    for index, (abbreviation, full_name) in enumerate(zip(MONTH_NAMES, MONTH_FULL_NAMES), start=1):
        if wanted in (abbreviation.lower(), full_name.lower()):
            return index
    raise ValueError(f"Could not parse month '{value}'")
