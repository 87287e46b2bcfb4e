"""Tests for employee work-day counting."""

from datetime import date, datetime

import pytest

from bukukas.domain.attendance import (
    active_keys,
    count_work_days,
    work_days_by_period,
    work_days_in_range,
)
from bukukas.domain.entities import DateRange, PeriodSelector, ViewMode
from bukukas.domain.errors import ValidationError
from bukukas.domain.periods import resolve_period

MARCH = DateRange(date(2024, 3, 1), date(2024, 3, 31))


def test_count_work_days_per_employee(make_work_day):
    records = [
        make_work_day("Siti", date(2024, 3, 1)),
        make_work_day("budi", date(2024, 3, 1)),
        make_work_day("Siti", date(2024, 3, 2)),
        make_work_day("Siti", date(2024, 3, 31)),
        make_work_day("Siti", date(2024, 4, 1)),
    ]

    rows = count_work_days(records, MARCH)

    assert [(row.employee_name, row.total_days) for row in rows] == [("budi", 1), ("Siti", 3)]
    assert all(not row.days_by_key for row in rows)


def test_count_work_days_empty_range(make_work_day):
    assert count_work_days([make_work_day("Siti", date(2024, 2, 29))], MARCH) == []


def test_work_days_by_month(make_work_day):
    resolved = resolve_period(PeriodSelector(mode=ViewMode.MONTH, year=2024))
    records = [
        make_work_day("Siti", date(2024, 1, 3)),
        make_work_day("Siti", date(2024, 3, 4)),
        make_work_day("Siti", date(2024, 3, 5)),
        make_work_day("Budi", date(2024, 3, 5)),
        make_work_day("Budi", date(2023, 12, 31)),
    ]

    rows = work_days_by_period(records, resolved)

    assert [row.employee_name for row in rows] == ["Budi", "Siti"]
    budi, siti = rows
    assert tuple(siti.days_by_key) == resolved.bucket_keys
    assert siti.days_by_key["Jan"] == 1
    assert siti.days_by_key["Mar"] == 2
    assert siti.days_by_key["Feb"] == 0
    assert siti.total_days == 3
    assert budi.total_days == 1
    assert active_keys(rows) == ["Jan", "Mar"]


def test_work_days_by_day_matches_month_length(make_work_day):
    resolved = resolve_period(PeriodSelector(mode=ViewMode.DAY, year=2024, month=2))

    rows = work_days_by_period([make_work_day("Siti", date(2024, 2, 29))], resolved)

    assert len(rows[0].days_by_key) == 29
    assert rows[0].days_by_key["29"] == 1


def test_work_day_counts_are_read_only(make_work_day):
    resolved = resolve_period(PeriodSelector(mode=ViewMode.MONTH, year=2024))
    rows = work_days_by_period([make_work_day("Siti", date(2024, 3, 4))], resolved)

    with pytest.raises(TypeError):
        rows[0].days_by_key["Mar"] = 10


def test_counting_is_order_independent(make_work_day):
    resolved = resolve_period(PeriodSelector(mode=ViewMode.MONTH, year=2024))
    records = [
        make_work_day("Siti", date(2024, 1, 3)),
        make_work_day("Budi", date(2024, 6, 5)),
        make_work_day("Siti", date(2024, 6, 7)),
    ]

    assert work_days_by_period(records, resolved) == work_days_by_period(
        list(reversed(records)), resolved
    )


def test_active_keys_empty():
    assert active_keys([]) == []


def test_datetime_work_date_is_rejected(make_work_day):
    record = make_work_day("Siti", datetime(2024, 3, 5, 8, 0))

    with pytest.raises(ValidationError, match="calendar date"):
        work_days_in_range([record], MARCH)


def test_blank_employee_name_is_rejected(make_work_day):
    with pytest.raises(ValidationError, match="employee name"):
        count_work_days([make_work_day("  ", date(2024, 3, 5))], MARCH)
