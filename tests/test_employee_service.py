"""Tests for EmployeeService."""

from datetime import date, datetime

import pytest

from bukukas.domain.entities import PeriodSelector, ViewMode
from bukukas.domain.errors import (
    ConflictError,
    DependencyError,
    InvalidPeriod,
    NotFoundError,
    ValidationError,
)


def test_record_and_get_work_day(employee_service, sample_business):
    work_day_id = employee_service.record_work_day(
        sample_business.id, "  Siti   Aminah ", date(2024, 3, 5)
    )

    record = employee_service.get_work_day(work_day_id)
    assert record.employee_name == "Siti Aminah"
    assert record.work_date == date(2024, 3, 5)
    assert record.business_id == sample_business.id


def test_record_work_day_validation(employee_service, sample_business):
    with pytest.raises(ValidationError, match="Employee name is required"):
        employee_service.record_work_day(sample_business.id, " ", date(2024, 3, 5))
    with pytest.raises(ValidationError, match="calendar date"):
        employee_service.record_work_day(sample_business.id, "Siti", datetime(2024, 3, 5, 9))
    with pytest.raises(NotFoundError):
        employee_service.record_work_day("missing", "Siti", date(2024, 3, 5))


def test_same_day_twice_is_a_conflict(employee_service, sample_business, second_business):
    employee_service.record_work_day(sample_business.id, "Siti", date(2024, 3, 5))

    with pytest.raises(ConflictError, match="already recorded"):
        employee_service.record_work_day(sample_business.id, "Siti", date(2024, 3, 5))

    # the same person may work for another business that day
    employee_service.record_work_day(second_business.id, "Siti", date(2024, 3, 5))


def test_update_and_delete_work_day(employee_service, sample_business):
    first = employee_service.record_work_day(sample_business.id, "Siti", date(2024, 3, 5))
    second = employee_service.record_work_day(sample_business.id, "Siti", date(2024, 3, 6))

    with pytest.raises(ConflictError):
        employee_service.update_work_day(second, work_date=date(2024, 3, 5))

    employee_service.update_work_day(second, employee_name="Budi", work_date=date(2024, 3, 5))
    assert employee_service.get_work_day(second).employee_name == "Budi"

    employee_service.delete_work_day(first)
    assert employee_service.get_work_day(first) is None
    with pytest.raises(NotFoundError):
        employee_service.delete_work_day(first)
    with pytest.raises(NotFoundError):
        employee_service.update_work_day(first, employee_name="Siti")


def test_list_work_days_and_employees(employee_service, sample_business, second_business):
    employee_service.record_work_day(sample_business.id, "Siti", date(2024, 3, 5))
    employee_service.record_work_day(sample_business.id, "Budi", date(2024, 3, 7))
    employee_service.record_work_day(second_business.id, "Asep", date(2024, 3, 6))

    records = employee_service.list_work_days(business_id=sample_business.id)
    assert [r.work_date for r in records] == [date(2024, 3, 7), date(2024, 3, 5)]

    ranged = employee_service.list_work_days(
        start_date=date(2024, 3, 6), end_date=date(2024, 3, 6)
    )
    assert [r.employee_name for r in ranged] == ["Asep"]

    assert employee_service.list_employees(sample_business.id) == ["Budi", "Siti"]
    assert employee_service.list_employees() == ["Asep", "Budi", "Siti"]


def test_work_day_report_month_view(employee_service, sample_business, second_business):
    for day in (date(2024, 3, 5), date(2024, 3, 6), date(2024, 5, 1)):
        employee_service.record_work_day(sample_business.id, "Siti", day)
    employee_service.record_work_day(second_business.id, "Siti", date(2024, 3, 5))
    employee_service.record_work_day(sample_business.id, "Siti", date(2025, 1, 2))

    report = employee_service.work_day_report(
        sample_business.id, PeriodSelector(mode=ViewMode.MONTH, year=2024)
    )

    assert len(report.rows) == 1
    row = report.rows[0]
    assert row.total_days == 3
    assert row.days_by_key["Mar"] == 2
    assert row.days_by_key["May"] == 1

    all_businesses = employee_service.work_day_report(
        None, PeriodSelector(mode=ViewMode.MONTH, year=2024)
    )
    assert all_businesses.rows[0].days_by_key["Mar"] == 3


def test_work_day_report_rejects_invalid_period(employee_service, sample_business):
    with pytest.raises(InvalidPeriod):
        employee_service.work_day_report(
            sample_business.id, PeriodSelector(mode=ViewMode.DAY, year=2024, month=13)
        )
    with pytest.raises(NotFoundError):
        employee_service.work_day_report(
            "missing", PeriodSelector(mode=ViewMode.DAY, year=2024, month=3)
        )


def test_work_day_totals_custom_range(employee_service, sample_business):
    for day in (date(2024, 3, 1), date(2024, 3, 15), date(2024, 3, 16)):
        employee_service.record_work_day(sample_business.id, "Siti", day)

    rows = employee_service.work_day_totals(
        sample_business.id, date(2024, 3, 1), date(2024, 3, 15)
    )

    assert [(r.employee_name, r.total_days) for r in rows] == [("Siti", 2)]
    with pytest.raises(ValidationError, match="End date"):
        employee_service.work_day_totals(sample_business.id, date(2024, 3, 15), date(2024, 3, 1))


def test_business_with_work_days_cannot_be_deleted(
    employee_service, business_service, sample_business
):
    employee_service.record_work_day(sample_business.id, "Siti", date(2024, 3, 5))

    with pytest.raises(DependencyError, match="1 work day recorded"):
        business_service.delete_business(sample_business.id)
