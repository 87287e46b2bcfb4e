"""Employee work-day service.

Records which employee worked on which day for a business and reports the
counts per employee, either per bucket of a period or over a date range.
"""

import logging
from dataclasses import dataclass
from datetime import date as date_type, datetime
from typing import Optional

from bukukas.database.base import Database
from bukukas.domain.attendance import count_work_days, work_days_by_period
from bukukas.domain.entities import (
    DateRange,
    EmployeeWorkDays,
    PeriodSelector,
    WorkDay as WorkDayEntity,
)
from bukukas.domain.errors import (
    NotFoundError,
    ValidationError,
    business_not_found,
    work_day_not_found,
)
from bukukas.domain.periods import ResolvedPeriod, resolve_period

logger = logging.getLogger(__name__)


def _validate_name(value: Optional[str]) -> str:
    # Collapse inner whitespace so "Siti  Aminah" and "Siti Aminah" count as one employee
    name = " ".join((value or "").split())
    if not name:
        raise ValidationError("Employee name is required")
    return name


def _validate_work_date(value: object) -> date_type:
    if isinstance(value, datetime) or not isinstance(value, date_type):
        raise ValidationError(f"Work date must be a calendar date, got {value!r}")
    return value


@dataclass(frozen=True)
class WorkDayReport:
    """Work days per employee, bucketed over a resolved period."""

    period: ResolvedPeriod
    rows: tuple[EmployeeWorkDays, ...]


class EmployeeService:
    """Service for employee work days."""

    def __init__(self, db: Database):
        """Initialize employee service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_business(self, business_id: str) -> None:
        if self.db.get_business(business_id) is None:
            raise NotFoundError(business_not_found(business_id))

    def record_work_day(self, business_id: str, employee_name: str, work_date: date_type) -> str:
        """Record that an employee worked on a date.

        Args:
            business_id: Business the employee worked for
            employee_name: Employee name
            work_date: Day worked (date only)

        Returns:
            Work-day ID

        Raises:
            ValidationError: If the name is empty or the date is not a date
            NotFoundError: If the business doesn't exist
            ConflictError: If the employee already has this day recorded
        """
        self._require_business(business_id)
        return self.db.create_work_day(
            business_id=business_id,
            employee_name=_validate_name(employee_name),
            work_date=_validate_work_date(work_date),
        )

    def get_work_day(self, work_day_id: str) -> Optional[WorkDayEntity]:
        """Get work day by ID, or None if not found."""
        return self.db.get_work_day(work_day_id)

    def update_work_day(
        self,
        work_day_id: str,
        employee_name: Optional[str] = None,
        work_date: Optional[date_type] = None,
    ) -> None:
        """Correct the employee name and/or date of a work day.

        Raises:
            NotFoundError: If the work day doesn't exist
            ValidationError: If a provided field is invalid
            ConflictError: If the result duplicates another work day
        """
        if self.db.get_work_day(work_day_id) is None:
            raise NotFoundError(work_day_not_found(work_day_id))
        self.db.update_work_day(
            work_day_id=work_day_id,
            employee_name=_validate_name(employee_name) if employee_name is not None else None,
            work_date=_validate_work_date(work_date) if work_date is not None else None,
        )

    def delete_work_day(self, work_day_id: str) -> None:
        """Delete a work day.

        Raises:
            NotFoundError: If the work day doesn't exist
        """
        if self.db.get_work_day(work_day_id) is None:
            raise NotFoundError(work_day_not_found(work_day_id))
        self.db.delete_work_day(work_day_id)

    def list_work_days(
        self,
        business_id: Optional[str] = None,
        start_date: Optional[date_type] = None,
        end_date: Optional[date_type] = None,
        employee_name: Optional[str] = None,
    ) -> list[WorkDayEntity]:
        """List work days with filters, newest first."""
        return self.db.list_work_days(
            business_id=business_id,
            start_date=start_date,
            end_date=end_date,
            employee_name=_validate_name(employee_name) if employee_name is not None else None,
        )

    def list_employees(self, business_id: Optional[str] = None) -> list[str]:
        """Distinct employee names with at least one work day, ordered by name."""
        names = {record.employee_name for record in self.db.list_work_days(business_id=business_id)}
        return sorted(names, key=lambda name: (name.casefold(), name))

    def work_day_report(self, business_id: Optional[str], selector: PeriodSelector) -> WorkDayReport:
        """Work days per employee per bucket of a period.

        Raises:
            InvalidPeriod: If the selector is out of range
            NotFoundError: If the business doesn't exist
        """
        period = resolve_period(selector)
        if business_id is not None:
            self._require_business(business_id)
        records = self.db.list_work_days(
            business_id=business_id,
            start_date=period.range_start,
            end_date=period.range_end,
        )
        logger.debug("Counting %d work days over %s", len(records), period.date_range)
        return WorkDayReport(period=period, rows=tuple(work_days_by_period(records, period)))

    def work_day_totals(
        self, business_id: Optional[str], start_date: date_type, end_date: date_type
    ) -> list[EmployeeWorkDays]:
        """Total work days per employee over an inclusive date range.

        Raises:
            ValidationError: If the end date is before the start date
            NotFoundError: If the business doesn't exist
        """
        if end_date < start_date:
            raise ValidationError("End date cannot be before start date")
        if business_id is not None:
            self._require_business(business_id)
        records = self.db.list_work_days(
            business_id=business_id, start_date=start_date, end_date=end_date
        )
        return count_work_days(records, DateRange(start_date, end_date))
