"""Employee work-day counting.

Work days are counted per employee name, either over a plain date range or
bucketed over a resolved period with the same slots and key function the
cash views use.
"""

import logging
from collections import Counter, defaultdict
from types import MappingProxyType
from typing import Iterable

from bukukas.domain.entities import DateRange, EmployeeWorkDays, WorkDay, check_work_day
from bukukas.domain.periods import ResolvedPeriod

logger = logging.getLogger(__name__)


def _employee_order(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def work_days_in_range(records: Iterable[WorkDay], date_range: DateRange) -> list[WorkDay]:
    """Work days dated within the inclusive range, validated."""
    selected = []
    for record in records:
        check_work_day(record)
        if date_range.contains(record.work_date):
            selected.append(record)
    return selected


def count_work_days(records: Iterable[WorkDay], date_range: DateRange) -> list[EmployeeWorkDays]:
    """Total days per employee within a range, ordered by name.

    Employees without a day in the range are not listed.
    """
    totals = Counter(record.employee_name for record in work_days_in_range(records, date_range))
    return [
        EmployeeWorkDays(employee_name=name, total_days=totals[name])
        for name in sorted(totals, key=_employee_order)
    ]


def work_days_by_period(
    records: Iterable[WorkDay], resolved: ResolvedPeriod
) -> list[EmployeeWorkDays]:
    """Days per employee per bucket of a resolved period, ordered by name.

    Every row carries a count for every bucket key, zeros included.
    """
    keys = resolved.bucket_keys
    per_employee: dict[str, Counter] = defaultdict(Counter)

    for record in work_days_in_range(records, resolved.date_range):
        key = resolved.key_for(record.work_date)
        if key not in keys:
            logger.warning(
                "Dropping work day %s dated %s: bucket key %r is not in the period",
                record.id,
                record.work_date,
                key,
            )
            continue
        per_employee[record.employee_name][key] += 1

    rows = []
    for name in sorted(per_employee, key=_employee_order):
        counts = per_employee[name]
        rows.append(
            EmployeeWorkDays(
                employee_name=name,
                total_days=sum(counts.values()),
                days_by_key=MappingProxyType({key: counts[key] for key in keys}),
            )
        )
    return rows


def active_keys(rows: Iterable[EmployeeWorkDays]) -> list[str]:
    """Bucket keys with at least one work day, in period order."""
    rows = list(rows)
    if not rows:
        return []
    return [key for key in rows[0].days_by_key if any(row.days_by_key[key] for row in rows)]
