"""Domain model entities for bukukas.

These are pure data classes representing business concepts, independent of
database schema. Aggregation results are frozen as well, and their category maps
are read-only views, so a bucket list handed to the presentation layer cannot
be altered after the fact.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from bukukas.domain.errors import InvalidTransaction, ValidationError, invalid_category


class TransactionKind(Enum):
    """Direction of a transaction."""

    INCOME = "Income"
    EXPENSE = "Expense"


class IncomeCategory(Enum):
    """Canonical income categories."""

    OMSET_USAHA = "OmsetUsaha"
    KONSINYASI_USAHA = "KonsinyasiUsaha"
    LAINNYA = "Lainnya"


class ExpenseCategory(Enum):
    """Canonical expense categories."""

    BAGI_HASIL = "BagiHasil"
    BELANJA_BAHAN = "BelanjaBahan"
    IURAN = "Iuran"
    MAINTENANCE = "Maintenance"
    MARKETING = "Marketing"
    UPAH_PEGAWAI = "UpahPegawai"
    LAINNYA = "Lainnya"


# Plain (non-str) enums: IncomeCategory.LAINNYA != ExpenseCategory.LAINNYA,
# so both can key the same map.
Category = Union[IncomeCategory, ExpenseCategory]

ALL_CATEGORIES: tuple[Category, ...] = tuple(IncomeCategory) + tuple(ExpenseCategory)


def categories_for(kind: TransactionKind) -> tuple[Category, ...]:
    """Return the ordered category set valid for a transaction kind."""
    if kind is TransactionKind.INCOME:
        return tuple(IncomeCategory)
    return tuple(ExpenseCategory)


def _normalize_label(value: str) -> str:
    return "".join(value.split()).replace("_", "").lower()


def parse_category(kind: TransactionKind, value: "str | Category") -> Category:
    """Resolve a category for a kind from its value, name or spaced label.

    Accepts "OmsetUsaha", "OMSET_USAHA" and "Omset Usaha" alike.

    Raises:
        ValidationError: If the value is not a category of the given kind
    """
    valid = categories_for(kind)
    if isinstance(value, (IncomeCategory, ExpenseCategory)):
        if value in valid:
            return value
        raise ValidationError(invalid_category(kind.value, value.value))

    wanted = _normalize_label(str(value))
    for category in valid:
        if wanted in (_normalize_label(category.value), _normalize_label(category.name)):
            return category
    raise ValidationError(invalid_category(kind.value, value))


def parse_kind(value: "str | TransactionKind") -> TransactionKind:
    """Resolve a transaction kind from 'income'/'expense' in any case."""
    if isinstance(value, TransactionKind):
        return value
    normalized = str(value).strip().lower()
    for kind in TransactionKind:
        if normalized in (kind.value.lower(), kind.name.lower()):
            return kind
    raise ValidationError(f"Unknown transaction kind '{value}'. Use 'income' or 'expense'")


@dataclass(frozen=True)
class Business:
    """Business entity owning transactions."""

    id: str
    name: str
    image: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Transaction:
    """Income or expense transaction entity."""

    id: str
    business_id: str
    date: date
    kind: TransactionKind
    category: Category
    description: str
    amount: int
    created_at: Optional[datetime] = None

    @property
    def signed_amount(self) -> int:
        """Amount with income positive and expense negative."""
        if self.kind is TransactionKind.INCOME:
            return self.amount
        return -self.amount


def check_transaction(txn: Transaction) -> None:
    """Verify the invariants every aggregated transaction must satisfy.

    Raises:
        InvalidTransaction: If any invariant is violated
    """
    if not txn.business_id:
        raise InvalidTransaction(f"Transaction {txn.id}: business_id is required")
    # datetime is a subclass of date; a time-of-day would make bucketing zone-dependent
    if not isinstance(txn.date, date) or isinstance(txn.date, datetime):
        raise InvalidTransaction(
            f"Transaction {txn.id}: date must be a calendar date, got {txn.date!r}"
        )
    if not isinstance(txn.kind, TransactionKind):
        raise InvalidTransaction(f"Transaction {txn.id}: unknown kind {txn.kind!r}")
    if txn.category not in categories_for(txn.kind):
        raise InvalidTransaction(
            f"Transaction {txn.id}: " + invalid_category(txn.kind.value, txn.category)
        )
    if isinstance(txn.amount, bool) or not isinstance(txn.amount, int):
        raise InvalidTransaction(
            f"Transaction {txn.id}: amount must be an integer, got {txn.amount!r}"
        )
    if txn.amount < 0:
        raise InvalidTransaction(
            f"Transaction {txn.id}: amount must not be negative, got {txn.amount}"
        )
    if not txn.description or not txn.description.strip():
        raise InvalidTransaction(f"Transaction {txn.id}: description is required")


class ViewMode(Enum):
    """Bucketing granularity for period views."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class PeriodSelector:
    """View mode plus anchor date parts selecting a set of buckets.

    DAY needs ``month``; MONTH ignores it; YEAR spans
    ``year - years_before`` to ``year + years_after``.
    """

    mode: ViewMode
    year: int
    month: Optional[int] = None
    years_before: int = 2
    years_after: int = 2

    @classmethod
    def default(
        cls,
        mode: ViewMode = ViewMode.DAY,
        today: Optional[date] = None,
        years_before: int = 2,
        years_after: int = 2,
    ) -> "PeriodSelector":
        """Selector anchored on today's month and year."""
        today = today or date.today()
        return cls(
            mode=mode,
            year=today.year,
            month=today.month,
            years_before=years_before,
            years_after=years_after,
        )


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        """Return True if value falls within [start, end]."""
        return self.start <= value <= self.end


@dataclass(frozen=True)
class PeriodSlot:
    """One bucket slot: its key and inclusive date bounds."""

    key: str
    start: date
    end: date


@dataclass(frozen=True)
class Bucket:
    """Accumulated sums for one period slot."""

    key: str
    period_start: date
    period_end: date
    totals_by_category: Mapping[Category, int]
    total_income: int
    total_expense: int
    net_balance: int


@dataclass(frozen=True)
class BalanceBucket(Bucket):
    """Bucket carrying the cumulative balance up to and including itself."""

    cumulative_balance: int


@dataclass(frozen=True)
class Summary:
    """Totals for a resolved period."""

    total_income: int
    total_expense: int
    net_balance: int
    transaction_count: int
    by_category: Mapping[Category, int] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def income_by_category(self) -> dict[IncomeCategory, int]:
        return {
            cat: total
            for cat, total in self.by_category.items()
            if isinstance(cat, IncomeCategory)
        }

    @property
    def expense_by_category(self) -> dict[ExpenseCategory, int]:
        return {
            cat: total
            for cat, total in self.by_category.items()
            if isinstance(cat, ExpenseCategory)
        }


@dataclass(frozen=True)
class BusinessSummary:
    """Income, expense and balance of one business over a period."""

    business_id: str
    name: str
    total_income: int
    total_expense: int
    net_balance: int


class ComparisonMetric(Enum):
    """Bucket figure compared across businesses."""

    INCOME = "income"
    EXPENSE = "expense"
    NET = "net"


@dataclass(frozen=True)
class ComparisonRow:
    """One bucket of a cross-business comparison, one value per business."""

    key: str
    period_start: date
    period_end: date
    values: dict[str, int]

    def as_record(self) -> dict[str, object]:
        """Flatten into a chart record: {"key": ..., business_id: value, ...}."""
        record: dict[str, object] = {"key": self.key}
        record.update(self.values)
        return record


@dataclass(frozen=True)
class WorkDay:
    """One day an employee worked for a business."""

    id: str
    business_id: str
    employee_name: str
    work_date: date
    created_at: Optional[datetime] = None


def check_work_day(record: WorkDay) -> None:
    """Verify a work-day record before it is counted.

    Raises:
        ValidationError: If the name is blank or the date has a time of day
    """
    if not record.employee_name or not record.employee_name.strip():
        raise ValidationError(f"Work day {record.id}: employee name is required")
    if not isinstance(record.work_date, date) or isinstance(record.work_date, datetime):
        raise ValidationError(
            f"Work day {record.id}: date must be a calendar date, got {record.work_date!r}"
        )


@dataclass(frozen=True)
class EmployeeWorkDays:
    """Days worked by one employee over a period.

    ``days_by_key`` holds one count per bucket key of the period, zeros
    included; it is empty for a plain date range.
    """

    employee_name: str
    total_days: int
    days_by_key: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
