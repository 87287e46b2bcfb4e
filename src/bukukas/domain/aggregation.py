"""Bucket aggregation and running balances.

Every view (cash summary, report, comparison) goes through :func:`aggregate`
so that boundary handling and zero-filling are identical everywhere.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Sequence

from bukukas.domain.entities import (
    ALL_CATEGORIES,
    BalanceBucket,
    Bucket,
    Category,
    DateRange,
    PeriodSlot,
    Transaction,
    TransactionKind,
    check_transaction,
)
from bukukas.domain.periods import KeyFn, ResolvedPeriod

logger = logging.getLogger(__name__)


def empty_category_totals() -> dict[Category, int]:
    """Zero total for every income and expense category."""
    return {category: 0 for category in ALL_CATEGORIES}


@dataclass
class _Accumulator:
    slot: PeriodSlot
    totals_by_category: dict[Category, int]
    total_income: int = 0
    total_expense: int = 0

    def add(self, txn: Transaction) -> None:
        if txn.kind is TransactionKind.INCOME:
            self.total_income += txn.amount
        else:
            self.total_expense += txn.amount
        self.totals_by_category[txn.category] += txn.amount

    def freeze(self) -> Bucket:
        return Bucket(
            key=self.slot.key,
            period_start=self.slot.start,
            period_end=self.slot.end,
            totals_by_category=MappingProxyType(dict(self.totals_by_category)),
            total_income=self.total_income,
            total_expense=self.total_expense,
            net_balance=self.total_income - self.total_expense,
        )


def in_range(transactions: Iterable[Transaction], date_range: DateRange) -> list[Transaction]:
    """Transactions dated within the inclusive range, validated."""
    selected = []
    for txn in transactions:
        check_transaction(txn)
        if date_range.contains(txn.date):
            selected.append(txn)
    return selected


def aggregate(
    transactions: Iterable[Transaction],
    date_range: DateRange,
    slots: Sequence[PeriodSlot],
    key_fn: KeyFn,
) -> list[Bucket]:
    """Group transactions into zero-filled buckets.

    Args:
        transactions: Transactions to fold; never modified
        date_range: Inclusive range; transactions outside it are ignored
        slots: Bucket slots in output order
        key_fn: Maps a transaction date to its slot key

    Returns:
        One bucket per slot, in slot order

    Raises:
        InvalidTransaction: If a transaction violates the model invariants
    """
    accumulators: dict[str, _Accumulator] = {
        slot.key: _Accumulator(slot=slot, totals_by_category=empty_category_totals())
        for slot in slots
    }

    for txn in in_range(transactions, date_range):
        key = key_fn(txn.date)
        accumulator = accumulators.get(key)
        if accumulator is None:
            logger.warning(
                "Dropping transaction %s dated %s: bucket key %r is not in the period",
                txn.id,
                txn.date,
                key,
            )
            continue
        accumulator.add(txn)

    return [accumulators[slot.key].freeze() for slot in slots]


def aggregate_period(
    transactions: Iterable[Transaction], resolved: ResolvedPeriod
) -> list[Bucket]:
    """Aggregate over a resolved period's range, slots and key function."""
    return aggregate(transactions, resolved.date_range, resolved.slots, resolved.key_fn)


def with_running_balance(
    buckets: Sequence[Bucket], opening_balance: int = 0
) -> list[BalanceBucket]:
    """Attach the cumulative balance to each bucket.

    Buckets must already be in chronological order; this is not checked.
    """
    running = opening_balance
    result: list[BalanceBucket] = []
    for bucket in buckets:
        running += bucket.net_balance
        result.append(
            BalanceBucket(
                key=bucket.key,
                period_start=bucket.period_start,
                period_end=bucket.period_end,
                totals_by_category=MappingProxyType(dict(bucket.totals_by_category)),
                total_income=bucket.total_income,
                total_expense=bucket.total_expense,
                net_balance=bucket.net_balance,
                cumulative_balance=running,
            )
        )
    return result
