"""Cross-business comparison over shared bucket slots."""

from typing import Mapping, Sequence

from bukukas.domain.aggregation import aggregate
from bukukas.domain.entities import (
    Bucket,
    ComparisonMetric,
    ComparisonRow,
    DateRange,
    PeriodSlot,
    Transaction,
)
from bukukas.domain.periods import KeyFn, ResolvedPeriod


def metric_value(bucket: Bucket, metric: ComparisonMetric) -> int:
    """Pick the compared figure out of a bucket."""
    if metric is ComparisonMetric.INCOME:
        return bucket.total_income
    if metric is ComparisonMetric.EXPENSE:
        return bucket.total_expense
    return bucket.net_balance


def compare(
    per_business_transactions: Mapping[str, Sequence[Transaction]],
    date_range: DateRange,
    slots: Sequence[PeriodSlot],
    key_fn: KeyFn,
    metric: ComparisonMetric = ComparisonMetric.INCOME,
) -> list[ComparisonRow]:
    """Aggregate each business separately, then merge bucket by bucket.

    Args:
        per_business_transactions: Business ID -> its transactions. Iteration
            order sets the field order of every row.
        date_range: Inclusive range shared by all businesses
        slots: Bucket slots shared by all businesses
        key_fn: Date -> slot key
        metric: Figure taken from each business's bucket

    Returns:
        One row per slot with a value for every business (0 when it has no
        transactions there); empty list if there are no businesses
    """
    if not per_business_transactions:
        return []

    per_business_buckets = {
        business_id: aggregate(transactions, date_range, slots, key_fn)
        for business_id, transactions in per_business_transactions.items()
    }

    rows: list[ComparisonRow] = []
    for index, slot in enumerate(slots):
        values = {
            business_id: metric_value(buckets[index], metric)
            for business_id, buckets in per_business_buckets.items()
        }
        rows.append(
            ComparisonRow(key=slot.key, period_start=slot.start, period_end=slot.end, values=values)
        )
    return rows


def compare_period(
    per_business_transactions: Mapping[str, Sequence[Transaction]],
    resolved: ResolvedPeriod,
    metric: ComparisonMetric = ComparisonMetric.INCOME,
) -> list[ComparisonRow]:
    """Compare businesses over a resolved period."""
    return compare(
        per_business_transactions,
        resolved.date_range,
        resolved.slots,
        resolved.key_fn,
        metric=metric,
    )
