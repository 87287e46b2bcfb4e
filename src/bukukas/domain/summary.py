"""Summary statistics for a period."""

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from bukukas.domain.aggregation import empty_category_totals, in_range
from bukukas.domain.entities import (
    Business,
    BusinessSummary,
    DateRange,
    Summary,
    Transaction,
    TransactionKind,
)


def summarize(transactions: Iterable[Transaction], date_range: DateRange) -> Summary:
    """Total income, expense, net and per-category sums within a range.

    The range is inclusive at both ends, the same as bucket aggregation.
    ``net_balance`` may be negative.
    """
    total_income = 0
    total_expense = 0
    count = 0
    by_category = empty_category_totals()

    for txn in in_range(transactions, date_range):
        if txn.kind is TransactionKind.INCOME:
            total_income += txn.amount
        else:
            total_expense += txn.amount
        by_category[txn.category] += txn.amount
        count += 1

    return Summary(
        total_income=total_income,
        total_expense=total_expense,
        net_balance=total_income - total_expense,
        transaction_count=count,
        by_category=MappingProxyType(by_category),
    )


def summarize_by_business(
    businesses: Sequence[Business],
    per_business_transactions: Mapping[str, Sequence[Transaction]],
    date_range: DateRange,
) -> list[BusinessSummary]:
    """One summary row per business, in the given business order."""
    rows = []
    for business in businesses:
        summary = summarize(per_business_transactions.get(business.id, ()), date_range)
        rows.append(
            BusinessSummary(
                business_id=business.id,
                name=business.name,
                total_income=summary.total_income,
                total_expense=summary.total_expense,
                net_balance=summary.net_balance,
            )
        )
    return rows


def recent_transactions(
    transactions: Iterable[Transaction], date_range: DateRange, limit: int = 5
) -> list[Transaction]:
    """Newest transactions within the range, newest first.

    Transactions sharing a date keep their input order.
    """
    if limit <= 0:
        return []
    selected = in_range(transactions, date_range)
    return sorted(selected, key=lambda txn: txn.date, reverse=True)[:limit]
