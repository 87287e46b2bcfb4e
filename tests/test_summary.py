"""Tests for period summary helpers."""

from datetime import date

import pytest

from bukukas.domain.entities import (
    Business,
    DateRange,
    ExpenseCategory,
    IncomeCategory,
    TransactionKind,
)
from bukukas.domain.summary import recent_transactions, summarize, summarize_by_business

MARCH = DateRange(date(2024, 3, 1), date(2024, 3, 31))


def test_summarize_empty():
    summary = summarize([], MARCH)

    assert summary.total_income == 0
    assert summary.total_expense == 0
    assert summary.net_balance == 0
    assert summary.transaction_count == 0


def test_summarize_negative_net(make_transaction):
    summary = summarize(
        [
            make_transaction(date(2024, 3, 1), 1000),
            make_transaction(date(2024, 3, 2), 4000, kind=TransactionKind.EXPENSE),
            make_transaction(date(2024, 4, 1), 9999),
        ],
        MARCH,
    )

    assert summary.net_balance == -3000
    assert summary.transaction_count == 2


def test_summarize_by_category(make_transaction):
    summary = summarize(
        [
            make_transaction(date(2024, 3, 1), 1000, category=IncomeCategory.KONSINYASI_USAHA),
            make_transaction(date(2024, 3, 2), 400, kind=TransactionKind.EXPENSE,
                             category=ExpenseCategory.MARKETING),
            make_transaction(date(2024, 3, 3), 600, kind=TransactionKind.EXPENSE,
                             category=ExpenseCategory.MARKETING),
        ],
        MARCH,
    )

    assert summary.income_by_category[IncomeCategory.KONSINYASI_USAHA] == 1000
    assert summary.income_by_category[IncomeCategory.OMSET_USAHA] == 0
    assert summary.expense_by_category[ExpenseCategory.MARKETING] == 1000
    assert IncomeCategory.LAINNYA not in summary.expense_by_category


def test_summarize_by_business_keeps_order(make_transaction):
    businesses = [Business(id="b", name="Kartini"), Business(id="a", name="Cijati")]
    per_business = {
        "a": [make_transaction(date(2024, 3, 1), 100, business_id="a")],
    }

    rows = summarize_by_business(businesses, per_business, MARCH)

    assert [row.business_id for row in rows] == ["b", "a"]
    assert (rows[0].total_income, rows[0].net_balance) == (0, 0)
    assert rows[1].name == "Cijati"
    assert rows[1].total_income == 100


def test_recent_transactions_newest_first(make_transaction):
    older = make_transaction(date(2024, 3, 1), 1)
    first_same_day = make_transaction(date(2024, 3, 10), 2)
    second_same_day = make_transaction(date(2024, 3, 10), 3)
    outside = make_transaction(date(2024, 4, 1), 4)

    recent = recent_transactions([older, first_same_day, second_same_day, outside], MARCH)

    assert recent == [first_same_day, second_same_day, older]


def test_recent_transactions_limit(make_transaction):
    transactions = [make_transaction(date(2024, 3, d), d) for d in range(1, 11)]

    assert [t.amount for t in recent_transactions(transactions, MARCH, limit=3)] == [10, 9, 8]
    assert recent_transactions(transactions, MARCH, limit=0) == []


def test_summary_category_map_is_read_only(make_transaction):
    summary = summarize([make_transaction(date(2024, 3, 1), 1000)], MARCH)

    with pytest.raises(TypeError):
        summary.by_category[IncomeCategory.OMSET_USAHA] = 5

    assert summary.by_category[IncomeCategory.OMSET_USAHA] == summary.total_income == 1000
