"""Tests for the report service."""

from datetime import date

import pytest

from bukukas.domain.entities import (
    ComparisonMetric,
    IncomeCategory,
    PeriodSelector,
    TransactionKind,
    ViewMode,
)
from bukukas.domain.errors import InvalidPeriod, NotFoundError

MARCH_2024 = PeriodSelector(mode=ViewMode.DAY, year=2024, month=3)


@pytest.fixture
def march_transactions(transaction_service, sample_business, second_business):
    """Transactions for two businesses around March 2024."""
    add = transaction_service.create_transaction
    add(sample_business.id, date(2024, 3, 5), TransactionKind.INCOME,
        IncomeCategory.OMSET_USAHA, "Penjualan", 100000)
    add(sample_business.id, date(2024, 3, 5), TransactionKind.EXPENSE,
        "Belanja Bahan", "Gula", 30000)
    add(sample_business.id, date(2024, 3, 20), TransactionKind.INCOME,
        "Konsinyasi Usaha", "Titipan", 50000)
    add(sample_business.id, date(2024, 4, 1), TransactionKind.INCOME,
        IncomeCategory.OMSET_USAHA, "April", 999)
    add(second_business.id, date(2024, 3, 5), TransactionKind.INCOME,
        IncomeCategory.OMSET_USAHA, "Penjualan", 7000)


def test_period_report(report_service, sample_business, march_transactions):
    report = report_service.period_report(sample_business.id, MARCH_2024)

    assert len(report.buckets) == 31
    fifth = report.buckets[4]
    assert (fifth.key, fifth.net_balance, fifth.cumulative_balance) == ("05", 70000, 70000)
    assert report.buckets[-1].cumulative_balance == 120000
    assert report.summary.total_income == 150000
    assert report.summary.total_expense == 30000
    assert report.summary.transaction_count == 3


def test_period_report_all_businesses(report_service, march_transactions):
    report = report_service.period_report(None, MARCH_2024)

    assert report.summary.total_income == 157000
    assert report.buckets[4].total_income == 107000


def test_cash_summary_recent(report_service, sample_business, march_transactions):
    result = report_service.cash_summary(sample_business.id, MARCH_2024, recent_limit=2)

    assert result.summary.net_balance == 120000
    assert [t.date for t in result.recent] == [date(2024, 3, 20), date(2024, 3, 5)]


def test_business_comparison(report_service, sample_business, second_business, march_transactions):
    period, businesses, rows = report_service.business_comparison(
        [second_business.id, sample_business.id],
        MARCH_2024,
        ComparisonMetric.INCOME,
    )

    assert [b.id for b in businesses] == [second_business.id, sample_business.id]
    assert len(rows) == len(period.slots)
    assert rows[4].values == {second_business.id: 7000, sample_business.id: 100000}
    assert rows[19].values == {second_business.id: 0, sample_business.id: 50000}


def test_business_comparison_defaults_to_all(report_service, march_transactions):
    _, businesses, rows = report_service.business_comparison(
        None, PeriodSelector(mode=ViewMode.MONTH, year=2024), ComparisonMetric.NET
    )

    assert len(businesses) == 2
    assert sorted(rows[2].values.values()) == [7000, 120000]
    assert sorted(rows[3].values.values()) == [0, 999]


def test_business_summaries(report_service, march_transactions):
    _, rows = report_service.business_summaries(PeriodSelector(mode=ViewMode.MONTH, year=2024))

    by_name = {row.name: row for row in rows}
    assert by_name["Teh Desa Cijati"].total_income == 150999
    assert by_name["Teh Desa Cijati"].net_balance == 120999
    assert by_name["Teh Desa Kartini"].total_expense == 0


def test_unknown_business(report_service):
    with pytest.raises(NotFoundError):
        report_service.period_report("missing", MARCH_2024)


def test_invalid_period(report_service):
    with pytest.raises(InvalidPeriod):
        report_service.period_report(None, PeriodSelector(mode=ViewMode.DAY, year=2024, month=13))
