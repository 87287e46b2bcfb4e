"""Report domain service.

Fetches a point-in-time snapshot from the database and runs the pure
aggregation functions over it. Nothing is cached: every call recomputes from
scratch.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from bukukas.database.base import Database
from bukukas.domain.aggregation import aggregate_period, with_running_balance
from bukukas.domain.comparison import compare_period
from bukukas.domain.entities import (
    BalanceBucket,
    Business,
    BusinessSummary,
    ComparisonMetric,
    ComparisonRow,
    PeriodSelector,
    Summary,
    Transaction,
)
from bukukas.domain.errors import NotFoundError, business_not_found
from bukukas.domain.periods import ResolvedPeriod, resolve_period
from bukukas.domain.summary import recent_transactions, summarize, summarize_by_business

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodReport:
    """Buckets with running balance plus the period summary."""

    period: ResolvedPeriod
    buckets: tuple[BalanceBucket, ...]
    summary: Summary


@dataclass(frozen=True)
class CashSummary:
    """Summary of a period plus its most recent transactions."""

    period: ResolvedPeriod
    summary: Summary
    recent: tuple[Transaction, ...]


class ReportService:
    """Service composing fetch and aggregation for the report views."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_business(self, business_id: str) -> Business:
        business = self.db.get_business(business_id)
        if business is None:
            raise NotFoundError(business_not_found(business_id))
        return business

    def fetch_transactions(
        self, business_id: Optional[str], period: ResolvedPeriod
    ) -> list[Transaction]:
        """Transactions of one business (or all when None) within a period."""
        if business_id is not None:
            self._require_business(business_id)
        transactions = self.db.list_transactions(
            business_id=business_id,
            start_date=period.range_start,
            end_date=period.range_end,
        )
        logger.debug(
            "Fetched %d transactions for %s between %s and %s",
            len(transactions),
            business_id or "all businesses",
            period.range_start,
            period.range_end,
        )
        return transactions

    def period_report(
        self, business_id: Optional[str], selector: PeriodSelector
    ) -> PeriodReport:
        """Running-balance buckets and summary for a selector.

        Raises:
            InvalidPeriod: If the selector is out of range
            NotFoundError: If the business doesn't exist
        """
        period = resolve_period(selector)
        transactions = self.fetch_transactions(business_id, period)
        buckets = with_running_balance(aggregate_period(transactions, period))
        return PeriodReport(
            period=period,
            buckets=tuple(buckets),
            summary=summarize(transactions, period.date_range),
        )

    def cash_summary(
        self, business_id: Optional[str], selector: PeriodSelector, recent_limit: int = 5
    ) -> CashSummary:
        """Period totals plus the latest transactions."""
        period = resolve_period(selector)
        transactions = self.fetch_transactions(business_id, period)
        return CashSummary(
            period=period,
            summary=summarize(transactions, period.date_range),
            recent=tuple(recent_transactions(transactions, period.date_range, recent_limit)),
        )

    def _businesses(self, business_ids: Optional[Sequence[str]]) -> list[Business]:
        if business_ids is None:
            return self.db.list_businesses()
        return [self._require_business(business_id) for business_id in business_ids]

    def _per_business(
        self, businesses: Sequence[Business], period: ResolvedPeriod
    ) -> dict[str, list[Transaction]]:
        return {
            business.id: self.db.list_transactions(
                business_id=business.id,
                start_date=period.range_start,
                end_date=period.range_end,
            )
            for business in businesses
        }

    def business_comparison(
        self,
        business_ids: Optional[Sequence[str]],
        selector: PeriodSelector,
        metric: ComparisonMetric = ComparisonMetric.INCOME,
    ) -> tuple[ResolvedPeriod, list[Business], list[ComparisonRow]]:
        """Compare businesses bucket by bucket.

        Args:
            business_ids: Businesses to compare, in column order; None for all
            selector: Period to compare over
            metric: Figure compared

        Returns:
            Tuple of (resolved period, compared businesses, rows)
        """
        period = resolve_period(selector)
        businesses = self._businesses(business_ids)
        rows = compare_period(self._per_business(businesses, period), period, metric)
        return period, businesses, rows

    def business_summaries(
        self, selector: PeriodSelector
    ) -> tuple[ResolvedPeriod, list[BusinessSummary]]:
        """Income, expense and balance per business over a period."""
        period = resolve_period(selector)
        businesses = self._businesses(None)
        rows = summarize_by_business(
            businesses, self._per_business(businesses, period), period.date_range
        )
        return period, rows
