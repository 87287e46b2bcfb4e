"""Domain layer for bukukas application.

Only the pure aggregation engine is re-exported here; the database-backed
services are imported from their own modules.
"""

from bukukas.domain.aggregation import aggregate, aggregate_period, with_running_balance
from bukukas.domain.comparison import compare, compare_period
from bukukas.domain.csv_export import transactions_to_csv, write_transactions_csv
from bukukas.domain.periods import ResolvedPeriod, bucket_key_fn, resolve_period
from bukukas.domain.summary import recent_transactions, summarize, summarize_by_business

__all__ = [
    "aggregate",
    "aggregate_period",
    "with_running_balance",
    "compare",
    "compare_period",
    "transactions_to_csv",
    "write_transactions_csv",
    "ResolvedPeriod",
    "bucket_key_fn",
    "resolve_period",
    "recent_transactions",
    "summarize",
    "summarize_by_business",
]
