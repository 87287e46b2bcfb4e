"""CSV export of a flat transaction list."""

import csv
import io
from typing import Iterable, TextIO

from bukukas.domain.entities import Transaction

CSV_HEADER = ("Date", "TransactionType", "Category", "Description", "Amount")


def sort_for_export(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Newest first; transactions sharing a date keep their input order."""
    return sorted(transactions, key=lambda txn: txn.date, reverse=True)


def transaction_row(txn: Transaction) -> tuple[str, str, str, str, str]:
    """CSV cells for one transaction. Expenses get a negative amount."""
    return (
        txn.date.isoformat(),
        txn.kind.value,
        txn.category.value,
        txn.description,
        str(txn.signed_amount),
    )


def write_transactions_csv(transactions: Iterable[Transaction], sink: TextIO) -> int:
    """Write transactions as CSV to a text sink.

    Args:
        transactions: Transactions to export
        sink: Writable text stream (open files with newline="")

    Returns:
        Number of data rows written
    """
    writer = csv.writer(sink, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    count = 0
    for txn in sort_for_export(transactions):
        writer.writerow(transaction_row(txn))
        count += 1
    return count


def transactions_to_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions as a CSV string."""
    buffer = io.StringIO()
    write_transactions_csv(transactions, buffer)
    return buffer.getvalue()
