"""Transaction domain service.

This is the ingestion boundary: records are validated here so that the
aggregation engine only ever sees well-formed transactions.
"""

from typing import Optional
from datetime import date as date_type, datetime

from bukukas.database.base import Database
from bukukas.domain.entities import (
    Category,
    Transaction as TransactionEntity,
    TransactionKind,
    parse_category,
    parse_kind,
)
from bukukas.domain.errors import (
    NotFoundError,
    ValidationError,
    business_not_found,
    transaction_not_found,
)


def _validate_date(value: object) -> date_type:
    if isinstance(value, datetime) or not isinstance(value, date_type):
        raise ValidationError(f"Transaction date must be a calendar date, got {value!r}")
    return value


def _validate_amount(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Amount must be a whole number, got {value!r}")
    if value < 0:
        raise ValidationError(f"Amount must not be negative, got {value}")
    return value


def _validate_description(value: Optional[str]) -> str:
    description = (value or "").strip()
    if not description:
        raise ValidationError("Description is required")
    return description


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        business_id: str,
        date: date_type,
        kind: TransactionKind,
        category: "Category | str",
        description: str,
        amount: int,
    ) -> str:
        """Create a transaction.

        Args:
            business_id: Owning business ID
            date: Transaction date (date only)
            kind: Income or expense
            category: Category of ``kind``, as enum or canonical/display string
            description: Non-empty description
            amount: Non-negative amount in the smallest currency unit

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the business doesn't exist
        """
        if self.db.get_business(business_id) is None:
            raise NotFoundError(business_not_found(business_id))

        kind = parse_kind(kind)
        return self.db.create_transaction(
            business_id=business_id,
            date=_validate_date(date),
            kind=kind,
            category=parse_category(kind, category),
            description=_validate_description(description),
            amount=_validate_amount(amount),
        )

    def get_transaction(self, transaction_id: str) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: str,
        business_id: Optional[str] = None,
        date: Optional[date_type] = None,
        kind: Optional[TransactionKind] = None,
        category: "Category | str | None" = None,
        description: Optional[str] = None,
        amount: Optional[int] = None,
    ) -> None:
        """Update transaction fields.

        Only provided fields change. Changing ``kind`` requires a category
        valid for the new kind unless the current one is also valid there.

        Raises:
            NotFoundError: If the transaction or business doesn't exist
            ValidationError: If a provided field is invalid
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        if business_id is not None and self.db.get_business(business_id) is None:
            raise NotFoundError(business_not_found(business_id))

        if kind is not None:
            kind = parse_kind(kind)
        new_kind = kind if kind is not None else txn.kind
        resolved_category = None
        if category is not None:
            resolved_category = parse_category(new_kind, category)
        elif kind is not None and kind is not txn.kind:
            # Lainnya exists for both kinds; anything else has to be re-chosen
            resolved_category = parse_category(new_kind, txn.category.value)

        self.db.update_transaction(
            transaction_id=transaction_id,
            business_id=business_id,
            date=_validate_date(date) if date is not None else None,
            kind=kind,
            category=resolved_category,
            description=_validate_description(description) if description is not None else None,
            amount=_validate_amount(amount) if amount is not None else None,
        )

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        business_id: Optional[str] = None,
        start_date: Optional[date_type] = None,
        end_date: Optional[date_type] = None,
        kind: Optional[TransactionKind] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters, newest first.

        Args:
            business_id: Optional business filter (None for all businesses)
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
            kind: Optional income/expense filter
        """
        return self.db.list_transactions(
            business_id=business_id,
            start_date=start_date,
            end_date=end_date,
            kind=kind,
        )
