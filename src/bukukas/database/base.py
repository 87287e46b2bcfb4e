"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from bukukas.domain.entities import (
    Business,
    Category,
    Transaction,
    TransactionKind,
    WorkDay,
)


class Database(ABC):
    """Abstract database interface for bukukas."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Business operations
    @abstractmethod
    def create_business(self, name: str, image: Optional[str] = None) -> str:
        """Create a new business. Returns business ID."""
        pass

    @abstractmethod
    def get_business(self, business_id: str) -> Optional[Business]:
        """Get business by ID."""
        pass

    @abstractmethod
    def list_businesses(self) -> list[Business]:
        """List all businesses ordered by name."""
        pass

    @abstractmethod
    def update_business(
        self, business_id: str, name: Optional[str] = None, image: Optional[str] = None
    ) -> None:
        """Update business name and/or image."""
        pass

    @abstractmethod
    def delete_business(self, business_id: str) -> None:
        """Delete a business."""
        pass

    @abstractmethod
    def get_business_transaction_count(self, business_id: str) -> int:
        """Count transactions owned by a business."""
        pass

    @abstractmethod
    def get_business_work_day_count(self, business_id: str) -> int:
        """Count employee work days recorded for a business."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        business_id: str,
        date: date,
        kind: TransactionKind,
        category: Category,
        description: str,
        amount: int,
    ) -> str:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: str,
        business_id: Optional[str] = None,
        date: Optional[date] = None,
        kind: Optional[TransactionKind] = None,
        category: Optional[Category] = None,
        description: Optional[str] = None,
        amount: Optional[int] = None,
    ) -> None:
        """Update the provided transaction fields."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        business_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        kind: Optional[TransactionKind] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest first.

        Args:
            business_id: Optional business filter; None means all businesses
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
            kind: Optional income/expense filter
        """
        pass

    # Employee work-day operations
    @abstractmethod
    def create_work_day(self, business_id: str, employee_name: str, work_date: date) -> str:
        """Record a work day. Returns work-day ID."""
        pass

    @abstractmethod
    def get_work_day(self, work_day_id: str) -> Optional[WorkDay]:
        """Get work day by ID."""
        pass

    @abstractmethod
    def update_work_day(
        self,
        work_day_id: str,
        employee_name: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> None:
        """Update employee name and/or date of a work day."""
        pass

    @abstractmethod
    def delete_work_day(self, work_day_id: str) -> None:
        """Delete a work day."""
        pass

    @abstractmethod
    def list_work_days(
        self,
        business_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_name: Optional[str] = None,
    ) -> list[WorkDay]:
        """List work days with optional filters, newest first."""
        pass
