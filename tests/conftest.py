"""Shared pytest fixtures for bukukas tests."""

import tempfile
import os
from datetime import date
import pytest

from bukukas.database.factories import create_sqlite_database
from bukukas.domain.business import BusinessService
from bukukas.domain.employee import EmployeeService
from bukukas.domain.entities import (
    ExpenseCategory,
    IncomeCategory,
    Transaction,
    TransactionKind,
    WorkDay,
)
from bukukas.domain.report import ReportService
from bukukas.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def business_service(temp_db):
    """Create a BusinessService with a temporary database."""
    return BusinessService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def employee_service(temp_db):
    """Create an EmployeeService with a temporary database."""
    return EmployeeService(temp_db)


@pytest.fixture
def sample_business(business_service):
    """Create a sample business for testing."""
    business_id = business_service.create_business(name="Teh Desa Cijati")
    return business_service.get_business(business_id)


@pytest.fixture
def second_business(business_service):
    """Create a second business for comparison tests."""
    business_id = business_service.create_business(name="Teh Desa Kartini")
    return business_service.get_business(business_id)


@pytest.fixture
def make_transaction():
    """Build in-memory transactions without touching the database."""
    counter = {"n": 0}

    def _make(
        day: date,
        amount: int,
        kind: TransactionKind = TransactionKind.INCOME,
        category=None,
        business_id: str = "biz-1",
        description: str = "Penjualan",
    ) -> Transaction:
        counter["n"] += 1
        if category is None:
            category = (
                IncomeCategory.OMSET_USAHA
                if kind is TransactionKind.INCOME
                else ExpenseCategory.BELANJA_BAHAN
            )
        return Transaction(
            id=f"txn-{counter['n']}",
            business_id=business_id,
            date=day,
            kind=kind,
            category=category,
            description=description,
            amount=amount,
        )

    return _make


@pytest.fixture
def make_work_day():
    """Build in-memory work days without touching the database."""
    counter = {"n": 0}

    def _make(name: str, day: date, business_id: str = "biz-1") -> WorkDay:
        counter["n"] += 1
        return WorkDay(
            id=f"wd-{counter['n']}",
            business_id=business_id,
            employee_name=name,
            work_date=day,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
