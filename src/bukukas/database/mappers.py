"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, including turning stored enum
values back into the typed kind and category.
"""

from bukukas.domain import entities as domain
from bukukas.database.models import (
    Business as ORMBusiness,
    Transaction as ORMTransaction,
    WorkDay as ORMWorkDay,
)


def business_to_domain(orm_business: ORMBusiness) -> domain.Business:
    """Convert SQLAlchemy Business model to domain Business entity."""
    return domain.Business(
        id=orm_business.id,
        name=orm_business.name,
        image=orm_business.image,
        created_at=orm_business.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    kind = domain.TransactionKind(orm_transaction.kind)
    return domain.Transaction(
        id=orm_transaction.id,
        business_id=orm_transaction.business_id,
        date=orm_transaction.date,
        kind=kind,
        category=domain.parse_category(kind, orm_transaction.category),
        description=orm_transaction.description,
        amount=int(orm_transaction.amount),
        created_at=orm_transaction.created_at,
    )


def work_day_to_domain(orm_work_day: ORMWorkDay) -> domain.WorkDay:
    """Convert SQLAlchemy WorkDay model to domain WorkDay entity."""
    return domain.WorkDay(
        id=orm_work_day.id,
        business_id=orm_work_day.business_id,
        employee_name=orm_work_day.employee_name,
        work_date=orm_work_day.work_date,
        created_at=orm_work_day.created_at,
    )
