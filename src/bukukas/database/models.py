"""SQLAlchemy models for bukukas database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    CheckConstraint,
    Index,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex


class Business(Base):
    """Business model."""

    __tablename__ = "businesses"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, unique=True, nullable=False)
    image = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="business")
    work_days = relationship("WorkDay", back_populates="business")


class Transaction(Base):
    """Income or expense transaction model.

    ``kind`` and ``category`` hold the canonical enum values ("Income",
    "OmsetUsaha", ...); ``amount`` is in the smallest currency unit.
    """

    __tablename__ = "transactions"

    id = Column(String(32), primary_key=True, default=_new_id)
    business_id = Column(String(32), ForeignKey("businesses.id"), nullable=False)
    date = Column(Date, nullable=False)
    kind = Column(String, nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transaction_amount_non_negative"),
        Index("ix_transactions_business_date", "business_id", "date"),
    )

    # Relationships
    business = relationship("Business", back_populates="transactions")


class WorkDay(Base):
    """One day an employee worked for a business."""

    __tablename__ = "work_days"

    id = Column(String(32), primary_key=True, default=_new_id)
    business_id = Column(String(32), ForeignKey("businesses.id"), nullable=False)
    employee_name = Column(String, nullable=False)
    work_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "business_id", "employee_name", "work_date", name="uq_work_day_employee_date"
        ),
        Index("ix_work_days_business_date", "business_id", "work_date"),
    )

    # Relationships
    business = relationship("Business", back_populates="work_days")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
