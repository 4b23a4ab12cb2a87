"""SQLAlchemy models for hotelledger database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Decimal stored as its exact text form.

    SQLite has no decimal type and round-trips Numeric through float.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else str(Decimal(value))

    def process_result_value(self, value, dialect):
        return None if value is None else Decimal(value)


class Account(Base):
    """General-ledger account master model."""

    __tablename__ = "accounts"

    number = Column(String, primary_key=True)
    name = Column(String, nullable=False, default="")
    account_class = Column(String, nullable=False, default="")
    area = Column(String, nullable=False)
    kind = Column(String, nullable=False)
    kpi_category = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class MonthlyBalance(Base):
    """Monthly balance model keyed by (account_number, year, month).

    No foreign key to accounts: balances are written before their accounts
    within one upload.
    """

    __tablename__ = "monthly_balances"

    account_number = Column(String, primary_key=True)
    year = Column(Integer, primary_key=True)
    month = Column(Integer, primary_key=True)
    debit_total = Column(DecimalString, nullable=False, default=Decimal("0"))
    credit_total = Column(DecimalString, nullable=False, default=Decimal("0"))
    net_balance = Column(DecimalString, nullable=False, default=Decimal("0"))
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_monthly_balances_period", "year", "month"),)


class UploadBatch(Base):
    """Upload bookkeeping model, one row per (year, month)."""

    __tablename__ = "upload_batches"

    year = Column(Integer, primary_key=True)
    month = Column(Integer, primary_key=True)
    filename = Column(String, nullable=False, index=True)
    account_count = Column(Integer, nullable=False, default=0)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
