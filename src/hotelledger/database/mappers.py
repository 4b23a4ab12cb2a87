"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, keeping enum and Decimal handling
out of both the domain services and the ORM models.
"""

from decimal import Decimal

from hotelledger.domain import entities as domain
from hotelledger.utils.period import as_utc
from hotelledger.database.models import (
    Account as ORMAccount,
    MonthlyBalance as ORMMonthlyBalance,
    UploadBatch as ORMUploadBatch,
)


def _decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        number=orm_account.number,
        name=orm_account.name,
        account_class=orm_account.account_class,
        area=domain.BusinessArea(orm_account.area),
        kind=domain.LedgerKind(orm_account.kind),
        kpi_category=domain.KpiCategory(orm_account.kpi_category),
    )


def account_to_orm(account: domain.Account) -> ORMAccount:
    """Convert domain Account entity to a detached SQLAlchemy model."""
    return ORMAccount(
        number=account.number,
        name=account.name,
        account_class=account.account_class,
        area=account.area.value,
        kind=account.kind.value,
        kpi_category=account.kpi_category.value,
    )


def balance_to_domain(orm_balance: ORMMonthlyBalance) -> domain.MonthlyBalance:
    """Convert SQLAlchemy MonthlyBalance model to domain MonthlyBalance entity."""
    return domain.MonthlyBalance(
        account_number=orm_balance.account_number,
        year=orm_balance.year,
        month=orm_balance.month,
        debit_total=_decimal(orm_balance.debit_total),
        credit_total=_decimal(orm_balance.credit_total),
        net_balance=_decimal(orm_balance.net_balance),
    )


def balance_to_orm(balance: domain.MonthlyBalance) -> ORMMonthlyBalance:
    """Convert domain MonthlyBalance entity to a detached SQLAlchemy model."""
    return ORMMonthlyBalance(
        account_number=balance.account_number,
        year=balance.year,
        month=balance.month,
        debit_total=balance.debit_total,
        credit_total=balance.credit_total,
        net_balance=balance.net_balance,
    )


def batch_to_domain(orm_batch: ORMUploadBatch) -> domain.UploadBatch:
    """Convert SQLAlchemy UploadBatch model to domain UploadBatch entity."""
    return domain.UploadBatch(
        filename=orm_batch.filename,
        year=orm_batch.year,
        month=orm_batch.month,
        account_count=orm_batch.account_count,
        imported_at=as_utc(orm_batch.imported_at),
    )


def batch_to_orm(batch: domain.UploadBatch) -> ORMUploadBatch:
    """Convert domain UploadBatch entity to a detached SQLAlchemy model."""
    return ORMUploadBatch(
        filename=batch.filename,
        year=batch.year,
        month=batch.month,
        account_count=batch.account_count,
        imported_at=as_utc(batch.imported_at),
    )
