"""Shared pytest fixtures for hotelledger tests."""

import tempfile
from datetime import datetime, UTC
import os
from decimal import Decimal
from pathlib import Path
import pytest

from hotelledger.database.factories import create_sqlite_database
from hotelledger.domain.entities import Account, AccountCandidate, MonthlyBalance, UploadBatch
from hotelledger.domain.ledger_store import LedgerStore, build_account

HEADER = "KontoNr;Kontobezeichnung;Kontoklasse;{mm}-Soll;{mm}-Haben;{mm}-Saldo"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store(temp_db):
    """Create an empty LedgerStore backed by the temporary database."""
    return LedgerStore(db=temp_db)


@pytest.fixture
def memory_store():
    """Create an empty LedgerStore without persistence."""
    return LedgerStore()


@pytest.fixture
def cli_runner():
    """Create a Click CLI runner for testing."""
    from click.testing import CliRunner

    return CliRunner()


def saldenliste_text(month: int, rows: list[tuple[str, str, str, str, str, str]]) -> str:
    """Build semicolon-separated export content for a month.

    Each row is (number, name, class, debit, credit, net) as they would
    appear in the export.
    """
    lines = [HEADER.format(mm=f"{month:02d}")]
    lines.extend(";".join(row) for row in rows)
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_saldenliste(tmp_path):
    """Return a helper writing an export file into tmp_path."""

    def _write(month: int, year: int, rows, name: str | None = None) -> Path:
        path = tmp_path / (name or f"Saldenliste-{month:02d}-{year}.csv")
        path.write_text(saldenliste_text(month, rows), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_rows():
    """Rows covering revenue, purchase and neutral accounts."""
    return [
        ("4400", "Logis Erlöse 7%", "4", "0,00", "10.000,00", "-10.000,00"),
        ("5500", "Wareneinsatz Küche", "5", "2.500,00", "0,00", "2.500,00"),
        ("6200", "Löhne", "6", "4.000,00", "0,00", "4.000,00"),
        ("1200", "Bank", "1", "12.000,00", "9.500,00", "2.500,00"),
    ]


def make_account(number: str, name: str = "", account_class: str = "") -> Account:
    """Build a classified account for tests."""
    return build_account(
        AccountCandidate(number=number, name=name, account_class=account_class)
    )


def make_balance(number: str, year: int, month: int, net, debit="0", credit="0"):
    """Build a MonthlyBalance for tests."""
    return MonthlyBalance(
        account_number=number,
        year=year,
        month=month,
        debit_total=Decimal(debit),
        credit_total=Decimal(credit),
        net_balance=Decimal(net),
    )


def make_batch(year: int, month: int, filename: str | None = None, count: int = 0):
    """Build an UploadBatch for tests."""
    return UploadBatch(
        filename=filename or f"Saldenliste-{month:02d}-{year}.csv",
        year=year,
        month=month,
        account_count=count,
        imported_at=datetime(year, month, 28, tzinfo=UTC),
    )
