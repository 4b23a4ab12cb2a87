"""Ledger store holding the canonical accounts, balances and upload batches."""

from dataclasses import replace
from datetime import datetime, UTC
from typing import Iterable, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError

from hotelledger.database.base import DEFAULT_PAGE_SIZE, Database
from hotelledger.domain.classification import (
    classify,
    classify_kpi_category,
    derive_account_class,
)
from hotelledger.domain.entities import (
    Account,
    AccountCandidate,
    MonthlyBalance,
    ParsedLedger,
    Period,
    UploadBatch,
)
from hotelledger.domain.errors import (
    StoreWriteFailure,
    ValidationError,
    store_write_failed,
)
from hotelledger.utils.logger import get_app_logger
from hotelledger.utils.period import as_utc

BalanceKey = tuple[str, int, int]


class AccountLike(Protocol):
    number: str
    name: str
    account_class: str


def build_account(candidate: AccountLike) -> Account:
    """Classify account master data into a full Account."""
    number = candidate.number.strip()
    account_class = derive_account_class(candidate.account_class, number)
    area, kind = classify(account_class, number)
    return Account(
        number=number,
        name=candidate.name,
        account_class=account_class,
        area=area,
        kind=kind,
        kpi_category=classify_kpi_category(number),
    )


def consolidate_balances(balances: Iterable[MonthlyBalance]) -> list[MonthlyBalance]:
    """Sum balances sharing a (account_number, year, month) key.

    Exports may list one account on several sub-ledger rows; their totals
    add up to the account's balance. First-seen order is kept.
    """
    consolidated: dict[BalanceKey, MonthlyBalance] = {}
    for balance in balances:
        existing = consolidated.get(balance.key)
        if existing is None:
            consolidated[balance.key] = balance
            continue
        consolidated[balance.key] = MonthlyBalance(
            account_number=balance.account_number,
            year=balance.year,
            month=balance.month,
            debit_total=existing.debit_total + balance.debit_total,
            credit_total=existing.credit_total + balance.credit_total,
            net_balance=existing.net_balance + balance.net_balance,
        )
    return list(consolidated.values())


class LedgerStore:
    """Deduplicated accounts and monthly balances with upsert semantics.

    The store is an explicit object handed to each component. It is mutated
    only through its merge methods; every merge either applies completely or
    raises and leaves the store unchanged. When a Database is attached, data
    is persisted before the in-memory state is swapped in.
    """

    def __init__(
        self,
        db: Optional[Database] = None,
        accounts: Iterable[Account] = (),
        balances: Iterable[MonthlyBalance] = (),
        batches: Iterable[UploadBatch] = (),
        logger=None,
    ):
        """Initialize ledger store.

        Args:
            db: Optional Database to persist merges to
            accounts: Initial accounts
            balances: Initial balances
            batches: Initial upload batches
            logger: Optional logger compatible with logging.Logger
        """
        self.db = db
        self._logger = logger or get_app_logger()
        self._accounts: dict[str, Account] = {a.number: a for a in accounts}
        self._balances: dict[BalanceKey, MonthlyBalance] = {b.key: b for b in balances}
        self._batches: dict[Period, UploadBatch] = {b.period: b for b in batches}

    @classmethod
    def load(
        cls, db: Database, page_size: int = DEFAULT_PAGE_SIZE, logger=None
    ) -> "LedgerStore":
        """Build a store from everything held by the database."""
        return cls(
            db=db,
            accounts=db.list_accounts(),
            balances=db.list_balances(page_size=page_size),
            batches=db.list_batches(),
            logger=logger,
        )

    # Read access
    @property
    def accounts(self) -> list[Account]:
        """All accounts ordered by number."""
        return [self._accounts[n] for n in sorted(self._accounts)]

    @property
    def balances(self) -> list[MonthlyBalance]:
        """All balances ordered by (account_number, year, month)."""
        return [self._balances[k] for k in sorted(self._balances)]

    @property
    def batches(self) -> list[UploadBatch]:
        """All upload batches ordered by period."""
        return [self._batches[p] for p in sorted(self._batches)]

    def get_account(self, number: str) -> Optional[Account]:
        """Get account by number."""
        return self._accounts.get(number)

    def resolve_account(self, number: str) -> Account:
        """Get account by number, classifying it from the number if unknown.

        Balances may reference accounts whose master record is missing; those
        are classified from the number alone and carry an empty name.
        """
        account = self._accounts.get(number)
        if account is None:
            account = build_account(
                AccountCandidate(number=number, name="", account_class="")
            )
        return account

    def get_balance(self, number: str, year: int, month: int) -> Optional[MonthlyBalance]:
        """Get the balance of an account for one month."""
        return self._balances.get((number, year, month))

    def balances_for_period(self, period: Period) -> dict[str, MonthlyBalance]:
        """Get balances of one month keyed by account number."""
        return {
            number: balance
            for (number, year, month), balance in self._balances.items()
            if year == period.year and month == period.month
        }

    def get_batch(self, period: Period) -> Optional[UploadBatch]:
        """Get the batch recorded for a period."""
        return self._batches.get(period)

    def latest_period(self) -> Optional[Period]:
        """Return the newest uploaded period, or None without batches."""
        return max(self._batches) if self._batches else None

    def snapshot(self) -> tuple[tuple[Account, ...], tuple[MonthlyBalance, ...]]:
        """Return the account and balance sets for comparison."""
        return tuple(self.accounts), tuple(self.balances)

    # Merge operations
    def merge_accounts(self, incoming: Iterable[AccountLike]) -> list[Account]:
        """Classify and upsert accounts by number, last write wins.

        Returns:
            The classified accounts that were written
        """
        merged = self._classify_all(incoming)
        accounts = dict(self._accounts)
        accounts.update({a.number: a for a in merged})
        self._persist("accounts", lambda db: db.upsert_accounts(merged))
        self._accounts = accounts
        return merged

    def merge_balances(self, incoming: Iterable[MonthlyBalance]) -> None:
        """Upsert balances by (account_number, year, month), last write wins."""
        incoming = list(incoming)
        for balance in incoming:
            self._check_period(balance.year, balance.month)
        balances = dict(self._balances)
        balances.update({b.key: b for b in incoming})
        self._persist("balances", lambda db: db.upsert_balances(incoming))
        self._balances = balances

    def record_batch(self, batch: UploadBatch) -> None:
        """Upsert batch bookkeeping by (year, month)."""
        self._check_period(batch.year, batch.month)
        batch = replace(batch, imported_at=as_utc(batch.imported_at))
        batches = dict(self._batches)
        batches[batch.period] = batch
        self._persist(batch.filename, lambda db: db.upsert_batch(batch))
        self._batches = batches

    def remove_batch(self, filename: str) -> bool:
        """Remove the batch record for filename.

        Only the bookkeeping entry is removed; balances already merged from
        that upload stay in the store.

        Returns:
            True if a batch was removed
        """
        batches = {p: b for p, b in self._batches.items() if b.filename != filename}
        removed = len(batches) != len(self._batches)
        self._persist(filename, lambda db: db.delete_batch_by_filename(filename))
        self._batches = batches
        if removed:
            self._logger.info("Removed batch record '%s'", filename)
        return removed

    def merge_upload(
        self, parsed: ParsedLedger, imported_at: Optional[datetime] = None
    ) -> UploadBatch:
        """Merge a parsed export and record its batch as one transaction.

        Duplicate account rows are consolidated first: account master data is
        last write wins, balances are summed. Balances are written first,
        accounts second and the batch record last.

        Args:
            parsed: Parsed export
            imported_at: Import timestamp (defaults to now, UTC)

        Returns:
            The recorded UploadBatch

        Raises:
            StoreWriteFailure: If persisting fails; the store is unchanged
        """
        self._check_period(parsed.year, parsed.month)
        merged_accounts = self._classify_all(parsed.accounts)
        merged_balances = consolidate_balances(parsed.balances)
        batch = UploadBatch(
            filename=parsed.filename,
            year=parsed.year,
            month=parsed.month,
            account_count=len(merged_accounts),
            imported_at=as_utc(imported_at or datetime.now(UTC)),
        )

        accounts = dict(self._accounts)
        accounts.update({a.number: a for a in merged_accounts})
        balances = dict(self._balances)
        balances.update({b.key: b for b in merged_balances})
        batches = dict(self._batches)
        batches[batch.period] = batch

        self._persist(
            parsed.filename,
            lambda db: db.persist_upload(merged_balances, merged_accounts, batch),
        )
        self._accounts, self._balances, self._batches = accounts, balances, batches
        self._logger.info(
            "Merged '%s' (%s): %d accounts, %d balances",
            parsed.filename,
            parsed.period,
            len(merged_accounts),
            len(merged_balances),
        )
        return batch

    def _classify_all(self, incoming: Iterable[AccountLike]) -> list[Account]:
        """Classify candidates, keeping the last one per number."""
        by_number: dict[str, Account] = {}
        for candidate in incoming:
            account = build_account(candidate)
            if not account.number:
                continue
            by_number.pop(account.number, None)
            by_number[account.number] = account
        return list(by_number.values())

    def _persist(self, label: str, write) -> None:
        """Run a write against the attached database, if any."""
        if self.db is None:
            return
        try:
            write(self.db)
        except (SQLAlchemyError, OSError) as e:
            self._logger.error("Store write failed for '%s': %s", label, e)
            raise StoreWriteFailure(store_write_failed(label, e)) from e

    @staticmethod
    def _check_period(year: int, month: int) -> None:
        if not 1 <= month <= 12:
            raise ValidationError(f"Invalid month {month} (expected 1-12)")
