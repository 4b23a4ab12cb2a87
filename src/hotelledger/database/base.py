"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from hotelledger.domain.entities import Account, MonthlyBalance, UploadBatch

DEFAULT_PAGE_SIZE = 1000


class Database(ABC):
    """Abstract data store interface for hotelledger.

    The ledger core only needs bulk reads at startup and idempotent upserts
    keyed by natural keys; every write method must be safe to retry.
    """

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

    # Read contract
    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by number."""
        pass

    @abstractmethod
    def get_balances_page(self, offset: int, limit: int) -> list[MonthlyBalance]:
        """Get one page of balances ordered by (account_number, year, month)."""
        pass

    def list_balances(self, page_size: int = DEFAULT_PAGE_SIZE) -> list[MonthlyBalance]:
        """List all balances, reading page by page."""
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        balances: list[MonthlyBalance] = []
        offset = 0
        while True:
            page = self.get_balances_page(offset=offset, limit=page_size)
            balances.extend(page)
            if len(page) < page_size:
                return balances
            offset += page_size

    @abstractmethod
    def list_batches(self) -> list[UploadBatch]:
        """List all upload batches ordered by period."""
        pass

    # Write contract
    @abstractmethod
    def upsert_accounts(self, accounts: Iterable[Account]) -> None:
        """Insert or replace accounts by number."""
        pass

    @abstractmethod
    def upsert_balances(self, balances: Iterable[MonthlyBalance]) -> None:
        """Insert or replace balances by (account_number, year, month)."""
        pass

    @abstractmethod
    def upsert_batch(self, batch: UploadBatch) -> None:
        """Insert or replace the batch for (year, month)."""
        pass

    @abstractmethod
    def delete_batch_by_filename(self, filename: str) -> int:
        """Delete batches with the given filename. Returns number deleted."""
        pass

    @abstractmethod
    def persist_upload(
        self,
        balances: Iterable[MonthlyBalance],
        accounts: Iterable[Account],
        batch: Optional[UploadBatch],
    ) -> None:
        """Persist one upload as a single transaction.

        Writes balances, then accounts, then the batch record last, so the
        batch never exists without its data. Nothing is kept on failure.
        """
        pass
