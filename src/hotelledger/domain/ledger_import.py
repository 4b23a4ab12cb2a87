"""Saldenliste import domain service."""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from hotelledger.domain.entities import ParsedLedger
from hotelledger.domain.ledger_store import LedgerStore
from hotelledger.domain.saldenliste import SaldenlisteParser
from hotelledger.utils.amount_parser import GERMAN, NumberFormat
from hotelledger.utils.logger import get_app_logger


class LedgerImportService:
    """Service for importing Saldenliste exports into a ledger store."""

    def __init__(
        self, store: LedgerStore, number_format: NumberFormat = GERMAN, logger=None
    ):
        """Initialize import service.

        Args:
            store: Ledger store to merge uploads into
            number_format: Separators used for amounts in the exports
            logger: Optional logger compatible with logging.Logger
        """
        self.store = store
        self._logger = logger or get_app_logger()
        self.parser = SaldenlisteParser(number_format=number_format, logger=self._logger)

    def import_file(self, csv_file_path: str) -> dict[str, Any]:
        """Import a Saldenliste file from disk.

        Args:
            csv_file_path: Path to the export, named Saldenliste-MM-YYYY.<ext>

        Returns:
            Import statistics, see import_text()

        Raises:
            InvalidFilenameError: If the filename does not encode a period
            MissingColumnsError: If the export lacks required columns
            FileNotFoundError: If the file doesn't exist
            StoreWriteFailure: If persisting fails; nothing is merged
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")
        parsed = self.parser.parse_file(csv_path)
        return self._merge(parsed)

    def import_text(
        self, text: str, filename: str, imported_at: Optional[datetime] = None
    ) -> dict[str, Any]:
        """Import export content uploaded under filename.

        Returns:
            Dict with import statistics:
            - filename: upload filename
            - year, month: period encoded in the filename
            - accounts: number of distinct accounts merged
            - balances: number of balance rows read
            - skipped: number of malformed rows skipped
            - errors: list of per-row messages for skipped rows
        """
        parsed = self.parser.parse(text, filename)
        return self._merge(parsed, imported_at=imported_at)

    def _merge(
        self, parsed: ParsedLedger, imported_at: Optional[datetime] = None
    ) -> dict[str, Any]:
        batch = self.store.merge_upload(parsed, imported_at=imported_at)
        return {
            "filename": batch.filename,
            "year": batch.year,
            "month": batch.month,
            "accounts": batch.account_count,
            "balances": len(parsed.balances),
            "skipped": len(parsed.issues),
            "errors": [str(issue) for issue in parsed.issues],
        }
