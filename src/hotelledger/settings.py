"""Settings for hotelledger, sourced from environment variables."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from hotelledger.domain.errors import ConfigurationError
from hotelledger.utils.amount_parser import NumberFormat

DB_PATH_ENV = "HOTELLEDGER_DB_PATH"
DECIMAL_SEPARATOR_ENV = "HOTELLEDGER_DECIMAL_SEPARATOR"
THOUSANDS_SEPARATOR_ENV = "HOTELLEDGER_THOUSANDS_SEPARATOR"
PAGE_SIZE_ENV = "HOTELLEDGER_PAGE_SIZE"
LOG_LEVEL_ENV = "HOTELLEDGER_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        db_path: SQLite file path, or None for the default location.
        decimal_separator: Decimal separator used by uploaded exports.
        thousands_separator: Thousands separator used by uploaded exports.
        page_size: Page size for bulk balance reads.
        log_level: Level name for the application logger.
    """

    db_path: Optional[str] = None
    decimal_separator: str = ","
    thousands_separator: str = "."
    page_size: int = 1000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Returns:
            Settings: Settings sourced from environment variables.

        Raises:
            ConfigurationError: If a variable holds an unusable value.
        """
        raw_page_size = os.getenv(PAGE_SIZE_ENV, "1000").strip()
        try:
            page_size = int(raw_page_size)
        except ValueError:
            raise ConfigurationError(
                f"{PAGE_SIZE_ENV} must be an integer, got '{raw_page_size}'"
            )
        settings = cls(
            db_path=os.getenv(DB_PATH_ENV) or None,
            decimal_separator=os.getenv(DECIMAL_SEPARATOR_ENV, ","),
            thousands_separator=os.getenv(THOUSANDS_SEPARATOR_ENV, "."),
            page_size=page_size,
            log_level=os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper(),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """Check that the settings can be used."""
        if self.page_size <= 0:
            raise ConfigurationError(f"{PAGE_SIZE_ENV} must be positive")
        self.number_format()

    def number_format(self) -> NumberFormat:
        """Return the numeric format for parsing exports."""
        try:
            return NumberFormat(
                decimal_separator=self.decimal_separator,
                thousands_separator=self.thousands_separator,
            )
        except ValueError as e:
            raise ConfigurationError(str(e))

    def resolve_db_path(self) -> str:
        """Return the database path, creating the default directory if needed."""
        if self.db_path:
            return self.db_path
        db_dir = Path.home() / ".hotelledger"
        db_dir.mkdir(exist_ok=True)
        return str(db_dir / "hotelledger.db")
