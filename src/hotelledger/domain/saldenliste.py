"""Saldenliste (monthly trial balance) export parsing."""

import csv
import io
import re
from decimal import Decimal
from pathlib import Path
from typing import Optional

from hotelledger.domain.classification import derive_account_class
from hotelledger.domain.entities import (
    AccountCandidate,
    MonthlyBalance,
    ParsedLedger,
    RowIssue,
)
from hotelledger.domain.errors import (
    InvalidFilenameError,
    MalformedRowError,
    MissingColumnsError,
    invalid_filename,
    invalid_month,
    malformed_amount,
    missing_columns,
)
from hotelledger.utils.amount_parser import GERMAN, NumberFormat, parse_amount
from hotelledger.utils.logger import get_app_logger

FILENAME_PATTERN = re.compile(r"Saldenliste-(\d{2})-(\d{4})\.[A-Za-z0-9]+")

NUMBER_COLUMNS = ("KontoNr", "Kontonummer", "Konto")
CLASS_COLUMNS = ("Kontoklasse", "Klasse")
NAME_COLUMNS = ("Kontobezeichnung", "Bezeichnung")


def debit_columns(month: int) -> tuple[str, ...]:
    """Candidate debit column headers for a month, in priority order."""
    return (f"{month:02d}-Soll", "Monat-Soll", f"{month}-Soll", "Saldo Soll")


def credit_columns(month: int) -> tuple[str, ...]:
    """Candidate credit column headers for a month, in priority order."""
    return (f"{month:02d}-Haben", "Monat-Haben", f"{month}-Haben", "Saldo Haben")


def net_columns(month: int) -> tuple[str, ...]:
    """Candidate monthly net balance column headers, in priority order."""
    return (f"{month:02d}-Saldo", f"{month}-Saldo", "Saldo Monat")


# Usually the running balance; read as the net only without month columns
GENERIC_NET_COLUMN = "Saldo"


def parse_filename(filename: str) -> tuple[int, int]:
    """Parse the period encoded in an export filename.

    Args:
        filename: File name or path, e.g. "Saldenliste-07-2024.csv"

    Returns:
        Tuple of (year, month)

    Raises:
        InvalidFilenameError: If the name is not Saldenliste-MM-YYYY.<ext>
            or MM is outside 01-12
    """
    name = Path(filename).name
    match = FILENAME_PATTERN.fullmatch(name)
    if match is None:
        raise InvalidFilenameError(invalid_filename(name))
    month = int(match.group(1))
    year = int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidFilenameError(invalid_month(name, month))
    return year, month


def detect_delimiter(text: str) -> str:
    """Detect whether an export is ';' or ',' delimited from its header line."""
    header = next((line for line in text.splitlines() if line.strip()), "")
    try:
        return csv.Sniffer().sniff(header, delimiters=";,").delimiter
    except csv.Error:
        return ";" if header.count(";") >= header.count(",") else ","


class SaldenlisteParser:
    """Parse Saldenliste exports into account and balance candidates.

    Parsing is best-effort per row: a row with an unparsable amount is
    reported as a RowIssue and skipped while the rest of the file is read.
    """

    def __init__(self, number_format: NumberFormat = GERMAN, logger=None):
        """Initialize parser.

        Args:
            number_format: Separators used for amounts in the export
            logger: Optional logger compatible with logging.Logger
        """
        self.number_format = number_format
        self._logger = logger or get_app_logger()

    def parse_file(self, path: str | Path) -> ParsedLedger:
        """Read and parse an export file from disk."""
        csv_path = Path(path)
        # Fail on the name before touching the content
        parse_filename(csv_path.name)
        with open(csv_path, "r", encoding="utf-8-sig") as f:
            text = f.read()
        return self.parse(text, csv_path.name)

    def parse(self, text: str, filename: str) -> ParsedLedger:
        """Parse export text uploaded under filename.

        Args:
            text: Delimited export content (header row first)
            filename: Upload filename encoding the period

        Returns:
            ParsedLedger with the period, account and balance candidates, and
            the skipped rows. Duplicate account numbers are kept as-is.

        Raises:
            InvalidFilenameError: If filename does not encode a period
            MissingColumnsError: If the header lacks an account number column
                or any balance column
        """
        year, month = parse_filename(filename)
        text = text.lstrip("\ufeff")
        if not text.strip():
            return ParsedLedger(Path(filename).name, year, month, (), ())

        reader = csv.DictReader(io.StringIO(text), delimiter=detect_delimiter(text))
        headers = [h.strip() for h in (reader.fieldnames or []) if h is not None]
        columns = self._resolve_columns(headers, month)

        accounts: list[AccountCandidate] = []
        balances: list[MonthlyBalance] = []
        issues: list[RowIssue] = []

        for row_num, row in enumerate(reader, start=2):  # header is row 1
            row = {
                (key or "").strip(): value
                for key, value in row.items()
                if isinstance(value, str) or value is None
            }
            number = (row.get(columns["number"]) or "").strip()
            if not number:
                continue
            try:
                account, balance = self.parse_row(row, columns, number, year, month)
            except MalformedRowError as e:
                issue = RowIssue(row_num=row_num, message=str(e))
                self._logger.warning("%s: %s", filename, issue)
                issues.append(issue)
                continue
            accounts.append(account)
            balances.append(balance)

        return ParsedLedger(
            filename=Path(filename).name,
            year=year,
            month=month,
            accounts=tuple(accounts),
            balances=tuple(balances),
            issues=tuple(issues),
        )

    def parse_row(
        self,
        row: dict[str, Optional[str]],
        columns: dict[str, Optional[str]],
        number: str,
        year: int,
        month: int,
    ) -> tuple[AccountCandidate, MonthlyBalance]:
        """Parse one data row.

        Raises:
            MalformedRowError: If any amount field cannot be parsed
        """
        account_class = derive_account_class(self._cell(row, columns["class"]), number)
        name = self._cell(row, columns["name"])

        debit = self._amount(row, columns["debit"])
        credit = self._amount(row, columns["credit"])
        if columns["net"] is not None:
            net = self._amount(row, columns["net"])
        else:
            net = debit - credit

        account = AccountCandidate(number=number, name=name, account_class=account_class)
        balance = MonthlyBalance(
            account_number=number,
            year=year,
            month=month,
            debit_total=debit,
            credit_total=credit,
            net_balance=net,
        )
        return account, balance

    def _resolve_columns(
        self, headers: list[str], month: int
    ) -> dict[str, Optional[str]]:
        """Map logical fields to actual header names."""
        lookup = {h.lower(): h for h in headers}

        def find(candidates: tuple[str, ...]) -> Optional[str]:
            for candidate in candidates:
                if candidate.lower() in lookup:
                    return lookup[candidate.lower()]
            return None

        columns = {
            "number": find(NUMBER_COLUMNS),
            "class": find(CLASS_COLUMNS),
            "name": find(NAME_COLUMNS),
            "debit": find(debit_columns(month)),
            "credit": find(credit_columns(month)),
            "net": find(net_columns(month)),
        }
        if columns["net"] is None and columns["debit"] is None and columns["credit"] is None:
            columns["net"] = find((GENERIC_NET_COLUMN,))

        missing = []
        if columns["number"] is None:
            missing.append(NUMBER_COLUMNS[0])
        if columns["debit"] is None and columns["credit"] is None and columns["net"] is None:
            missing.append(f"{debit_columns(month)[0]}/{credit_columns(month)[0]} or Saldo")
        if missing:
            raise MissingColumnsError(missing_columns(missing))
        return columns

    @staticmethod
    def _cell(row: dict[str, Optional[str]], column: Optional[str]) -> str:
        if column is None:
            return ""
        return (row.get(column) or "").strip()

    def _amount(self, row: dict[str, Optional[str]], column: Optional[str]) -> Decimal:
        raw = self._cell(row, column)
        try:
            return parse_amount(raw, self.number_format)
        except ValueError:
            raise MalformedRowError(malformed_amount(column or "amount", raw))


def parse_saldenliste(
    text: str, filename: str, number_format: NumberFormat = GERMAN
) -> ParsedLedger:
    """Parse export text with a default parser."""
    return SaldenlisteParser(number_format=number_format).parse(text, filename)
