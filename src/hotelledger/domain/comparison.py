"""Period comparison of account balances."""

from decimal import Decimal
from typing import Optional

from hotelledger.domain.entities import ComparisonRow, Period
from hotelledger.domain.ledger_store import LedgerStore
from hotelledger.utils.period import previous_month, previous_year, validate_period

HUNDRED = Decimal("100")


def delta(current: Optional[Decimal], previous: Optional[Decimal]) -> Optional[Decimal]:
    """Return current - previous, or None if either side is missing."""
    if current is None or previous is None:
        return None
    return current - previous


def delta_pct(
    current: Optional[Decimal], previous: Optional[Decimal]
) -> Optional[Decimal]:
    """Return (current - previous) / |previous| * 100.

    None when either side is missing or previous is zero.
    """
    if current is None or previous is None or previous == 0:
        return None
    return (current - previous) / abs(previous) * HUNDRED


def compare(store: LedgerStore, year: int, month: int) -> list[ComparisonRow]:
    """Join every account's balance against previous month and previous year.

    One row is produced per account with a balance in any of the three
    periods. A missing leg is None, as are its deltas; absent history is
    never reported as zero. The store is only read.

    Args:
        store: Ledger store to read from
        year: Selected year
        month: Selected month (1-12)

    Returns:
        Comparison rows ordered by account number
    """
    period = validate_period(year, month)
    prev_month = previous_month(period)
    prev_year = previous_year(period)

    current_balances = store.balances_for_period(period)
    prev_month_balances = store.balances_for_period(prev_month)
    prev_year_balances = store.balances_for_period(prev_year)

    numbers = (
        set(current_balances) | set(prev_month_balances) | set(prev_year_balances)
    )

    rows: list[ComparisonRow] = []
    for number in sorted(numbers):
        account = store.resolve_account(number)
        current = _net(current_balances.get(number))
        previous_m = _net(prev_month_balances.get(number))
        previous_y = _net(prev_year_balances.get(number))
        rows.append(
            ComparisonRow(
                account_number=number,
                account_name=account.name,
                area=account.area,
                kind=account.kind,
                year=period.year,
                month=period.month,
                current=current,
                previous_month=previous_m,
                previous_year=previous_y,
                delta_vs_previous_month=delta(current, previous_m),
                delta_pct_vs_previous_month=delta_pct(current, previous_m),
                delta_vs_previous_year=delta(current, previous_y),
                delta_pct_vs_previous_year=delta_pct(current, previous_y),
            )
        )
    return rows


def _net(balance) -> Optional[Decimal]:
    return None if balance is None else balance.net_balance


class ComparisonService:
    """Service for period comparisons over a ledger store."""

    def __init__(self, store: LedgerStore):
        """Initialize comparison service.

        Args:
            store: Ledger store to read from
        """
        self.store = store

    def compare(self, year: int, month: int) -> list[ComparisonRow]:
        """Compare the selected period against its comparison periods."""
        return compare(self.store, year, month)

    def compare_period(self, period: Period) -> list[ComparisonRow]:
        """Compare a Period value."""
        return compare(self.store, period.year, period.month)
