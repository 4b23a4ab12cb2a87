"""Tests for period comparison."""

import pytest
from decimal import Decimal

from hotelledger.domain.comparison import ComparisonService, compare, delta, delta_pct
from hotelledger.domain.entities import BusinessArea, LedgerKind, Period
from hotelledger.domain.errors import ValidationError
from hotelledger.domain.ledger_store import LedgerStore

from conftest import make_account, make_balance


@pytest.fixture
def ledger():
    """Store with three months of history for a few accounts."""
    return LedgerStore(
        accounts=[
            make_account("4400", "Logis", "4"),
            make_account("5500", "Küche", "5"),
            make_account("1200", "Bank", "1"),
        ],
        balances=[
            make_balance("4400", 2024, 7, "150"),
            make_balance("4400", 2024, 6, "100"),
            make_balance("4400", 2023, 7, "-200"),
            make_balance("5500", 2024, 7, "40"),
            make_balance("5500", 2024, 6, "0"),
            make_balance("1200", 2024, 6, "10"),
        ],
    )


def test_delta_helpers():
    """Test null-safe differences."""
    assert delta(Decimal("150"), Decimal("100")) == Decimal("50")
    assert delta(None, Decimal("100")) is None
    assert delta(Decimal("1"), None) is None
    assert delta_pct(Decimal("150"), Decimal("100")) == Decimal("50")
    assert delta_pct(Decimal("150"), Decimal("0")) is None
    assert delta_pct(None, Decimal("5")) is None
    # Percentages are relative to the magnitude of the previous value
    assert delta_pct(Decimal("-100"), Decimal("-200")) == Decimal("50")


def test_compare_rows(ledger):
    """Test the joined legs and deltas per account."""
    rows = {r.account_number: r for r in compare(ledger, 2024, 7)}

    logis = rows["4400"]
    assert logis.current == Decimal("150")
    assert logis.previous_month == Decimal("100")
    assert logis.previous_year == Decimal("-200")
    assert logis.delta_vs_previous_month == Decimal("50")
    assert logis.delta_pct_vs_previous_month == Decimal("50")
    assert logis.delta_vs_previous_year == Decimal("350")
    assert logis.area == BusinessArea.LOGIS
    assert logis.kind == LedgerKind.REVENUE
    assert (logis.year, logis.month) == (2024, 7)


def test_missing_history_is_none_not_zero(ledger):
    """Test that absent comparison periods stay None."""
    rows = {r.account_number: r for r in compare(ledger, 2024, 7)}

    kitchen = rows["5500"]
    assert kitchen.previous_month == Decimal("0")
    assert kitchen.delta_vs_previous_month == Decimal("40")
    assert kitchen.delta_pct_vs_previous_month is None
    assert kitchen.previous_year is None
    assert kitchen.delta_vs_previous_year is None
    assert kitchen.delta_pct_vs_previous_year is None


def test_account_without_current_balance(ledger):
    """Test that accounts with only historical balances are still listed."""
    rows = {r.account_number: r for r in compare(ledger, 2024, 7)}

    bank = rows["1200"]
    assert bank.current is None
    assert bank.previous_month == Decimal("10")
    assert bank.delta_vs_previous_month is None


def test_rows_sorted_by_account_number(ledger):
    """Test row ordering."""
    numbers = [r.account_number for r in compare(ledger, 2024, 7)]
    assert numbers == sorted(numbers)


def test_january_compares_with_december():
    """Test that the previous month of January is December of the prior year."""
    store = LedgerStore(
        accounts=[make_account("4400", "Logis", "4")],
        balances=[
            make_balance("4400", 2024, 1, "120"),
            make_balance("4400", 2023, 12, "80"),
            make_balance("4400", 2023, 1, "100"),
        ],
    )

    row = compare(store, 2024, 1)[0]

    assert row.previous_month == Decimal("80")
    assert row.previous_year == Decimal("100")
    assert row.delta_pct_vs_previous_year == Decimal("20")


def test_unknown_account_is_classified_from_number():
    """Test balances without master data."""
    store = LedgerStore(balances=[make_balance("5510", 2024, 7, "5")])

    row = compare(store, 2024, 7)[0]

    assert row.account_name == ""
    assert row.area == BusinessArea.FOOD_BEVERAGE
    assert row.kind == LedgerKind.PURCHASE


def test_compare_empty_store():
    """Test that an empty store yields no rows."""
    assert compare(LedgerStore(), 2024, 7) == []


def test_compare_invalid_month(ledger):
    """Test that invalid periods are rejected."""
    with pytest.raises(ValidationError):
        compare(ledger, 2024, 13)


def test_compare_does_not_mutate_store(ledger):
    """Test that comparison only reads the store."""
    before = ledger.snapshot()
    compare(ledger, 2024, 7)
    assert ledger.snapshot() == before


def test_comparison_service(ledger):
    """Test the service wrapper."""
    service = ComparisonService(ledger)
    assert service.compare(2024, 7) == service.compare_period(Period(2024, 7))


def test_unknown_account_matches_store_resolution():
    """Test that comparison and store resolve unknown accounts the same way."""
    store = LedgerStore(balances=[make_balance("7010", 2024, 7, "5")])

    row = compare(store, 2024, 7)[0]
    account = store.resolve_account("7010")

    assert (row.area, row.kind) == (account.area, account.kind)
    assert account.kpi_category.value == "Energie"
