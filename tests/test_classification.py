"""Tests for account classification."""

import pytest

from hotelledger.domain.classification import (
    AREA_RULES,
    classify,
    classify_area,
    classify_kind,
    classify_kpi_category,
    derive_account_class,
)
from hotelledger.domain.entities import BusinessArea, KpiCategory, LedgerKind


@pytest.mark.parametrize(
    "account_class,number,area",
    [
        ("4", "4400", BusinessArea.LOGIS),
        ("4", "4408", BusinessArea.LOGIS),
        ("4", "44010", BusinessArea.FOOD_BEVERAGE),
        ("5", "5500", BusinessArea.FOOD_BEVERAGE),
        ("4", "4425", BusinessArea.SPA),
        ("5", "5565", BusinessArea.SPA),
        ("4", "4431", BusinessArea.MEDICAL),
        ("4", "4450", BusinessArea.SHOP),
        ("6", "6210", BusinessArea.PERSONNEL),
        ("6", "6610", BusinessArea.MARKETING),
        ("6", "6300", BusinessArea.ADMINISTRATION),
        ("6", "6800", BusinessArea.ADMINISTRATION),
        ("7", "7010", BusinessArea.ENERGY),
        ("7", "7150", BusinessArea.TECHNICAL),
        ("1", "1200", BusinessArea.OTHER),
        ("4", "4900", BusinessArea.OTHER),
    ],
)
def test_classify_area(account_class, number, area):
    """Test area rules by class and number range."""
    assert classify_area(account_class, number) == area


def test_classify_kind():
    """Test ledger kind from the class prefix."""
    assert classify_kind("4", "4400") == LedgerKind.REVENUE
    assert classify_kind("5", "5500") == LedgerKind.PURCHASE
    assert classify_kind("8", "8000") == LedgerKind.PURCHASE
    assert classify_kind("1", "1200") == LedgerKind.NEUTRAL
    assert classify_kind("9", "9000") == LedgerKind.NEUTRAL


def test_range_requires_matching_class():
    """Test that a number inside a range does not match under another class."""
    assert classify_area("1", "4400") == BusinessArea.OTHER
    assert classify_kind("1", "4400") == LedgerKind.NEUTRAL


def test_blank_class_uses_first_digit():
    """Test class fallback to the number's first digit."""
    assert derive_account_class("", "5500") == "5"
    assert derive_account_class(None, " 4400") == "4"
    assert derive_account_class(" 6 ", "4400") == "6"
    assert derive_account_class("", "abc") == ""
    assert classify("", "5500") == (BusinessArea.FOOD_BEVERAGE, LedgerKind.PURCHASE)


def test_non_numeric_number():
    """Test that ranged rules never match a number without digits."""
    assert classify("4", "ABC") == (BusinessArea.OTHER, LedgerKind.REVENUE)


def test_classification_is_stable():
    """Test that re-running classification yields the same result."""
    inputs = [("4", "4400"), ("5", "5500"), ("6", "6200"), ("", "7010"), ("1", "1200")]
    first = [classify(c, n) for c, n in inputs]
    second = [classify(c, n) for c, n in inputs]
    assert first == second


def test_first_matching_rule_wins():
    """Test that personnel accounts are not swallowed by the admin range."""
    personnel_index = next(
        i for i, r in enumerate(AREA_RULES) if r.area == BusinessArea.PERSONNEL
    )
    admin_index = next(
        i for i, r in enumerate(AREA_RULES) if r.area == BusinessArea.ADMINISTRATION
    )
    assert personnel_index < admin_index
    assert classify_area("6", "6250") == BusinessArea.PERSONNEL


@pytest.mark.parametrize(
    "number,category",
    [
        ("4400", KpiCategory.REVENUE),
        ("44010", KpiCategory.REVENUE),
        ("5500", KpiCategory.COST_OF_GOODS),
        ("6200", KpiCategory.PERSONNEL),
        ("6600", KpiCategory.MARKETING),
        ("6300", KpiCategory.OPERATING),
        ("7010", KpiCategory.ENERGY),
        ("7150", KpiCategory.OPERATING),
        ("1200", KpiCategory.OTHER),
        ("", KpiCategory.OTHER),
    ],
)
def test_classify_kpi_category(number, category):
    """Test KPI categories by number range."""
    assert classify_kpi_category(number) == category
