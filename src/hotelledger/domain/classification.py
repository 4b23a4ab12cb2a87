"""Account classification into business areas and ledger kinds.

Classification is a pure function of an account's class and number so that
re-running it over the same ledger always yields the same result. Rules are
checked in order and the first match wins.
"""

from dataclasses import dataclass
from typing import Optional

from hotelledger.domain.entities import BusinessArea, KpiCategory, LedgerKind


@dataclass(frozen=True)
class AreaRule:
    """Map accounts of a class prefix (and optional number range) to an area."""

    class_prefix: str
    area: BusinessArea
    number_from: Optional[int] = None
    number_to: Optional[int] = None

    def matches(self, account_class: str, number: Optional[int]) -> bool:
        if not account_class.startswith(self.class_prefix):
            return False
        if self.number_from is None or self.number_to is None:
            return True
        if number is None:
            return False
        return self.number_from <= number <= self.number_to


@dataclass(frozen=True)
class KpiRule:
    """Map a number range to a KPI category."""

    number_from: int
    number_to: int
    category: KpiCategory


AREA_RULES: tuple[AreaRule, ...] = (
    # Food & Beverage: cost of goods, then five-digit revenue sub-accounts
    AreaRule("5", BusinessArea.FOOD_BEVERAGE, 5500, 5549),
    AreaRule("4", BusinessArea.FOOD_BEVERAGE, 44009, 44021),
    AreaRule("4", BusinessArea.LOGIS, 4400, 4408),
    AreaRule("4", BusinessArea.SPA, 4420, 4429),
    AreaRule("5", BusinessArea.SPA, 5560, 5569),
    AreaRule("4", BusinessArea.MEDICAL, 4430, 4439),
    AreaRule("4", BusinessArea.SHOP, 4450, 4459),
    AreaRule("5", BusinessArea.SHOP, 5570, 5579),
    AreaRule("6", BusinessArea.PERSONNEL, 6200, 6299),
    AreaRule("6", BusinessArea.MARKETING, 6600, 6699),
    AreaRule("6", BusinessArea.ADMINISTRATION, 6000, 6599),
    AreaRule("6", BusinessArea.ADMINISTRATION, 6700, 6999),
    AreaRule("7", BusinessArea.ENERGY, 7000, 7099),
    AreaRule("7", BusinessArea.TECHNICAL, 7100, 7199),
)

KPI_RULES: tuple[KpiRule, ...] = (
    KpiRule(4000, 4999, KpiCategory.REVENUE),
    KpiRule(40000, 49999, KpiCategory.REVENUE),
    KpiRule(5000, 5999, KpiCategory.COST_OF_GOODS),
    KpiRule(6200, 6299, KpiCategory.PERSONNEL),
    KpiRule(6600, 6699, KpiCategory.MARKETING),
    KpiRule(7000, 7099, KpiCategory.ENERGY),
    KpiRule(6000, 6999, KpiCategory.OPERATING),
    KpiRule(7100, 7199, KpiCategory.OPERATING),
)

REVENUE_CLASSES = frozenset({"4"})
PURCHASE_CLASSES = frozenset({"5", "6", "7", "8"})


def account_number_value(account_number: str) -> Optional[int]:
    """Return the digits of an account number as an int, or None if it has none."""
    digits = "".join(ch for ch in account_number if ch.isdigit())
    return int(digits) if digits else None


def derive_account_class(account_class: Optional[str], account_number: str) -> str:
    """Return the stripped class, falling back to the first digit of the number."""
    account_class = (account_class or "").strip()
    if account_class:
        return account_class
    for ch in account_number.strip():
        if ch.isdigit():
            return ch
    return ""


def classify_area(
    account_class: str,
    account_number: str,
    rules: tuple[AreaRule, ...] = AREA_RULES,
) -> BusinessArea:
    """Return the area of the first matching rule, or Sonstiges."""
    account_class = derive_account_class(account_class, account_number)
    number = account_number_value(account_number)
    for rule in rules:
        if rule.matches(account_class, number):
            return rule.area
    return BusinessArea.OTHER


def classify_kind(account_class: str, account_number: str) -> LedgerKind:
    """Return the ledger kind implied by the leading digit of the class."""
    account_class = derive_account_class(account_class, account_number)
    head = account_class[:1]
    if head in REVENUE_CLASSES:
        return LedgerKind.REVENUE
    if head in PURCHASE_CLASSES:
        return LedgerKind.PURCHASE
    return LedgerKind.NEUTRAL


def classify(
    account_class: str, account_number: str
) -> tuple[BusinessArea, LedgerKind]:
    """Classify an account into its (business area, ledger kind) pair.

    Args:
        account_class: Account class from the export (e.g. "4"); blank values
            fall back to the first digit of the account number
        account_number: Account number (e.g. "4400")

    Returns:
        Tuple of (BusinessArea, LedgerKind). Unmatched accounts get
        BusinessArea.OTHER and/or LedgerKind.NEUTRAL.
    """
    return (
        classify_area(account_class, account_number),
        classify_kind(account_class, account_number),
    )


def classify_kpi_category(
    account_number: str, rules: tuple[KpiRule, ...] = KPI_RULES
) -> KpiCategory:
    """Return the KPI category of the first rule whose range holds the number."""
    number = account_number_value(account_number)
    if number is None:
        return KpiCategory.OTHER
    for rule in rules:
        if rule.number_from <= number <= rule.number_to:
            return rule.category
    return KpiCategory.OTHER
