"""Domain model entities for hotelledger.

These are pure data classes representing ledger concepts, independent of the
database schema. Stored records (accounts, balances, batches) and derived
records (comparison rows, aggregates, audit reports) both live here so the
business logic never depends on ORM objects.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class BusinessArea(str, Enum):
    """Department / cost-center an account is booked to."""

    LOGIS = "Logis"
    FOOD_BEVERAGE = "Food & Beverage"
    SPA = "Wellness/Spa"
    MEDICAL = "Ärztin/Medizin"
    SHOP = "Shop"
    MARKETING = "Marketing/Vertrieb"
    ADMINISTRATION = "Verwaltung"
    TECHNICAL = "Technik/Instandhaltung"
    ENERGY = "Energie"
    PERSONNEL = "Personal"
    OTHER = "Sonstiges"


class LedgerKind(str, Enum):
    """Whether an account carries revenue, purchases/expenses or neither."""

    REVENUE = "Erlös"
    PURCHASE = "Einkauf"
    NEUTRAL = "Neutral"


class KpiCategory(str, Enum):
    """Finer cost type used for department KPIs."""

    REVENUE = "Erlös"
    COST_OF_GOODS = "Wareneinsatz"
    PERSONNEL = "Personal"
    ENERGY = "Energie"
    MARKETING = "Marketing"
    OPERATING = "Betriebsaufwand"
    OTHER = "Sonstiges"


@dataclass(frozen=True, order=True)
class Period:
    """A (year, month) accounting period."""

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Account:
    """General-ledger account master record."""

    number: str
    name: str
    account_class: str
    area: BusinessArea
    kind: LedgerKind
    kpi_category: KpiCategory = KpiCategory.OTHER


@dataclass(frozen=True)
class MonthlyBalance:
    """Debit/credit/net totals of one account for one month."""

    account_number: str
    year: int
    month: int
    debit_total: Decimal
    credit_total: Decimal
    net_balance: Decimal

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.account_number, self.year, self.month)

    @property
    def period(self) -> Period:
        return Period(self.year, self.month)


@dataclass(frozen=True)
class UploadBatch:
    """Bookkeeping record of one monthly upload."""

    filename: str
    year: int
    month: int
    account_count: int
    imported_at: datetime

    @property
    def period(self) -> Period:
        return Period(self.year, self.month)


@dataclass(frozen=True)
class AccountCandidate:
    """Unclassified account master data as read from an export row."""

    number: str
    name: str
    account_class: str


@dataclass(frozen=True)
class RowIssue:
    """A data row that was skipped during parsing."""

    row_num: int
    message: str

    def __str__(self) -> str:
        return f"Row {self.row_num}: {self.message}"


@dataclass(frozen=True)
class ParsedLedger:
    """Result of parsing one Saldenliste export."""

    filename: str
    year: int
    month: int
    accounts: tuple[AccountCandidate, ...]
    balances: tuple[MonthlyBalance, ...]
    issues: tuple[RowIssue, ...] = ()

    @property
    def period(self) -> Period:
        return Period(self.year, self.month)


@dataclass(frozen=True)
class ComparisonRow:
    """One account's balance joined against its two comparison periods."""

    account_number: str
    account_name: str
    area: BusinessArea
    kind: LedgerKind
    year: int
    month: int
    current: Optional[Decimal]
    previous_month: Optional[Decimal]
    previous_year: Optional[Decimal]
    delta_vs_previous_month: Optional[Decimal]
    delta_pct_vs_previous_month: Optional[Decimal]
    delta_vs_previous_year: Optional[Decimal]
    delta_pct_vs_previous_year: Optional[Decimal]


@dataclass(frozen=True)
class AreaAggregate:
    """Comparison totals for one (business area, ledger kind) group."""

    area: BusinessArea
    kind: LedgerKind
    account_count: int
    current: Optional[Decimal]
    previous_month: Optional[Decimal]
    previous_year: Optional[Decimal]
    delta_vs_previous_month: Optional[Decimal]
    delta_pct_vs_previous_month: Optional[Decimal]
    delta_vs_previous_year: Optional[Decimal]
    delta_pct_vs_previous_year: Optional[Decimal]


@dataclass(frozen=True)
class ClassReconciliation:
    """Sums of all balances booked to one account class."""

    account_class: str
    account_count: int
    balance_count: int
    debit_total: Decimal
    credit_total: Decimal
    net_total: Decimal


@dataclass(frozen=True)
class PeriodPresence:
    """Whether a batch exists for a period in the expected monthly sequence."""

    year: int
    month: int
    present: bool


@dataclass(frozen=True)
class DataQualityReport:
    """Completeness and classification findings over the ledger."""

    unclassified_accounts: tuple[Account, ...]
    untyped_accounts: tuple[Account, ...]
    class_reconciliation: tuple[ClassReconciliation, ...]
    missing_periods: tuple[PeriodPresence, ...]
    total_accounts: int = 0
    total_balances: int = 0
    present_periods: tuple[Period, ...] = field(default_factory=tuple)

    @property
    def gaps(self) -> tuple[PeriodPresence, ...]:
        """Periods inside the uploaded range with no batch."""
        return tuple(p for p in self.missing_periods if not p.present)


@dataclass(frozen=True)
class DepartmentKpi:
    """Contribution-margin KPIs of one business area for one month."""

    area: BusinessArea
    year: int
    month: int
    revenue: Decimal
    cost_of_goods: Decimal
    personnel: Decimal
    energy: Decimal
    marketing: Decimal
    operating: Decimal
    margin_1: Decimal
    margin_2: Decimal
    revenue_previous_year: Optional[Decimal]
    revenue_delta: Optional[Decimal]
    revenue_delta_pct: Optional[Decimal]
    margin_1_previous_year: Optional[Decimal]
    margin_1_delta: Optional[Decimal]
    margin_1_delta_pct: Optional[Decimal]
    margin_2_previous_year: Optional[Decimal]
    margin_2_delta: Optional[Decimal]
