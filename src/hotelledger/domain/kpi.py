"""Department KPIs (contribution margins) per business area."""

from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from hotelledger.domain.comparison import delta, delta_pct
from hotelledger.domain.entities import (
    BusinessArea,
    DepartmentKpi,
    KpiCategory,
    Period,
)
from hotelledger.domain.ledger_store import LedgerStore
from hotelledger.utils.period import previous_year, validate_period

OPERATING_AREAS: tuple[BusinessArea, ...] = (
    BusinessArea.LOGIS,
    BusinessArea.FOOD_BEVERAGE,
    BusinessArea.SPA,
    BusinessArea.MEDICAL,
    BusinessArea.SHOP,
)

SERVICE_AREAS: tuple[BusinessArea, ...] = (
    BusinessArea.ADMINISTRATION,
    BusinessArea.TECHNICAL,
    BusinessArea.ENERGY,
    BusinessArea.MARKETING,
    BusinessArea.PERSONNEL,
)


def _category_totals(
    store: LedgerStore, period: Period
) -> dict[BusinessArea, dict[KpiCategory, Decimal]]:
    """Sum net balances of one period by area and KPI category."""
    totals: dict[BusinessArea, dict[KpiCategory, Decimal]] = defaultdict(
        lambda: defaultdict(lambda: Decimal("0"))
    )
    for number, balance in store.balances_for_period(period).items():
        account = store.resolve_account(number)
        totals[account.area][account.kpi_category] += balance.net_balance
    return totals


def department_kpis(store: LedgerStore, year: int, month: int) -> list[DepartmentKpi]:
    """Calculate contribution-margin KPIs for every department.

    Revenue and cost figures are reported as absolute values. Margin I is
    revenue minus cost of goods, margin II is margin I minus personnel.
    Previous-year figures are None when the department had no revenue in the
    same month one year earlier.

    Args:
        store: Ledger store to read from
        year: Selected year
        month: Selected month (1-12)

    Returns:
        One DepartmentKpi per operating and service area, in that order
    """
    period = validate_period(year, month)
    current_totals = _category_totals(store, period)
    previous_totals = _category_totals(store, previous_year(period))

    kpis: list[DepartmentKpi] = []
    for area in OPERATING_AREAS + SERVICE_AREAS:
        values = current_totals.get(area, {})
        prev = previous_totals.get(area, {})

        revenue = abs(values.get(KpiCategory.REVENUE, Decimal("0")))
        cost_of_goods = abs(values.get(KpiCategory.COST_OF_GOODS, Decimal("0")))
        personnel = abs(values.get(KpiCategory.PERSONNEL, Decimal("0")))
        margin_1 = revenue - cost_of_goods
        margin_2 = margin_1 - personnel

        prev_revenue_raw = prev.get(KpiCategory.REVENUE, Decimal("0"))
        revenue_py = margin_1_py = margin_2_py = None
        if prev_revenue_raw != 0:
            revenue_py = abs(prev_revenue_raw)
            margin_1_py = revenue_py - abs(prev.get(KpiCategory.COST_OF_GOODS, Decimal("0")))
            margin_2_py = margin_1_py - abs(prev.get(KpiCategory.PERSONNEL, Decimal("0")))

        kpis.append(
            DepartmentKpi(
                area=area,
                year=period.year,
                month=period.month,
                revenue=revenue,
                cost_of_goods=cost_of_goods,
                personnel=personnel,
                energy=abs(values.get(KpiCategory.ENERGY, Decimal("0"))),
                marketing=abs(values.get(KpiCategory.MARKETING, Decimal("0"))),
                operating=abs(values.get(KpiCategory.OPERATING, Decimal("0"))),
                margin_1=margin_1,
                margin_2=margin_2,
                revenue_previous_year=revenue_py,
                revenue_delta=delta(revenue, revenue_py),
                revenue_delta_pct=delta_pct(revenue, revenue_py),
                margin_1_previous_year=margin_1_py,
                margin_1_delta=delta(margin_1, margin_1_py),
                margin_1_delta_pct=delta_pct(margin_1, margin_1_py),
                margin_2_previous_year=margin_2_py,
                margin_2_delta=delta(margin_2, margin_2_py),
            )
        )
    return kpis


def total_kpis(kpis: Sequence[DepartmentKpi]) -> dict[str, Decimal]:
    """Sum department KPIs: margins over operating areas, costs over all."""
    operating = [k for k in kpis if k.area in OPERATING_AREAS]
    return {
        "revenue": sum((k.revenue for k in operating), Decimal("0")),
        "cost_of_goods": sum((k.cost_of_goods for k in operating), Decimal("0")),
        "personnel": sum((k.personnel for k in operating), Decimal("0")),
        "margin_1": sum((k.margin_1 for k in operating), Decimal("0")),
        "margin_2": sum((k.margin_2 for k in operating), Decimal("0")),
        "energy": sum((k.energy for k in kpis), Decimal("0")),
        "marketing": sum((k.marketing for k in kpis), Decimal("0")),
    }
