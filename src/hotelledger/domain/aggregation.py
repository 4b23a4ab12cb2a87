"""Aggregation of comparison rows by business area and ledger kind."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from hotelledger.domain.comparison import delta, delta_pct
from hotelledger.domain.entities import (
    AreaAggregate,
    BusinessArea,
    ComparisonRow,
    LedgerKind,
)


def sum_leg(values: Iterable[Optional[Decimal]]) -> Optional[Decimal]:
    """Sum one comparison leg across accounts.

    None if every value is None; otherwise None values count as zero.
    """
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present, Decimal("0"))


def aggregate(rows: Sequence[ComparisonRow]) -> list[AreaAggregate]:
    """Group comparison rows into per-(area, kind) totals.

    Deltas and percentages are recomputed from the summed legs rather than
    summed from the per-account deltas.

    Args:
        rows: Comparison rows, typically the output of compare()

    Returns:
        One AreaAggregate per (area, kind) present in rows, ordered by area
        then kind
    """
    grouped: dict[tuple[BusinessArea, LedgerKind], list[ComparisonRow]] = defaultdict(
        list
    )
    for row in rows:
        grouped[(row.area, row.kind)].append(row)

    aggregates: list[AreaAggregate] = []
    for (area, kind), items in grouped.items():
        current = sum_leg(r.current for r in items)
        previous_month = sum_leg(r.previous_month for r in items)
        previous_year = sum_leg(r.previous_year for r in items)
        aggregates.append(
            AreaAggregate(
                area=area,
                kind=kind,
                account_count=len(items),
                current=current,
                previous_month=previous_month,
                previous_year=previous_year,
                delta_vs_previous_month=delta(current, previous_month),
                delta_pct_vs_previous_month=delta_pct(current, previous_month),
                delta_vs_previous_year=delta(current, previous_year),
                delta_pct_vs_previous_year=delta_pct(current, previous_year),
            )
        )

    return sorted(aggregates, key=lambda a: (a.area.value, a.kind.value))
