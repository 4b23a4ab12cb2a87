"""Display formatting for amounts and percentages."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

MISSING = "–"


def _group_german(value: Decimal, places: int) -> str:
    quantized = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    text = f"{abs(quantized):,.{places}f}"
    # 1,234.56 -> 1.234,56
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{text}"


def format_currency(value: Optional[Decimal]) -> str:
    """Format an amount as German euro currency, e.g. '1.234,56 €'."""
    if value is None:
        return MISSING
    return f"{_group_german(Decimal(value), 2)} €"


def format_diff(value: Optional[Decimal]) -> str:
    """Format a difference like an amount."""
    return format_currency(value)


def format_percent(value: Optional[Decimal]) -> str:
    """Format a percentage with sign and one decimal, e.g. '+50.0%'."""
    if value is None:
        return MISSING
    rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    sign = "+" if rounded >= 0 else ""
    return f"{sign}{rounded}%"
