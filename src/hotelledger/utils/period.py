"""Period arithmetic utilities."""

from datetime import date, datetime, UTC
from typing import Iterator

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from hotelledger.domain.entities import Period
from hotelledger.domain.errors import ValidationError

MONTH_NAMES = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)


def validate_period(year: int, month: int) -> Period:
    """Return a Period, raising ValidationError if month is outside 1-12."""
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month {month} (expected 1-12)")
    if not 1000 <= year <= 9999:
        raise ValidationError(f"Invalid year {year} (expected four digits)")
    return Period(year, month)


def shift_period(period: Period, months: int = 0, years: int = 0) -> Period:
    """Move a period by whole months and/or years."""
    shifted = date(period.year, period.month, 1) + relativedelta(
        months=months, years=years
    )
    return Period(shifted.year, shifted.month)


def previous_month(period: Period) -> Period:
    """Month before period, wrapping January to December of the prior year."""
    return shift_period(period, months=-1)


def previous_year(period: Period) -> Period:
    """Same month one year earlier."""
    return shift_period(period, years=-1)


def iter_periods(start: Period, end: Period) -> Iterator[Period]:
    """Yield every month from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current = shift_period(current, months=1)


def month_name(month: int) -> str:
    """Return the German month name, or 'Monat N' outside 1-12."""
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return f"Monat {month}"


def parse_period(period_str: str) -> Period:
    """Parse a period string into a Period.

    Supports "2024-07", "07/2024", "07.2024", "July 2024" and similar forms
    understood by dateutil. The day, if any, is ignored.

    Raises:
        ValidationError: If the string cannot be parsed
    """
    text = period_str.strip()
    if not text:
        raise ValidationError("Empty period string")
    # Month/year forms dateutil would read as month/day
    for sep in ("/", "."):
        parts = text.split(sep)
        if len(parts) == 2 and all(p.strip().isdigit() for p in parts):
            month, year = (int(p) for p in parts)
            return validate_period(year, month)
    try:
        parsed = date_parser.parse(text, default=datetime(2000, 1, 1))
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse period '{period_str}': {e}")
    return validate_period(parsed.year, parsed.month)


def as_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
