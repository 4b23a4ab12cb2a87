"""Amount parsing utilities."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import re


@dataclass(frozen=True)
class NumberFormat:
    """Decimal and thousands separators of a numeric locale."""

    decimal_separator: str = ","
    thousands_separator: str = "."

    def __post_init__(self):
        if self.decimal_separator == self.thousands_separator:
            raise ValueError("Decimal and thousands separators must differ")
        if len(self.decimal_separator) != 1:
            raise ValueError("Decimal separator must be a single character")


GERMAN = NumberFormat(decimal_separator=",", thousands_separator=".")
ENGLISH = NumberFormat(decimal_separator=".", thousands_separator=",")


def parse_amount(amount_str: str, number_format: NumberFormat = GERMAN) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats (shown for the German default):
    - "1234,56"
    - "1.234,56"
    - "-1.234,56"
    - "1.234,56 €"
    - "1.234,56-" (trailing minus)
    - "(1.234,56)" (negative in parentheses)

    A blank string is an empty amount and parses to zero.

    Args:
        amount_str: Amount string
        number_format: Separators used by the source

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        return Decimal("0")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses and trailing minus notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]
    elif amount_str.endswith("-"):
        is_negative = True
        amount_str = amount_str[:-1]

    # Remove currency symbols and inner whitespace
    amount_str = re.sub(r"[$€£¥\s]", "", amount_str)
    amount_str = amount_str.replace("EUR", "")

    if number_format.thousands_separator:
        amount_str = amount_str.replace(number_format.thousands_separator, "")
    amount_str = amount_str.replace(number_format.decimal_separator, ".")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
