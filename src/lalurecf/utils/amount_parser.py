"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles Brazilian and plain formats:
    - "123.45"
    - "123,45"
    - "R$ 1.234,56"
    - "1,234.56"
    - "-123,45"
    - "(123,45)" (negative in parentheses)

    When both separators appear, the last one is the decimal separator. A
    lone comma is always decimal; a lone dot is decimal unless it repeats.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    original = amount_str
    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"R\$|[$€£¥\s]", "", amount_str)

    if "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".")
        else:
            amount_str = amount_str.replace(",", "")
    elif "," in amount_str:
        if amount_str.count(",") > 1:
            raise ValueError(f"Could not parse amount '{original}'")
        amount_str = amount_str.replace(",", ".")
    elif amount_str.count(".") > 1:
        amount_str = amount_str.replace(".", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{original}'") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{original}'")
    return -amount if is_negative else amount


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two decimals, e.g. Decimal("5") -> "5.00"."""
    return f"{amount.quantize(Decimal('0.01')):.2f}"
