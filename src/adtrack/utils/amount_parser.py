"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import math
import re


def parse_amount(amount_str: str) -> float:
    """Parse a spend string into a float.

    Handles various formats:
    - "123.45"
    - "SAR 123.45"
    - "123.45 ر.س"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Amount as float

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency markers
    amount_str = re.sub(r"(?i)sar|ر\.س|[$€£]", "", amount_str)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}") from e

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: '{amount_str}'")

    value = float(amount)
    # Decimal holds magnitudes that overflow to inf as a float
    if not math.isfinite(value):
        raise ValueError(f"Amount is too large: '{amount_str}'")
    return value


def parse_count(count_str: str) -> int:
    """Parse a purchases count into a non-negative integer.

    Raises:
        ValueError: If the string is not a whole, non-negative number
    """
    if not count_str or not count_str.strip():
        raise ValueError("Empty count string")

    count_str = count_str.strip().replace(",", "")
    try:
        count = Decimal(count_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse count '{count_str}': {e}") from e

    if not count.is_finite() or count != count.to_integral_value():
        raise ValueError(f"Count must be a whole number: '{count_str}'")
    if count < 0:
        raise ValueError(f"Count cannot be negative: '{count_str}'")
    if not math.isfinite(float(count)):
        raise ValueError(f"Count is too large: '{count_str}'")
    return int(count)
