"""
Price utilities for currency amounts coming from Shopify.

Amounts arrive as strings ("50.00"), numbers (50) or not at all.
Both helpers return None instead of raising so one bad amount
cannot fail a whole order.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

TWO_PLACES = Decimal("0.01")


def parse_amount(value: Any) -> Optional[Decimal]:
    """
    Parse a Shopify amount into a Decimal.

    - "50" → Decimal("50")
    - 12.5 → Decimal("12.5")
    - None, "", "abc", "NaN", True → None

    Args:
        value: Raw amount (str, int, float, Decimal or None)

    Returns:
        Finite Decimal, or None if the value is missing or not numeric
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        text = str(value).strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not amount.is_finite():
        return None

    return amount


def format_price(value: Any, currency: Optional[str] = None) -> Optional[str]:
    """
    Format an amount with exactly two decimal places.

    Currency is accepted for call-site symmetry; every currency the
    feed serves uses two decimals.

    Args:
        value: Raw amount
        currency: ISO currency code of the amount (unused)

    Returns:
        e.g. "50.00", or None when the amount cannot be parsed
    """
    amount = parse_amount(value)
    if amount is None:
        return None

    try:
        rounded = amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Exceeds Decimal context precision
        return None

    if rounded.is_zero():
        rounded = abs(rounded)  # "-0.00" → "0.00"

    return str(rounded)
