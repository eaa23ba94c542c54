"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

MONEY_QUANTUM = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value) -> Decimal:
    """Round a monetary amount to cents, half up.

    Args:
        value: Amount to round; coerced with ``coerce_decimal``.

    Returns:
        Decimal: Amount with exactly two decimal places.
    """
    return coerce_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = ["MONEY_QUANTUM", "coerce_decimal", "quantize_money"]
