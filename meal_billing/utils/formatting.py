"""Display formatting for amounts."""

from decimal import Decimal

from meal_billing.utils.decimal_utils import quantize_money


def format_currency(value: Decimal, symbol: str = "€") -> str:
    """Format an amount the German way, e.g. ``1.234,50 €``."""
    amount = quantize_money(value)
    text = f"{amount:,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{text} {symbol}"


__all__ = ["format_currency"]
