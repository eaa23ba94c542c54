"""Helpers for calendar dates coming from storage."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize stored date values to ``date``.

    SQLite returns ISO strings (optionally with a time part), other
    backends return ``date`` or ``datetime`` objects.

    Args:
        value: Raw date value from SQL.

    Returns:
        date: Calendar date.

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def first_of_next_month(first: date) -> date:
    """Return the first day of the month following ``first``."""
    if first.month == 12:
        return date(first.year + 1, 1, 1)
    return date(first.year, first.month + 1, 1)


__all__ = ["coerce_date", "first_of_next_month"]
