"""Domain validation helpers."""

from datetime import date

from meal_billing.domain.constants import MAX_YEAR, MIN_YEAR
from meal_billing.domain.errors import InvalidBillingPeriodError
from meal_billing.utils.date_utils import first_of_next_month


def validate_billing_period(year, month) -> None:
    """Reject anything that is not a calendar month.

    Args:
        year: Calendar year.
        month: Month number, 1 to 12.

    Raises:
        InvalidBillingPeriodError: If either value is out of range or not
            an integer.
    """
    for value in (year, month):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidBillingPeriodError(year, month)
    if not MIN_YEAR <= year <= MAX_YEAR or not 1 <= month <= 12:
        raise InvalidBillingPeriodError(year, month)
    if year == MAX_YEAR and month == 12:
        # the half-open interval would end in year 10000
        raise InvalidBillingPeriodError(year, month)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return ``[first of month, first of next month)`` for a period."""
    validate_billing_period(year, month)
    first = date(year, month, 1)
    return first, first_of_next_month(first)


__all__ = ["validate_billing_period", "month_bounds"]
