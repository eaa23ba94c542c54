"""Domain constants for meal billing."""

from decimal import Decimal

DEFAULT_PENSIONER_MEAL_PRICE = Decimal("4.50")
DEFAULT_CHILD_MEAL_PRICE = Decimal("2.90")
DEFAULT_DELIVERY_SURCHARGE = Decimal("3.50")

DEFAULT_ORGANIZATION_NAME = "Gemeinde-Küche"

GERMAN_MONTH_NAMES = (
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

MIN_YEAR = 1
MAX_YEAR = 9999


__all__ = [
    "DEFAULT_PENSIONER_MEAL_PRICE",
    "DEFAULT_CHILD_MEAL_PRICE",
    "DEFAULT_DELIVERY_SURCHARGE",
    "DEFAULT_ORGANIZATION_NAME",
    "GERMAN_MONTH_NAMES",
    "MIN_YEAR",
    "MAX_YEAR",
]
