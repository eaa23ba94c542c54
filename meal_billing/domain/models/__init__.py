"""Domain models package."""

from .billing import (
    AdditionalCharge,
    BillingRow,
    BillingSection,
    BillingTotals,
    MealOrder,
    MonthlyBillingReport,
    Person,
    PersonCategory,
)

__all__ = [
    "PersonCategory",
    "Person",
    "MealOrder",
    "AdditionalCharge",
    "BillingRow",
    "BillingTotals",
    "BillingSection",
    "MonthlyBillingReport",
]
