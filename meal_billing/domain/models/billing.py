"""Domain models for persons, orders, charges and billing rows."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import IntEnum


class PersonCategory(IntEnum):
    """Meal recipient classification driving the default price."""

    PENSIONER = 0
    CHILD_GROUP = 1
    FREE_MEAL = 2


@dataclass(frozen=True)
class Person:
    """Meal recipient as supplied by the person store.

    Attributes:
        id: Store identifier.
        name: Display name used for sorting and the invoice.
        category: Pricing category.
        custom_meal_price: Per-person unit price override, if any.
        default_meal_quantity: Pre-fill value for order capture only.
    """

    id: int
    name: str
    category: PersonCategory
    street: str | None = None
    house_number: str | None = None
    zip_code: str | None = None
    city: str | None = None
    contact: str | None = None
    default_delivery: bool = False
    custom_meal_price: Decimal | None = None
    default_meal_quantity: int = 1


@dataclass(frozen=True)
class MealOrder:
    """Meal order of one person for one day."""

    person_id: int
    date: date
    quantity: int
    delivery: bool = False
    id: int | None = None


@dataclass(frozen=True)
class AdditionalCharge:
    """Month-scoped non-meal line item attached to a person."""

    person_id: int
    month: date
    description: str
    unit_price: Decimal
    quantity: int
    id: int | None = None

    @property
    def amount(self) -> Decimal:
        """Return unit price times quantity."""
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class BillingRow:
    """One person's priced monthly summary."""

    person_id: int
    name: str
    address: str
    category: PersonCategory
    unit_price: Decimal
    quantity: int
    delivery_count: int
    delivery_surcharge: Decimal
    additional_charges: Decimal
    total: Decimal

    @property
    def meal_amount(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def delivery_amount(self) -> Decimal:
        return self.delivery_surcharge * self.delivery_count


@dataclass(frozen=True)
class BillingTotals:
    """Summed amounts over a group of billing rows."""

    quantity: int
    delivery_count: int
    meal_amount: Decimal
    delivery_amount: Decimal
    additional_charges: Decimal
    total: Decimal


@dataclass(frozen=True)
class BillingSection:
    """Rows of one category with their subtotal."""

    category: PersonCategory
    title: str
    rows: list[BillingRow]
    totals: BillingTotals


@dataclass(frozen=True)
class MonthlyBillingReport:
    """Category-partitioned monthly invoice ready for rendering."""

    organization_name: str
    year: int
    month: int
    period_label: str
    sections: list[BillingSection]
    grand_totals: BillingTotals

    @property
    def is_empty(self) -> bool:
        return not self.sections


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
