"""Meal pricing policy."""

from dataclasses import dataclass
from decimal import Decimal

from meal_billing.domain.constants import (
    DEFAULT_CHILD_MEAL_PRICE,
    DEFAULT_DELIVERY_SURCHARGE,
    DEFAULT_PENSIONER_MEAL_PRICE,
)
from meal_billing.domain.models import Person, PersonCategory
from meal_billing.utils.decimal_utils import quantize_money


@dataclass(frozen=True)
class PricingPolicy:
    """Category default prices and the flat delivery surcharge.

    Attributes:
        pensioner_meal_price: Unit price for pensioners.
        child_meal_price: Unit price for child groups.
        delivery_surcharge: Fee per delivery-flagged order, not per meal.
    """

    pensioner_meal_price: Decimal = DEFAULT_PENSIONER_MEAL_PRICE
    child_meal_price: Decimal = DEFAULT_CHILD_MEAL_PRICE
    delivery_surcharge: Decimal = DEFAULT_DELIVERY_SURCHARGE

    def category_price(self, category: PersonCategory) -> Decimal:
        """Return the default unit price of a category."""
        match category:
            case PersonCategory.PENSIONER:
                return self.pensioner_meal_price
            case PersonCategory.CHILD_GROUP:
                return self.child_meal_price
            case _:
                return Decimal("0")

    def unit_price_for(self, person: Person) -> Decimal:
        """Resolve a person's unit price.

        The personal override wins over the category default.

        Args:
            person: Person being billed.

        Returns:
            Decimal: Unit price rounded to cents.
        """
        if person.custom_meal_price is not None:
            return quantize_money(person.custom_meal_price)
        return quantize_money(self.category_price(person.category))


__all__ = ["PricingPolicy"]
