"""Tests for the pricing policy and money helpers."""

from decimal import Decimal

from meal_billing.domain.models import Person, PersonCategory
from meal_billing.domain.policies import PricingPolicy
from meal_billing.utils.decimal_utils import coerce_decimal, quantize_money
from meal_billing.utils.formatting import format_currency


def test_category_prices_use_defaults() -> None:
    """Defaults should be 4.50, 2.90 and 0 for the three categories."""
    policy = PricingPolicy()

    assert policy.category_price(PersonCategory.PENSIONER) == Decimal("4.50")
    assert policy.category_price(PersonCategory.CHILD_GROUP) == Decimal("2.90")
    assert policy.category_price(PersonCategory.FREE_MEAL) == Decimal("0")


def test_override_applies_to_free_meal_person() -> None:
    """A free-meal person with an override should pay the override."""
    person = Person(
        id=1,
        name="Helfer",
        category=PersonCategory.FREE_MEAL,
        custom_meal_price=Decimal("1.5"),
    )

    assert PricingPolicy().unit_price_for(person) == Decimal("1.50")


def test_zero_override_wins_over_category_default() -> None:
    """An explicit zero override should not fall back to the default."""
    person = Person(
        id=1,
        name="Ehrenamt",
        category=PersonCategory.PENSIONER,
        custom_meal_price=Decimal("0"),
    )

    assert PricingPolicy().unit_price_for(person) == Decimal("0")


def test_coerce_and_quantize_money() -> None:
    """Floats and None should coerce; rounding should be half up."""
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(4.5) == Decimal("4.5")
    assert quantize_money("2.345") == Decimal("2.35")
    assert str(quantize_money(3)) == "3.00"


def test_format_currency_uses_german_separators() -> None:
    """Thousands should use dots and decimals a comma."""
    assert format_currency(Decimal("1234.5")) == "1.234,50 €"
    assert format_currency(Decimal("0")) == "0,00 €"
