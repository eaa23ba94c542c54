"""Application ports for the person, order and additional-charge stores."""

from collections.abc import Collection
from datetime import date
from typing import Protocol

from meal_billing.domain.models import AdditionalCharge, MealOrder, Person


class PersonRepositoryPort(Protocol):
    """Port exposing read access to meal recipients."""

    def fetch_persons(self, person_ids: Collection[int]) -> list[Person]:
        """Return the persons among ``person_ids`` that exist."""


class OrderRepositoryPort(Protocol):
    """Port exposing read access to meal orders."""

    def fetch_orders(self, start_date: date, end_date: date) -> list[MealOrder]:
        """Return orders dated in ``[start_date, end_date)``."""


class AdditionalChargeRepositoryPort(Protocol):
    """Port exposing read access to additional charges."""

    def fetch_charges_for_month(self, month: date) -> list[AdditionalCharge]:
        """Return charges whose month key equals ``month``."""


__all__ = [
    "PersonRepositoryPort",
    "OrderRepositoryPort",
    "AdditionalChargeRepositoryPort",
]
