"""SQLAlchemy-backed stores for persons, meal orders and additional charges."""

from collections.abc import Collection
from datetime import date, timedelta

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from meal_billing.application.ports.billing_repository import (
    AdditionalChargeRepositoryPort,
    OrderRepositoryPort,
    PersonRepositoryPort,
)
from meal_billing.application.ports.database import DatabaseEnginePort
from meal_billing.domain.errors import DataIntegrityError, StoreUnavailableError
from meal_billing.domain.models import (
    AdditionalCharge,
    MealOrder,
    Person,
    PersonCategory,
)
from meal_billing.utils.date_utils import coerce_date
from meal_billing.utils.decimal_utils import coerce_decimal

SELECT_PERSONS_SQL = text(
    """
    SELECT id, name, street, house_number, zip, city, contact,
           default_delivery, category, custom_meal_price,
           default_meal_quantity
    FROM persons
    WHERE id IN :person_ids
    ORDER BY id
    """
).bindparams(bindparam("person_ids", expanding=True))

# Dates are bound as ISO text; stored values may carry a time suffix.
SELECT_ORDERS_SQL = text(
    """
    SELECT id, date, person_id, quantity, delivery
    FROM meal_orders
    WHERE date >= :start_date AND date < :end_date
    ORDER BY date, person_id
    """
)

SELECT_CHARGES_SQL = text(
    """
    SELECT id, person_id, month, description, unit_price, quantity
    FROM additional_charges
    WHERE month >= :month_start AND month < :month_end
    ORDER BY person_id, id
    """
)


def _person_category(row) -> PersonCategory:
    try:
        return PersonCategory(int(row.category))
    except (TypeError, ValueError) as exc:
        raise DataIntegrityError(
            row.id,
            source="persons table",
            reason=(
                f"Person {row.id} has unknown category {row.category!r}. "
                "This indicates a data integrity issue."
            ),
        ) from exc


class _SqlAlchemyStore:
    """Shared query execution for the kitchen stores."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the kitchen engine.
        """
        self._db_port = db_port

    def _fetch_all(self, query, params: dict) -> list:
        try:
            engine = self._db_port.get_billing_engine()
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(
                f"Kitchen database query failed: {exc}"
            ) from exc


class SqlAlchemyPersonRepository(_SqlAlchemyStore, PersonRepositoryPort):
    """Person store reading the ``persons`` table."""

    def fetch_persons(self, person_ids: Collection[int]) -> list[Person]:
        if not person_ids:
            return []
        rows = self._fetch_all(
            SELECT_PERSONS_SQL,
            {"person_ids": list(person_ids)},
        )
        return [
            Person(
                id=row.id,
                name=row.name,
                category=_person_category(row),
                street=row.street,
                house_number=row.house_number,
                zip_code=row.zip,
                city=row.city,
                contact=row.contact,
                default_delivery=bool(row.default_delivery),
                custom_meal_price=(
                    None
                    if row.custom_meal_price in (None, "")
                    else coerce_decimal(row.custom_meal_price)
                ),
                default_meal_quantity=row.default_meal_quantity or 1,
            )
            for row in rows
        ]


class SqlAlchemyOrderRepository(_SqlAlchemyStore, OrderRepositoryPort):
    """Order store reading the ``meal_orders`` table."""

    def fetch_orders(self, start_date: date, end_date: date) -> list[MealOrder]:
        rows = self._fetch_all(
            SELECT_ORDERS_SQL,
            {
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )
        return [
            MealOrder(
                id=row.id,
                person_id=row.person_id,
                date=coerce_date(row.date),
                quantity=int(row.quantity or 0),
                delivery=bool(row.delivery),
            )
            for row in rows
        ]


class SqlAlchemyAdditionalChargeRepository(
    _SqlAlchemyStore,
    AdditionalChargeRepositoryPort,
):
    """Additional-charge store reading the ``additional_charges`` table."""

    def fetch_charges_for_month(self, month: date) -> list[AdditionalCharge]:
        rows = self._fetch_all(
            SELECT_CHARGES_SQL,
            {
                "month_start": month.isoformat(),
                "month_end": (month + timedelta(days=1)).isoformat(),
            },
        )
        return [
            AdditionalCharge(
                id=row.id,
                person_id=row.person_id,
                month=coerce_date(row.month),
                description=row.description,
                unit_price=coerce_decimal(row.unit_price),
                quantity=int(row.quantity),
            )
            for row in rows
        ]


__all__ = [
    "SqlAlchemyPersonRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyAdditionalChargeRepository",
]
