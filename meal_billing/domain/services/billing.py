"""Pure computations turning orders and charges into billing rows."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from meal_billing.domain.errors import DataIntegrityError
from meal_billing.domain.models import (
    AdditionalCharge,
    BillingRow,
    MealOrder,
    Person,
)
from meal_billing.domain.policies import PricingPolicy
from meal_billing.domain.services.normalization import (
    format_address,
    name_sort_key,
)
from meal_billing.utils.decimal_utils import coerce_decimal, quantize_money


def sum_charges_by_person(
    charges: Iterable[AdditionalCharge],
) -> dict[int, Decimal]:
    """Sum additional charge amounts per person.

    Args:
        charges: Charges of a single month.

    Returns:
        dict[int, Decimal]: Rounded sum of ``unit_price * quantity`` keyed
        by person id.
    """
    totals: dict[int, Decimal] = {}
    for charge in charges:
        amount = coerce_decimal(charge.unit_price) * charge.quantity
        totals[charge.person_id] = totals.get(charge.person_id, Decimal("0")) + amount
    return {person_id: quantize_money(amount) for person_id, amount in totals.items()}


def group_orders_by_person(
    orders: Iterable[MealOrder],
) -> dict[int, list[MealOrder]]:
    """Index orders by person id, keeping duplicates."""
    grouped: dict[int, list[MealOrder]] = {}
    for order in orders:
        grouped.setdefault(order.person_id, []).append(order)
    return grouped


def build_billing_row(
    person: Person,
    orders: list[MealOrder],
    additional_charges: Decimal,
    pricing: PricingPolicy,
) -> BillingRow:
    """Price one person's orders for the month.

    Args:
        person: Person being billed.
        orders: The person's orders in the month, possibly empty.
        additional_charges: Rounded sum of the person's charges.
        pricing: Category prices and delivery surcharge.

    Returns:
        BillingRow: Row whose total is meals plus deliveries plus charges.
    """
    unit_price = pricing.unit_price_for(person)
    surcharge = quantize_money(pricing.delivery_surcharge)
    quantity = sum(order.quantity for order in orders)
    delivery_count = sum(1 for order in orders if order.delivery)
    total = quantize_money(
        unit_price * quantity + surcharge * delivery_count + additional_charges
    )
    return BillingRow(
        person_id=person.id,
        name=person.name,
        address=format_address(person),
        category=person.category,
        unit_price=unit_price,
        quantity=quantity,
        delivery_count=delivery_count,
        delivery_surcharge=surcharge,
        additional_charges=additional_charges,
        total=total,
    )


def compute_billing_rows(
    orders: Iterable[MealOrder],
    charges: Iterable[AdditionalCharge],
    persons: Mapping[int, Person],
    pricing: PricingPolicy,
    include_charge_only_persons: bool = False,
) -> list[BillingRow]:
    """Aggregate a month of orders and charges into sorted billing rows.

    Only persons with at least one order get a row unless
    ``include_charge_only_persons`` is set, in which case persons with
    charges but no orders get a zero-meal row.

    Args:
        orders: Orders dated inside the month.
        charges: Charges keyed to the month.
        persons: Persons indexed by id.
        pricing: Category prices and delivery surcharge.
        include_charge_only_persons: Bill charges of persons without orders.

    Returns:
        list[BillingRow]: Rows sorted by name, case-insensitively.

    Raises:
        DataIntegrityError: If an order, or a billed charge, references a
            person missing from ``persons``.
    """
    orders_by_person = group_orders_by_person(orders)
    charges_by_person = sum_charges_by_person(charges)

    billed_ids = list(orders_by_person)
    if include_charge_only_persons:
        billed_ids.extend(
            person_id
            for person_id in charges_by_person
            if person_id not in orders_by_person
        )

    rows: list[BillingRow] = []
    for person_id in billed_ids:
        person = persons.get(person_id)
        if person is None:
            source = "order" if person_id in orders_by_person else "additional charge"
            raise DataIntegrityError(person_id, source=source)
        rows.append(
            build_billing_row(
                person,
                orders_by_person.get(person_id, []),
                charges_by_person.get(person_id, Decimal("0.00")),
                pricing,
            )
        )
    rows.sort(key=lambda row: (name_sort_key(row.name), row.person_id))
    return rows


__all__ = [
    "sum_charges_by_person",
    "group_orders_by_person",
    "build_billing_row",
    "compute_billing_rows",
]
