"""Use case computing the monthly billing rows."""

from threading import Event

from meal_billing.application.ports.billing_repository import (
    AdditionalChargeRepositoryPort,
    OrderRepositoryPort,
    PersonRepositoryPort,
)
from meal_billing.domain.errors import BillingCancelledError
from meal_billing.domain.models import BillingRow
from meal_billing.domain.policies import PricingPolicy
from meal_billing.domain.services import compute_billing_rows, month_bounds
from meal_billing.infrastructure.logging.logger import get_app_logger


class CalculateMonthlyBillingUseCase:
    """Aggregate orders and additional charges of a month per person."""

    def __init__(
        self,
        person_repository: PersonRepositoryPort,
        order_repository: OrderRepositoryPort,
        charge_repository: AdditionalChargeRepositoryPort,
        pricing: PricingPolicy | None = None,
        logger=None,
        include_charge_only_persons: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            person_repository: Port resolving persons by id.
            order_repository: Port providing meal orders by date range.
            charge_repository: Port providing additional charges by month.
            pricing: Category prices and delivery surcharge.
            logger: Optional logger compatible with logging.Logger-like API.
            include_charge_only_persons: Bill persons that only have
                additional charges in the month.
        """
        self._person_repository = person_repository
        self._order_repository = order_repository
        self._charge_repository = charge_repository
        self._pricing = pricing or PricingPolicy()
        self._logger = logger or get_app_logger()
        self._include_charge_only_persons = include_charge_only_persons

    def execute(
        self,
        year: int,
        month: int,
        cancel_event: Event | None = None,
    ) -> list[BillingRow]:
        """Return the billing rows of a month.

        Args:
            year: Billing year.
            month: Billing month, 1 to 12.
            cancel_event: Optional signal checked between store calls.

        Returns:
            list[BillingRow]: One row per billed person, sorted by name.

        Raises:
            InvalidBillingPeriodError: If the period is not a calendar month.
            DataIntegrityError: If an order references an unknown person.
            BillingCancelledError: If ``cancel_event`` was set.
        """
        first, next_first = month_bounds(year, month)

        self._check_cancelled(cancel_event, year, month)
        orders = self._order_repository.fetch_orders(first, next_first)
        self._check_cancelled(cancel_event, year, month)
        charges = self._charge_repository.fetch_charges_for_month(first)
        self._logger.info(
            f"Fetched {len(orders)} orders and {len(charges)} additional "
            f"charges for {year}-{month:02d}"
        )

        person_ids = {order.person_id for order in orders}
        if self._include_charge_only_persons:
            person_ids.update(charge.person_id for charge in charges)
        self._check_cancelled(cancel_event, year, month)
        persons = {}
        if person_ids:
            persons = {
                person.id: person
                for person in self._person_repository.fetch_persons(
                    sorted(person_ids)
                )
            }

        rows = compute_billing_rows(
            orders,
            charges,
            persons,
            self._pricing,
            include_charge_only_persons=self._include_charge_only_persons,
        )
        self._check_cancelled(cancel_event, year, month)
        self._logger.info(
            f"Computed {len(rows)} billing rows for {year}-{month:02d}"
        )
        return rows

    def _check_cancelled(
        self,
        cancel_event: Event | None,
        year: int,
        month: int,
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            self._logger.warning(
                f"Billing computation for {year}-{month:02d} cancelled"
            )
            raise BillingCancelledError(
                f"Billing computation for {year}-{month:02d} was cancelled"
            )


__all__ = ["CalculateMonthlyBillingUseCase"]
