"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import os

import dotenv

from meal_billing.domain.constants import (
    DEFAULT_CHILD_MEAL_PRICE,
    DEFAULT_DELIVERY_SURCHARGE,
    DEFAULT_ORGANIZATION_NAME,
    DEFAULT_PENSIONER_MEAL_PRICE,
)
from meal_billing.domain.policies import PricingPolicy
from meal_billing.infrastructure.db import default_database_url
from meal_billing.infrastructure.logging.logger import get_app_logger

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class BillingSettings:
    """Settings for the billing engine and its adapters.

    Attributes:
        database_url: SQLAlchemy URL of the kitchen database.
        pricing: Category prices and delivery surcharge.
        organization_name: Name printed on exported invoices.
        include_charge_only_persons: Bill persons that only have additional
            charges in a month.
    """

    database_url: str = field(default_factory=default_database_url)
    pricing: PricingPolicy = field(default_factory=PricingPolicy)
    organization_name: str = DEFAULT_ORGANIZATION_NAME
    include_charge_only_persons: bool = False

    @classmethod
    def from_env(cls) -> "BillingSettings":
        """Build settings from environment variables.

        Returns:
            BillingSettings: Settings sourced from the environment and an
            optional ``.env`` file.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        pricing = PricingPolicy(
            pensioner_meal_price=cls._read_price(
                "PENSIONER_MEAL_PRICE",
                DEFAULT_PENSIONER_MEAL_PRICE,
                logger=logger,
            ),
            child_meal_price=cls._read_price(
                "CHILD_MEAL_PRICE",
                DEFAULT_CHILD_MEAL_PRICE,
                logger=logger,
            ),
            delivery_surcharge=cls._read_price(
                "DELIVERY_SURCHARGE",
                DEFAULT_DELIVERY_SURCHARGE,
                logger=logger,
            ),
        )
        organization_name = (
            os.getenv("BILLING_ORGANIZATION_NAME", "").strip()
            or DEFAULT_ORGANIZATION_NAME
        )
        include_charge_only = (
            os.getenv("BILLING_INCLUDE_CHARGE_ONLY", "false").strip().lower()
            in TRUE_VALUES
        )
        return cls(
            database_url=os.getenv("BILLING_DB_URL") or default_database_url(),
            pricing=pricing,
            organization_name=organization_name,
            include_charge_only_persons=include_charge_only,
        )

    @staticmethod
    def _read_price(name: str, default: Decimal, logger) -> Decimal:
        """Read a non-negative price from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Decimal: Configured price.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip().replace(",", "."))
        except InvalidOperation:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if not value.is_finite() or value < 0:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        return value


__all__ = ["BillingSettings"]
