"""Application use cases package."""

from .calculate_monthly_billing import CalculateMonthlyBillingUseCase
from .export_monthly_billing import ExportMonthlyBillingUseCase

__all__ = [
    "CalculateMonthlyBillingUseCase",
    "ExportMonthlyBillingUseCase",
]
