"""Domain services package."""

from .billing import (
    build_billing_row,
    compute_billing_rows,
    group_orders_by_person,
    sum_charges_by_person,
)
from .normalization import format_address, name_sort_key
from .reporting import (
    build_monthly_report,
    format_billing_line,
    format_period_label,
    summarize_rows,
)
from .validation import month_bounds, validate_billing_period

__all__ = [
    "build_billing_row",
    "compute_billing_rows",
    "group_orders_by_person",
    "sum_charges_by_person",
    "format_address",
    "name_sort_key",
    "build_monthly_report",
    "format_billing_line",
    "format_period_label",
    "summarize_rows",
    "month_bounds",
    "validate_billing_period",
]
