"""Composition root for wiring infrastructure adapters."""

from meal_billing.application.ports.billing_repository import (
    AdditionalChargeRepositoryPort,
    OrderRepositoryPort,
    PersonRepositoryPort,
)
from meal_billing.application.ports.database import DatabaseEnginePort
from meal_billing.application.ports.document import DocumentRendererPort
from meal_billing.application.use_cases.calculate_monthly_billing import (
    CalculateMonthlyBillingUseCase,
)
from meal_billing.application.use_cases.export_monthly_billing import (
    ExportMonthlyBillingUseCase,
)
from meal_billing.infrastructure.billing_repository import (
    SqlAlchemyAdditionalChargeRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPersonRepository,
)
from meal_billing.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    get_engine_for_url,
)
from meal_billing.infrastructure.document_sink import FileDocumentSink
from meal_billing.infrastructure.logging.logger import get_app_logger
from meal_billing.infrastructure.pdf_renderer import ReportLabPdfRenderer
from meal_billing.infrastructure.settings import BillingSettings
from meal_billing.infrastructure.text_renderer import PlainTextRenderer

RENDERER_FORMATS = ("pdf", "text")


def build_database_adapter(
    settings: BillingSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance.

    With settings the adapter is bound to their ``database_url``; without,
    it uses the shared engine configured from the environment.
    """
    if settings is None:
        return SqlAlchemyDatabaseEngineAdapter()
    return SqlAlchemyDatabaseEngineAdapter(
        get_engine_for_url(settings.database_url)
    )


def build_person_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PersonRepositoryPort:
    """Return the person store."""
    return SqlAlchemyPersonRepository(db_port or build_database_adapter())


def build_order_repository(
    db_port: DatabaseEnginePort | None = None,
) -> OrderRepositoryPort:
    """Return the order store."""
    return SqlAlchemyOrderRepository(db_port or build_database_adapter())


def build_charge_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AdditionalChargeRepositoryPort:
    """Return the additional-charge store."""
    return SqlAlchemyAdditionalChargeRepository(
        db_port or build_database_adapter()
    )


def build_renderer(output_format: str = "pdf") -> DocumentRendererPort:
    """Return the document renderer for an output format.

    Raises:
        ValueError: If the format is not one of ``RENDERER_FORMATS``.
    """
    if output_format == "pdf":
        return ReportLabPdfRenderer()
    if output_format == "text":
        return PlainTextRenderer()
    raise ValueError(
        f"Unknown output format {output_format!r}; "
        f"expected one of {', '.join(RENDERER_FORMATS)}"
    )


def build_calculate_use_case(
    settings: BillingSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> CalculateMonthlyBillingUseCase:
    """Return the monthly billing calculation wired to the SQL stores."""
    resolved_settings = settings or BillingSettings.from_env()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return CalculateMonthlyBillingUseCase(
        person_repository=build_person_repository(resolved_db),
        order_repository=build_order_repository(resolved_db),
        charge_repository=build_charge_repository(resolved_db),
        pricing=resolved_settings.pricing,
        logger=get_app_logger(),
        include_charge_only_persons=(
            resolved_settings.include_charge_only_persons
        ),
    )


def build_export_use_case(
    output_format: str = "pdf",
    settings: BillingSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> ExportMonthlyBillingUseCase:
    """Return the invoice export wired to the SQL stores and a renderer."""
    resolved_settings = settings or BillingSettings.from_env()
    return ExportMonthlyBillingUseCase(
        calculate_use_case=build_calculate_use_case(
            resolved_settings,
            db_port=db_port,
        ),
        renderer=build_renderer(output_format),
        sink=FileDocumentSink(),
        organization_name=resolved_settings.organization_name,
        logger=get_app_logger(),
    )


__all__ = [
    "RENDERER_FORMATS",
    "build_database_adapter",
    "build_person_repository",
    "build_order_repository",
    "build_charge_repository",
    "build_renderer",
    "build_calculate_use_case",
    "build_export_use_case",
]
