"""Use case exporting the monthly collective invoice as a document."""

from threading import Event

from meal_billing.application.ports.document import (
    Destination,
    DocumentRendererPort,
    DocumentSinkPort,
)
from meal_billing.application.use_cases.calculate_monthly_billing import (
    CalculateMonthlyBillingUseCase,
)
from meal_billing.domain.constants import DEFAULT_ORGANIZATION_NAME
from meal_billing.domain.errors import (
    ExportError,
    ExportFailedError,
    ExportPathNotFoundError,
    ExportPermissionError,
)
from meal_billing.domain.services import build_monthly_report
from meal_billing.infrastructure.logging.logger import get_app_logger


class ExportMonthlyBillingUseCase:
    """Lay the month's billing rows into a rendered, written document.

    Pricing is never recomputed here; rows come from the calculation use
    case unchanged.
    """

    def __init__(
        self,
        calculate_use_case: CalculateMonthlyBillingUseCase,
        renderer: DocumentRendererPort,
        sink: DocumentSinkPort,
        organization_name: str = DEFAULT_ORGANIZATION_NAME,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            calculate_use_case: Use case producing the billing rows.
            renderer: Port rendering the report into document bytes.
            sink: Port writing the document to its destination.
            organization_name: Name printed in the document header.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._calculate_use_case = calculate_use_case
        self._renderer = renderer
        self._sink = sink
        self._organization_name = organization_name
        self._logger = logger or get_app_logger()

    def execute(
        self,
        year: int,
        month: int,
        destination: Destination,
        cancel_event: Event | None = None,
    ) -> Destination:
        """Compute, render and write the invoice of a month.

        Args:
            year: Billing year.
            month: Billing month, 1 to 12.
            destination: File path or writable binary stream.
            cancel_event: Optional signal forwarded to the calculation.

        Returns:
            Destination: The path or stream written to.

        Raises:
            ExportPermissionError: If writing was not permitted.
            ExportPathNotFoundError: If the destination path does not exist.
            ExportFailedError: For any other write failure.
        """
        rows = self._calculate_use_case.execute(
            year,
            month,
            cancel_event=cancel_event,
        )
        report = build_monthly_report(
            rows,
            year,
            month,
            organization_name=self._organization_name,
        )
        self._logger.info(
            f"Report {report.period_label}: {len(report.sections)} sections, "
            f"grand total {report.grand_totals.total}"
        )
        payload = self._renderer.render(report)

        try:
            written = self._sink.write(payload, destination)
        except PermissionError as exc:
            raise self._log_failure(
                ExportPermissionError(destination, detail=str(exc))
            ) from exc
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise self._log_failure(
                ExportPathNotFoundError(destination, detail=str(exc))
            ) from exc
        except Exception as exc:
            raise self._log_failure(
                ExportFailedError(destination, detail=str(exc))
            ) from exc

        self._logger.info(
            f"Exported {self._renderer.media_type} invoice for "
            f"{report.period_label} to {written}"
        )
        return written

    def _log_failure(self, error: ExportError) -> ExportError:
        self._logger.error(f"{type(error).__name__}: {error}")
        return error


__all__ = ["ExportMonthlyBillingUseCase"]
