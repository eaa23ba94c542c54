"""Tests for the ExportMonthlyBillingUseCase."""

import io
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from meal_billing.application.use_cases.export_monthly_billing import (
    ExportMonthlyBillingUseCase,
)
from meal_billing.domain.errors import (
    DataIntegrityError,
    ExportFailedError,
    ExportPathNotFoundError,
    ExportPermissionError,
)
from meal_billing.domain.models import BillingRow, PersonCategory
from meal_billing.infrastructure.document_sink import FileDocumentSink


def _row(name: str, category: PersonCategory, total: str) -> BillingRow:
    return BillingRow(
        person_id=1,
        name=name,
        address="",
        category=category,
        unit_price=Decimal(total),
        quantity=1,
        delivery_count=0,
        delivery_surcharge=Decimal("3.50"),
        additional_charges=Decimal("0.00"),
        total=Decimal(total),
    )


class RecordingRenderer:
    """Renderer capturing the report it was given."""

    media_type = "text/plain"

    def __init__(self) -> None:
        self.reports = []

    def render(self, report) -> bytes:
        self.reports.append(report)
        return f"{report.period_label}|{report.grand_totals.total}".encode()


class FailingSink:
    """Sink raising a configured exception."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def write(self, payload, destination):
        raise self._exc


def _use_case(rows, sink=None, renderer=None):
    calculate = MagicMock()
    calculate.execute.return_value = rows
    return ExportMonthlyBillingUseCase(
        calculate_use_case=calculate,
        renderer=renderer or RecordingRenderer(),
        sink=sink or FileDocumentSink(),
        organization_name="Gemeinde-Küche",
        logger=MagicMock(),
    )


def test_execute_writes_file_and_returns_path(tmp_path) -> None:
    """The rendered document should be written to the given path."""
    renderer = RecordingRenderer()
    rows = [
        _row("Anna", PersonCategory.PENSIONER, "107.50"),
        _row("Gast", PersonCategory.FREE_MEAL, "0.00"),
    ]
    use_case = _use_case(rows, renderer=renderer)
    destination = tmp_path / "invoice.txt"

    result = use_case.execute(2024, 3, destination)

    assert result == destination
    assert destination.read_bytes() == "März 2024|107.50".encode()
    report = renderer.reports[0]
    assert [section.title for section in report.sections] == [
        "Pensionisten",
        "Gratis",
    ]
    assert report.organization_name == "Gemeinde-Küche"


def test_execute_writes_stream_and_returns_it() -> None:
    """Streams should be written to and returned as handle."""
    stream = io.BytesIO()
    use_case = _use_case([])

    result = use_case.execute(2024, 1, stream)

    assert result is stream
    assert stream.getvalue() == "Januar 2024|0.00".encode()


def test_execute_forwards_cancel_event() -> None:
    """The calculation should receive the cancellation signal."""
    use_case = _use_case([])
    cancel_event = object()

    use_case.execute(2024, 1, io.BytesIO(), cancel_event=cancel_event)

    use_case._calculate_use_case.execute.assert_called_once_with(
        2024,
        1,
        cancel_event=cancel_event,
    )


def test_missing_directory_reported_as_path_not_found(tmp_path) -> None:
    """A missing directory should map to ExportPathNotFoundError."""
    use_case = _use_case([])
    destination = tmp_path / "missing" / "invoice.pdf"

    with pytest.raises(ExportPathNotFoundError) as exc_info:
        use_case.execute(2024, 3, destination)

    assert exc_info.value.destination == destination
    assert "not found" in exc_info.value.user_message
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (PermissionError("denied"), ExportPermissionError),
        (FileNotFoundError("missing"), ExportPathNotFoundError),
        (NotADirectoryError("not a dir"), ExportPathNotFoundError),
        (OSError("disk full"), ExportFailedError),
        (RuntimeError("boom"), ExportFailedError),
    ],
)
def test_write_failures_are_classified(exc, expected) -> None:
    """Each write failure class should have its own error type."""
    use_case = _use_case([], sink=FailingSink(exc))

    with pytest.raises(expected) as exc_info:
        use_case.execute(2024, 3, "invoice.pdf")

    assert exc_info.value.__cause__ is exc
    use_case._logger.error.assert_called_once()


def test_user_messages_are_distinct() -> None:
    """Permission, not-found and unexpected failures read differently."""
    messages = {
        ExportPermissionError("x.pdf").user_message,
        ExportPathNotFoundError("x.pdf").user_message,
        ExportFailedError("x.pdf").user_message,
    }

    assert len(messages) == 3


def test_calculation_errors_propagate_without_writing(tmp_path) -> None:
    """Aggregator failures should not be wrapped or produce a file."""
    calculate = MagicMock()
    calculate.execute.side_effect = DataIntegrityError(7)
    use_case = ExportMonthlyBillingUseCase(
        calculate_use_case=calculate,
        renderer=RecordingRenderer(),
        sink=FileDocumentSink(),
        logger=MagicMock(),
    )
    destination = tmp_path / "invoice.pdf"

    with pytest.raises(DataIntegrityError):
        use_case.execute(2024, 3, destination)

    assert not destination.exists()
