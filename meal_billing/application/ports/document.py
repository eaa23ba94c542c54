"""Ports for rendering and writing the monthly invoice document."""

from os import PathLike
from typing import BinaryIO, Protocol, Union

from meal_billing.domain.models import MonthlyBillingReport

Destination = Union[str, PathLike, BinaryIO]


class DocumentRendererPort(Protocol):
    """Port turning a monthly report into document bytes."""

    media_type: str

    def render(self, report: MonthlyBillingReport) -> bytes:
        """Return the rendered document."""


class DocumentSinkPort(Protocol):
    """Port writing rendered documents to a destination."""

    def write(self, payload: bytes, destination: Destination) -> Destination:
        """Write ``payload`` and return the destination used.

        Raises:
            OSError: If the destination cannot be written.
        """


__all__ = ["Destination", "DocumentRendererPort", "DocumentSinkPort"]
