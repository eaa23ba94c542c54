"""Application ports package."""

from .billing_repository import (
    AdditionalChargeRepositoryPort,
    OrderRepositoryPort,
    PersonRepositoryPort,
)
from .database import DatabaseEnginePort
from .document import Destination, DocumentRendererPort, DocumentSinkPort

__all__ = [
    "AdditionalChargeRepositoryPort",
    "OrderRepositoryPort",
    "PersonRepositoryPort",
    "DatabaseEnginePort",
    "Destination",
    "DocumentRendererPort",
    "DocumentSinkPort",
]
