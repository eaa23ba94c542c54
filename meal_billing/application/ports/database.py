"""Database ports for meal billing.

This module defines the application-layer protocol for accessing the
kitchen database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the kitchen database engine."""

    def get_billing_engine(self) -> Engine:
        """Get the engine for the kitchen database.

        Returns:
            Engine: SQLAlchemy engine holding persons, orders and charges.
        """


__all__ = ["DatabaseEnginePort"]
