"""Database infrastructure for meal billing.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the kitchen database. It belongs to the
infrastructure layer because it deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from meal_billing.application.ports.database import DatabaseEnginePort
from meal_billing.utils.utils import get_project_root


def _get_env_var(name: str, default: Optional[str] = None) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.
        default: Value returned when the variable is missing or empty.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the variable is missing and no default is given.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if value:
        return value
    if default is not None:
        return default
    raise RuntimeError(f"Missing environment variable: {name}")


def default_database_url() -> str:
    """Return the SQLite URL of the bundled kitchen database."""
    return f"sqlite:///{get_project_root() / 'data' / 'kitchen.db'}"


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_billing_engine: Optional[Engine] = None


def get_billing_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the kitchen database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _billing_engine
    if _billing_engine is None:
        db_url = _get_env_var("BILLING_DB_URL", default_database_url())
        _billing_engine = _create_engine(db_url)
    return _billing_engine


_engines_by_url: dict[str, Engine] = {}


def get_engine_for_url(db_url: str) -> Engine:
    """Get a shared SQLAlchemy engine for an explicit database URL.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: One engine per URL, created on first use.
    """
    engine = _engines_by_url.get(db_url)
    if engine is None:
        engine = _create_engine(db_url)
        _engines_by_url[db_url] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so use cases can depend only on the protocol.
    """

    def __init__(self, engine: Optional[Engine] = None) -> None:
        self._engine = engine

    def get_billing_engine(self) -> Engine:
        """Get the engine for the kitchen database.

        Returns:
            Engine: Injected engine, or the shared singleton.
        """
        if self._engine is not None:
            return self._engine
        return get_billing_engine()


__all__ = [
    "default_database_url",
    "get_billing_engine",
    "get_engine_for_url",
    "SqlAlchemyDatabaseEngineAdapter",
]
