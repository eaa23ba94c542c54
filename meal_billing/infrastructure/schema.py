"""DDL for the kitchen tables read by the billing stores."""

from sqlalchemy import text
from sqlalchemy.engine import Engine

CREATE_PERSONS_SQL = """
CREATE TABLE IF NOT EXISTS persons (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    street TEXT,
    house_number TEXT,
    zip TEXT,
    city TEXT,
    contact TEXT,
    default_delivery BOOLEAN NOT NULL DEFAULT 0,
    category INTEGER NOT NULL,
    custom_meal_price TEXT,
    default_meal_quantity INTEGER NOT NULL DEFAULT 1
)
"""

CREATE_MEAL_ORDERS_SQL = """
CREATE TABLE IF NOT EXISTS meal_orders (
    id INTEGER PRIMARY KEY,
    date TEXT NOT NULL,
    person_id INTEGER NOT NULL,
    quantity INTEGER NOT NULL DEFAULT 0,
    delivery BOOLEAN NOT NULL DEFAULT 0
)
"""

CREATE_ADDITIONAL_CHARGES_SQL = """
CREATE TABLE IF NOT EXISTS additional_charges (
    id INTEGER PRIMARY KEY,
    person_id INTEGER NOT NULL,
    month TEXT NOT NULL,
    description TEXT NOT NULL,
    unit_price TEXT NOT NULL,
    quantity INTEGER NOT NULL
)
"""

CREATE_INDEXES_SQL = (
    "CREATE UNIQUE INDEX IF NOT EXISTS ix_meal_orders_date_person "
    "ON meal_orders (date, person_id)",
    "CREATE INDEX IF NOT EXISTS ix_additional_charges_month_person "
    "ON additional_charges (month, person_id)",
)


def ensure_schema(engine: Engine) -> None:
    """Create the kitchen tables and indexes when missing.

    Args:
        engine: Engine connected to the kitchen database.
    """
    statements = (
        CREATE_PERSONS_SQL,
        CREATE_MEAL_ORDERS_SQL,
        CREATE_ADDITIONAL_CHARGES_SQL,
        *CREATE_INDEXES_SQL,
    )
    with engine.begin() as conn:
        for statement in statements:
            conn.execute(text(statement))


__all__ = ["ensure_schema"]
