"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from grocery.domain.service.retry import RetryPolicy
from grocery.infrastructure.config import Settings
from grocery.infrastructure.database import Database
from grocery.infrastructure.persistence.sqlite_grocery_repository import (
    SqliteGroceryRepository,
)
from grocery.infrastructure.persistence.sqlite_order_repository import (
    SqliteOrderRepository,
)
from grocery.infrastructure.persistence.sqlite_stock_ledger import SqliteStockLedger


def open_database(settings: Settings) -> Database:
    """Connect to the store; raises PersistenceError if it is unreachable."""
    database = Database(settings.db_path)
    database.open()
    return database


def retry_policy(settings: Settings) -> RetryPolicy:
    return RetryPolicy(
        attempts=settings.retry_attempts,
        base_delay=settings.retry_base_delay,
    )


def grocery_repository(database: Database) -> SqliteGroceryRepository:
    return SqliteGroceryRepository(database)


def stock_ledger(database: Database) -> SqliteStockLedger:
    return SqliteStockLedger(database)


def order_repository(database: Database) -> SqliteOrderRepository:
    return SqliteOrderRepository(database)
