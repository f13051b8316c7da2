"""SQLite-backed implementation of StockLedger.

The reservation is one conditional UPDATE.  SQLite serializes writers,
so the ``inventory >= ?`` check and the decrement happen in the same
atomic step; there is no read-then-write window to race through.
"""

from __future__ import annotations

import logging

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.value_objects import MAX_STORED_INT
from grocery.domain.repository.stock_ledger import ReservationOutcome, StockLedger
from grocery.infrastructure.database import Database

alarm_logger = logging.getLogger("grocery.alarm")


class SqliteStockLedger(StockLedger):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- StockLedger interface ------------------------------------------------

    def try_reserve(self, grocery_id: str, quantity: int) -> ReservationOutcome:
        _check_quantity(quantity)
        with self._db.transaction(write=True) as conn:
            cursor = conn.execute(
                "UPDATE groceries SET inventory = inventory - ? "
                "WHERE id = ? AND inventory >= ?",
                (quantity, grocery_id, quantity),
            )
            if cursor.rowcount == 1:
                return ReservationOutcome.RESERVED
            # Nothing changed; this read only labels the failure.
            row = conn.execute(
                "SELECT 1 FROM groceries WHERE id = ?", (grocery_id,)
            ).fetchone()
        if row is None:
            return ReservationOutcome.NOT_FOUND
        return ReservationOutcome.INSUFFICIENT_STOCK

    def release(self, grocery_id: str, quantity: int) -> None:
        _check_quantity(quantity)
        with self._db.transaction(write=True) as conn:
            cursor = conn.execute(
                "UPDATE groceries SET inventory = inventory + ? WHERE id = ?",
                (quantity, grocery_id),
            )
        if cursor.rowcount == 0:
            # Item deleted since it was reserved; the units have nowhere to go.
            alarm_logger.warning(
                "Release of %d for %s matched no item; compensation dropped",
                quantity, grocery_id,
            )

    def available(self, grocery_id: str) -> int | None:
        with self._db.transaction() as conn:
            row = conn.execute(
                "SELECT inventory FROM groceries WHERE id = ?", (grocery_id,)
            ).fetchone()
        return None if row is None else row["inventory"]


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise ValidationError(f"Ledger quantity must be a positive integer, got {quantity!r}")
    if quantity > MAX_STORED_INT:
        raise ValidationError(f"Ledger quantity cannot exceed {MAX_STORED_INT}")
