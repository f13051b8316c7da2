"""SQLite-backed implementation of OrderRepository.

Header and lines are written in one transaction: either the whole order
is stored or none of it is.
"""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from grocery.domain.model.order import Order, OrderLine
from grocery.domain.model.value_objects import Quantity
from grocery.domain.repository.order_repository import OrderRepository
from grocery.infrastructure.database import Database


def new_order_id() -> str:
    # Short prefix for easy log scanning.
    return f"ord_{uuid.uuid4().hex[:12]}"


class SqliteOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> Order:
        stored = replace(order, id=new_order_id(), created_at=datetime.now(timezone.utc))
        with self._db.transaction(write=True) as conn:
            conn.execute(
                "INSERT INTO orders (id, user_id, created_at) VALUES (?, ?, ?)",
                (stored.id, stored.user_id, stored.created_at.isoformat()),
            )
            conn.executemany(
                "INSERT INTO order_lines (order_id, position, grocery_id, quantity) "
                "VALUES (?, ?, ?, ?)",
                [
                    (stored.id, position, line.grocery_id, line.quantity.value)
                    for position, line in enumerate(stored.lines)
                ],
            )
        return stored

    def get_by_id(self, order_id: str) -> Order | None:
        with self._db.transaction() as conn:
            header = conn.execute(
                "SELECT id, user_id, created_at FROM orders WHERE id = ?", (order_id,)
            ).fetchone()
            if header is None:
                return None
            return self._load(conn, header)

    def list_by_user(self, user_id: str) -> list[Order]:
        with self._db.transaction() as conn:
            headers = conn.execute(
                "SELECT id, user_id, created_at FROM orders "
                "WHERE user_id = ? ORDER BY created_at, rowid",
                (user_id,),
            ).fetchall()
            return [self._load(conn, header) for header in headers]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _load(conn: sqlite3.Connection, header: sqlite3.Row) -> Order:
        rows = conn.execute(
            "SELECT grocery_id, quantity FROM order_lines "
            "WHERE order_id = ? ORDER BY position",
            (header["id"],),
        ).fetchall()
        return Order(
            id=header["id"],
            user_id=header["user_id"],
            lines=tuple(
                OrderLine(grocery_id=row["grocery_id"], quantity=Quantity(row["quantity"]))
                for row in rows
            ),
            created_at=datetime.fromisoformat(header["created_at"]),
        )
