"""SQLite-backed implementation of GroceryRepository."""

from __future__ import annotations

import sqlite3
import uuid
from decimal import Decimal

from grocery.domain.model.grocery import Grocery
from grocery.domain.model.value_objects import Money
from grocery.domain.repository.grocery_repository import GroceryRepository
from grocery.infrastructure.database import Database


def new_grocery_id() -> str:
    return uuid.uuid4().hex[:24]


class SqliteGroceryRepository(GroceryRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- GroceryRepository interface ------------------------------------------

    def add(self, name: str, price: Money, inventory: int) -> Grocery:
        grocery = Grocery(id=new_grocery_id(), name=name, price=price, inventory=inventory)
        with self._db.transaction(write=True) as conn:
            conn.execute(
                "INSERT INTO groceries (id, name, price, inventory) VALUES (?, ?, ?, ?)",
                (grocery.id, grocery.name, str(grocery.price.amount), grocery.inventory),
            )
        return grocery

    def get_by_id(self, grocery_id: str) -> Grocery | None:
        with self._db.transaction() as conn:
            row = conn.execute(
                "SELECT id, name, price, inventory FROM groceries WHERE id = ?",
                (grocery_id,),
            ).fetchone()
        return None if row is None else self._to_domain(row)

    def list_all(self) -> list[Grocery]:
        with self._db.transaction() as conn:
            rows = conn.execute(
                "SELECT id, name, price, inventory FROM groceries ORDER BY rowid"
            ).fetchall()
        return [self._to_domain(row) for row in rows]

    def list_available(self) -> list[Grocery]:
        with self._db.transaction() as conn:
            rows = conn.execute(
                "SELECT id, name, price, inventory FROM groceries "
                "WHERE inventory > 0 ORDER BY rowid"
            ).fetchall()
        return [self._to_domain(row) for row in rows]

    def update(
        self,
        grocery_id: str,
        name: str | None = None,
        price: Money | None = None,
        inventory: int | None = None,
    ) -> Grocery | None:
        assignments: list[str] = []
        params: list[object] = []
        if name is not None:
            assignments.append("name = ?")
            params.append(name)
        if price is not None:
            assignments.append("price = ?")
            params.append(str(price.amount))
        if inventory is not None:
            assignments.append("inventory = ?")
            params.append(inventory)

        with self._db.transaction(write=True) as conn:
            if assignments:
                conn.execute(
                    f"UPDATE groceries SET {', '.join(assignments)} WHERE id = ?",
                    (*params, grocery_id),
                )
            row = conn.execute(
                "SELECT id, name, price, inventory FROM groceries WHERE id = ?",
                (grocery_id,),
            ).fetchone()
        return None if row is None else self._to_domain(row)

    def delete(self, grocery_id: str) -> bool:
        with self._db.transaction(write=True) as conn:
            cursor = conn.execute("DELETE FROM groceries WHERE id = ?", (grocery_id,))
        return cursor.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: sqlite3.Row) -> Grocery:
        return Grocery(
            id=row["id"],
            name=row["name"],
            price=Money(Decimal(row["price"])),
            inventory=row["inventory"],
        )
