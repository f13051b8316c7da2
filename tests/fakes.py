"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQLite repositories
but keep everything in a dict. No file I/O, no side effects.  The ledger
fake locks per grocery id and can be told to fail on demand.
"""

from __future__ import annotations

import threading
import time
from dataclasses import replace
from datetime import datetime, timezone

from grocery.domain.exceptions import PersistenceError, TransientStoreError
from grocery.domain.model.grocery import Grocery
from grocery.domain.model.order import Order
from grocery.domain.model.value_objects import Money
from grocery.domain.repository.grocery_repository import GroceryRepository
from grocery.domain.repository.order_repository import OrderRepository
from grocery.domain.repository.stock_ledger import ReservationOutcome, StockLedger
from grocery.domain.service.retry import RetryPolicy


def no_wait_retry(attempts: int = 3) -> RetryPolicy:
    return RetryPolicy(attempts=attempts, base_delay=0, sleep=lambda _: None)


def make_grocery(grocery_id: str, inventory: int, price: str = "1.00") -> Grocery:
    return Grocery(id=grocery_id, name=f"Item {grocery_id}", price=Money.of(price), inventory=inventory)


class FakeGroceryRepository(GroceryRepository):

    def __init__(self, groceries: list[Grocery] | None = None) -> None:
        self._store: dict[str, Grocery] = {}
        self._next_id = 1
        for g in groceries or []:
            self._store[g.id] = g

    def add(self, name: str, price: Money, inventory: int) -> Grocery:
        grocery = Grocery(id=f"g{self._next_id}", name=name, price=price, inventory=inventory)
        self._next_id += 1
        self._store[grocery.id] = grocery
        return grocery

    def get_by_id(self, grocery_id: str) -> Grocery | None:
        return self._store.get(grocery_id)

    def list_all(self) -> list[Grocery]:
        return list(self._store.values())

    def list_available(self) -> list[Grocery]:
        return [g for g in self._store.values() if g.inventory > 0]

    def update(
        self,
        grocery_id: str,
        name: str | None = None,
        price: Money | None = None,
        inventory: int | None = None,
    ) -> Grocery | None:
        grocery = self._store.get(grocery_id)
        if grocery is None:
            return None
        if name is not None:
            grocery.name = name
        if price is not None:
            grocery.price = price
        if inventory is not None:
            grocery.inventory = inventory
        return grocery

    def delete(self, grocery_id: str) -> bool:
        return self._store.pop(grocery_id, None) is not None


class FakeStockLedger(StockLedger):
    """Ledger over a FakeGroceryRepository with one lock per grocery id.

    Failure injection:
    - ``transient_failures[(op, grocery_id)] = n`` fails the next *n* calls
      of ``op`` ("reserve" or "release") with TransientStoreError.
    - ``broken_releases`` holds ids whose release always fails.
    - ``check_delay`` sleeps between the availability check and the
      decrement, inside the lock, to widen any race window.
    """

    def __init__(self, groceries: FakeGroceryRepository) -> None:
        self._groceries = groceries
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self.calls: list[tuple[str, str, int]] = []
        self.transient_failures: dict[tuple[str, str], int] = {}
        self.broken_releases: set[str] = set()
        self.check_delay = 0.0

    def try_reserve(self, grocery_id: str, quantity: int) -> ReservationOutcome:
        self._maybe_fail("reserve", grocery_id)
        with self._lock_for(grocery_id):
            grocery = self._groceries.get_by_id(grocery_id)
            if grocery is None:
                return ReservationOutcome.NOT_FOUND
            if grocery.inventory < quantity:
                return ReservationOutcome.INSUFFICIENT_STOCK
            if self.check_delay:
                time.sleep(self.check_delay)
            grocery.inventory -= quantity
            self.calls.append(("reserve", grocery_id, quantity))
            return ReservationOutcome.RESERVED

    def release(self, grocery_id: str, quantity: int) -> None:
        if grocery_id in self.broken_releases:
            raise TransientStoreError(f"release of {grocery_id} keeps failing")
        self._maybe_fail("release", grocery_id)
        with self._lock_for(grocery_id):
            grocery = self._groceries.get_by_id(grocery_id)
            if grocery is not None:
                grocery.inventory += quantity
            self.calls.append(("release", grocery_id, quantity))

    def available(self, grocery_id: str) -> int | None:
        grocery = self._groceries.get_by_id(grocery_id)
        return None if grocery is None else grocery.inventory

    def _lock_for(self, grocery_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(grocery_id, threading.Lock())

    def _maybe_fail(self, op: str, grocery_id: str) -> None:
        remaining = self.transient_failures.get((op, grocery_id), 0)
        if remaining > 0:
            self.transient_failures[(op, grocery_id)] = remaining - 1
            raise TransientStoreError(f"{op} {grocery_id}: database is locked")


class FakeOrderRepository(OrderRepository):
    """Append-only order store.

    ``transient_failures`` fails the next *n* creates with
    TransientStoreError; ``broken`` makes every create raise
    PersistenceError; ``interrupt_with`` raises the given exception.
    """

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self._lock = threading.Lock()
        self._next_id = 1
        self.transient_failures = 0
        self.broken = False
        self.interrupt_with: BaseException | None = None

    def create(self, order: Order) -> Order:
        if self.interrupt_with is not None:
            raise self.interrupt_with
        if self.broken:
            raise PersistenceError("disk full")
        if self.transient_failures > 0:
            self.transient_failures -= 1
            raise TransientStoreError("database is locked")
        with self._lock:
            stored = replace(
                order, id=f"ord_{self._next_id}", created_at=datetime.now(timezone.utc)
            )
            self._next_id += 1
            self._store[stored.id] = stored
        return stored

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_by_user(self, user_id: str) -> list[Order]:
        return [o for o in self._store.values() if o.user_id == user_id]

    def list_all(self) -> list[Order]:
        return list(self._store.values())
