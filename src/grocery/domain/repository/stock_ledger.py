"""Abstract StockLedger — the only writer of per-item available quantity.

Implementations must make ``try_reserve`` a single compare-and-decrement:
no other caller may observe the availability between the check and the
decrement.  Synchronization is per grocery id, never catalog-wide.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class ReservationOutcome(Enum):
    RESERVED = "RESERVED"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    NOT_FOUND = "NOT_FOUND"


class StockLedger(ABC):

    @abstractmethod
    def try_reserve(self, grocery_id: str, quantity: int) -> ReservationOutcome:
        """Atomically decrement inventory by *quantity* if enough is available.

        Raises TransientStoreError / PersistenceError on store failure.
        """

    @abstractmethod
    def release(self, grocery_id: str, quantity: int) -> None:
        """Atomically increment inventory to undo a successful ``try_reserve``."""

    @abstractmethod
    def available(self, grocery_id: str) -> int | None:
        """Return the current inventory of a grocery, or None if unknown."""
