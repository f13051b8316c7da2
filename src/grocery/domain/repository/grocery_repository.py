"""Abstract repository for the Grocery catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLite, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from grocery.domain.model.grocery import Grocery
from grocery.domain.model.value_objects import Money


class GroceryRepository(ABC):

    @abstractmethod
    def add(self, name: str, price: Money, inventory: int) -> Grocery:
        """Insert a new grocery and return it with its assigned id."""

    @abstractmethod
    def get_by_id(self, grocery_id: str) -> Grocery | None:
        """Return a grocery by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Grocery]:
        """Return every grocery in the catalog."""

    @abstractmethod
    def list_available(self) -> list[Grocery]:
        """Return groceries whose inventory is greater than zero."""

    @abstractmethod
    def update(
        self,
        grocery_id: str,
        name: str | None = None,
        price: Money | None = None,
        inventory: int | None = None,
    ) -> Grocery | None:
        """Overwrite the given fields; return the updated grocery or None."""

    @abstractmethod
    def delete(self, grocery_id: str) -> bool:
        """Remove a grocery; return False if it did not exist."""
