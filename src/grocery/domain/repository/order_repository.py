"""Abstract repository for the Order aggregate (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from grocery.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> Order:
        """Assign id and timestamp, persist, and return the stored order.

        Raises PersistenceError (or TransientStoreError) if the write fails;
        in that case nothing is stored.
        """

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return every order placed by a user, oldest first."""
