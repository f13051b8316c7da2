"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI adapters and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from grocery.domain.model.grocery import Grocery
from grocery.domain.model.order import Order


@dataclass(frozen=True)
class BookingItemSpec:
    """Input: one requested line (grocery id + quantity), not yet validated."""

    grocery_id: str
    quantity: int


@dataclass(frozen=True)
class GroceryDTO:
    id: str
    name: str
    price: Decimal
    inventory: int

    @staticmethod
    def from_domain(grocery: Grocery) -> GroceryDTO:
        return GroceryDTO(
            id=grocery.id,
            name=grocery.name,
            price=grocery.price.amount,
            inventory=grocery.inventory,
        )


@dataclass(frozen=True)
class OrderLineDTO:
    grocery_id: str
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a stored order, lines in submitted order."""

    id: str
    user_id: str
    lines: list[OrderLineDTO]
    created_at: datetime

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            lines=[
                OrderLineDTO(grocery_id=line.grocery_id, quantity=line.quantity.value)
                for line in order.lines
            ],
            created_at=order.created_at,
        )
