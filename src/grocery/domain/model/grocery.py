"""Grocery aggregate — a catalog entry with its available stock.

Groceries live independently of orders. Admins add, edit and remove them;
bookings only ever touch ``inventory``, and only through the StockLedger.
"""

from __future__ import annotations

from dataclasses import dataclass

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.value_objects import MAX_STORED_INT, Money


@dataclass
class Grocery:
    """A grocery item in the catalog.

    Invariants:
    - ``name`` is non-empty
    - ``inventory`` is an integer >= 0
    """

    id: str
    name: str
    price: Money
    inventory: int


def validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Grocery name is required")
    return name.strip()


def validate_inventory(inventory: int) -> int:
    """Inventory is an absolute stock level, never a delta."""
    if not isinstance(inventory, int) or isinstance(inventory, bool):
        raise ValidationError(
            f"Inventory must be an integer, got {type(inventory).__name__}"
        )
    if inventory < 0:
        raise ValidationError("Inventory cannot be negative")
    if inventory > MAX_STORED_INT:
        raise ValidationError(f"Inventory cannot exceed {MAX_STORED_INT}")
    return inventory
