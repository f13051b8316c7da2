"""Application service: Add Grocery use case."""

from __future__ import annotations

from decimal import Decimal

from grocery.application.dto import GroceryDTO
from grocery.domain.model.grocery import validate_inventory, validate_name
from grocery.domain.model.value_objects import Money
from grocery.domain.repository.grocery_repository import GroceryRepository


class AddGroceryHandler:

    def __init__(self, grocery_repo: GroceryRepository) -> None:
        self._grocery_repo = grocery_repo

    def handle(self, name: str, price: str | Decimal, inventory: int) -> GroceryDTO:
        """Add a new grocery item to the catalog."""
        grocery = self._grocery_repo.add(
            name=validate_name(name),
            price=Money.of(price),
            inventory=validate_inventory(inventory),
        )
        return GroceryDTO.from_domain(grocery)
