"""Application service: Update Grocery use case."""

from __future__ import annotations

from decimal import Decimal

from grocery.application.dto import GroceryDTO
from grocery.domain.exceptions import EntityNotFoundError
from grocery.domain.model.grocery import validate_inventory, validate_name
from grocery.domain.model.value_objects import Money
from grocery.domain.repository.grocery_repository import GroceryRepository


class UpdateGroceryHandler:

    def __init__(self, grocery_repo: GroceryRepository) -> None:
        self._grocery_repo = grocery_repo

    def handle(
        self,
        grocery_id: str,
        name: str | None = None,
        price: str | Decimal | None = None,
        inventory: int | None = None,
    ) -> GroceryDTO:
        """Overwrite any of name, price and inventory.

        ``inventory`` replaces the stock level outright; it is not added to
        or subtracted from the current value, and existing orders are not
        reconciled against it.
        """
        grocery = self._grocery_repo.update(
            grocery_id,
            name=validate_name(name) if name is not None else None,
            price=Money.of(price) if price is not None else None,
            inventory=validate_inventory(inventory) if inventory is not None else None,
        )
        if grocery is None:
            raise EntityNotFoundError("Grocery item not found")
        return GroceryDTO.from_domain(grocery)
