"""Application service: Remove Grocery use case.

Orders reference groceries by id only, so removing an item leaves
historical orders untouched.
"""

from __future__ import annotations

from grocery.domain.exceptions import EntityNotFoundError
from grocery.domain.repository.grocery_repository import GroceryRepository


class RemoveGroceryHandler:

    def __init__(self, grocery_repo: GroceryRepository) -> None:
        self._grocery_repo = grocery_repo

    def handle(self, grocery_id: str) -> None:
        if not self._grocery_repo.delete(grocery_id):
            raise EntityNotFoundError("Grocery item not found")
