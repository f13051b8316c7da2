"""Application service: List Groceries use case (query)."""

from __future__ import annotations

from grocery.application.dto import GroceryDTO
from grocery.domain.repository.grocery_repository import GroceryRepository


class ListGroceriesHandler:

    def __init__(self, grocery_repo: GroceryRepository) -> None:
        self._grocery_repo = grocery_repo

    def handle(self, available_only: bool = False) -> list[GroceryDTO]:
        if available_only:
            groceries = self._grocery_repo.list_available()
        else:
            groceries = self._grocery_repo.list_all()
        return [GroceryDTO.from_domain(g) for g in groceries]
