"""Application service: Show Order / List User Orders use cases (queries)."""

from __future__ import annotations

from grocery.application.dto import OrderDTO
from grocery.domain.exceptions import EntityNotFoundError, ValidationError
from grocery.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return OrderDTO.from_domain(order)


class ListUserOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        if not user_id or not user_id.strip():
            raise ValidationError("User id is required")
        return [OrderDTO.from_domain(o) for o in self._order_repo.list_by_user(user_id.strip())]
