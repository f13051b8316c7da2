"""Application service: Book Order use case.

Turns raw (grocery id, quantity) pairs into domain OrderLines and hands
them to the ReservationCoordinator, which owns the all-or-nothing stock
reservation and the order write.
"""

from __future__ import annotations

from grocery.application.dto import BookingItemSpec, OrderDTO
from grocery.domain.model.order import OrderLine
from grocery.domain.model.value_objects import Quantity
from grocery.domain.repository.order_repository import OrderRepository
from grocery.domain.repository.stock_ledger import StockLedger
from grocery.domain.service.reservation_coordinator import ReservationCoordinator
from grocery.domain.service.retry import RetryPolicy


class BookOrderHandler:

    def __init__(
        self,
        ledger: StockLedger,
        order_repo: OrderRepository,
        retry: RetryPolicy | None = None,
    ) -> None:
        self._ledger = ledger
        self._order_repo = order_repo
        self._retry = retry

    def handle(self, user_id: str, item_specs: list[BookingItemSpec]) -> OrderDTO:
        lines = [
            OrderLine(grocery_id=spec.grocery_id, quantity=Quantity(spec.quantity))
            for spec in item_specs
        ]
        coordinator = ReservationCoordinator(self._ledger, self._order_repo, self._retry)
        order = coordinator.book(user_id=user_id, lines=lines)
        return OrderDTO.from_domain(order)
