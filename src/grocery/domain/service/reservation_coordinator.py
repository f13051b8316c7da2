"""Domain service: Reservation Coordinator.

Books a multi-item order against the StockLedger with all-or-nothing
effect.  The ledger only guarantees atomicity for a single grocery, so
atomicity across the whole order comes from compensation (a saga):

  1. Aggregate duplicate grocery ids into one quantity each.
  2. Reserve each distinct id in ascending id order.  Ledgers that lock
     per item can therefore never deadlock against another booking.
  3. On the first failure, release everything reserved so far in reverse
     order and report the offending grocery id.
  4. Persist the Order.  If that fails, release everything as well.

Releases that still fail after retries leave stock decremented with no
order to show for it.  They are logged on the ``grocery.alarm`` logger
for manual reconciliation and never reported to the caller.
"""

from __future__ import annotations

import logging
from functools import partial

from grocery.domain.exceptions import GroceryNotFoundError, InsufficientStockError
from grocery.domain.model.order import Order, OrderLine
from grocery.domain.repository.order_repository import OrderRepository
from grocery.domain.repository.stock_ledger import ReservationOutcome, StockLedger
from grocery.domain.service.retry import RetryPolicy

logger = logging.getLogger(__name__)
alarm_logger = logging.getLogger("grocery.alarm")


class ReservationCoordinator:

    def __init__(
        self,
        ledger: StockLedger,
        order_repo: OrderRepository,
        retry: RetryPolicy | None = None,
    ) -> None:
        self._ledger = ledger
        self._order_repo = order_repo
        self._retry = retry or RetryPolicy()

    def book(self, user_id: str, lines: list[OrderLine]) -> Order:
        """Reserve stock for every line and record the order.

        Raises ValidationError, GroceryNotFoundError, InsufficientStockError
        or PersistenceError.  Whatever is raised, no reservation made by
        this call survives it.
        """
        order = Order.create(user_id=user_id, lines=lines)
        totals = order.aggregated_quantities()

        held: list[tuple[str, int]] = []
        try:
            for grocery_id in sorted(totals):
                quantity = totals[grocery_id]
                self._reserve(grocery_id, quantity)
                held.append((grocery_id, quantity))

            stored = self._retry.call(
                partial(self._order_repo.create, order), "persist order"
            )
        except BaseException:
            # Also covers cancellation (KeyboardInterrupt, SystemExit).
            self._rollback(order.user_id, held)
            raise

        logger.info(
            "Order %s booked for user %s (%d lines, %d items)",
            stored.id, stored.user_id, len(stored.lines), len(totals),
        )
        return stored

    # --- Internal helpers -----------------------------------------------------

    def _reserve(self, grocery_id: str, quantity: int) -> None:
        outcome = self._retry.call(
            partial(self._ledger.try_reserve, grocery_id, quantity),
            f"reserve {quantity} of {grocery_id}",
        )
        if outcome is ReservationOutcome.NOT_FOUND:
            logger.info("Booking rejected: unknown grocery %s", grocery_id)
            raise GroceryNotFoundError(grocery_id)
        if outcome is ReservationOutcome.INSUFFICIENT_STOCK:
            logger.info(
                "Booking rejected: insufficient stock for %s (requested %d)",
                grocery_id, quantity,
            )
            raise InsufficientStockError(grocery_id, quantity)

    def _rollback(self, user_id: str, held: list[tuple[str, int]]) -> None:
        """Release reservations in reverse order of acquisition.

        Every release is attempted even if an earlier one fails.
        """
        for grocery_id, quantity in reversed(held):
            try:
                self._retry.call(
                    partial(self._ledger.release, grocery_id, quantity),
                    f"release {quantity} of {grocery_id}",
                )
            except Exception:
                alarm_logger.critical(
                    "INVENTORY INCONSISTENCY: could not release %d of %s "
                    "for user %s; manual reconciliation required",
                    quantity, grocery_id, user_id,
                    exc_info=True,
                )
