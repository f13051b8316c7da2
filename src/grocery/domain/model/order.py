"""Order aggregate — the record of a successful booking.

An Order is only ever created after every one of its lines has been
reserved against the StockLedger.  Once stored it is never changed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.value_objects import MAX_STORED_INT, Quantity

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
GROCERY_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def validate_grocery_id(grocery_id: str) -> str:
    if not isinstance(grocery_id, str) or not GROCERY_ID_PATTERN.match(grocery_id):
        raise ValidationError(f"Malformed grocery id: {grocery_id!r}")
    return grocery_id


@dataclass(frozen=True)
class OrderLine:
    """One requested (grocery, quantity) pair, exactly as submitted."""

    grocery_id: str
    quantity: Quantity


@dataclass(frozen=True)
class Order:
    """Aggregate root for bookings.

    Use ``Order.create()`` for new orders — it enforces the request rules.
    The plain constructor is used by repositories to reconstitute stored
    orders without re-validating.
    """

    id: str | None
    user_id: str
    lines: tuple[OrderLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: str, lines: list[OrderLine]) -> Order:
        """Build an unsaved order, enforcing all request invariants."""
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("User id is required")

        if not lines:
            raise ValidationError("Order must contain at least one item")

        for line in lines:
            validate_grocery_id(line.grocery_id)

        order = Order(id=None, user_id=user_id.strip(), lines=tuple(lines))
        for grocery_id, total in order.aggregated_quantities().items():
            if total > MAX_STORED_INT:
                raise ValidationError(
                    f"Total quantity for {grocery_id} cannot exceed {MAX_STORED_INT}"
                )
        return order

    def aggregated_quantities(self) -> dict[str, int]:
        """Total requested quantity per distinct grocery id.

        A request may name the same grocery twice; stock must be checked
        against the combined amount, never per line.
        """
        totals: dict[str, int] = {}
        for line in self.lines:
            totals[line.grocery_id] = totals.get(line.grocery_id, 0) + line.quantity.value
        return totals
