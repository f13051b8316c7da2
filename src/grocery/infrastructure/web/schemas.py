"""Request and response bodies for the HTTP API.

Requests are decoded strictly: unknown fields and wrong JSON types are
rejected before anything reaches the application layer.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from grocery.application.dto import GroceryDTO, OrderDTO


class _Request(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GroceryCreateRequest(_Request):
    name: StrictStr
    price: Decimal
    inventory: StrictInt


class GroceryUpdateRequest(_Request):
    name: StrictStr | None = None
    price: Decimal | None = None
    inventory: StrictInt | None = None


class BookingLineRequest(_Request):
    groceryId: StrictStr
    quantity: StrictInt


class BookingRequest(_Request):
    userId: StrictStr
    items: list[BookingLineRequest]


class GroceryResponse(BaseModel):
    id: str
    name: str
    price: float
    inventory: int

    @staticmethod
    def from_dto(dto: GroceryDTO) -> GroceryResponse:
        return GroceryResponse(
            id=dto.id, name=dto.name, price=float(dto.price), inventory=dto.inventory
        )


class OrderLineResponse(BaseModel):
    groceryId: str
    quantity: int


class OrderResponse(BaseModel):
    id: str
    userId: str
    items: list[OrderLineResponse]
    createdAt: str

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderResponse:
        return OrderResponse(
            id=dto.id,
            userId=dto.user_id,
            items=[
                OrderLineResponse(groceryId=line.grocery_id, quantity=line.quantity)
                for line in dto.lines
            ],
            createdAt=dto.created_at.isoformat(),
        )


class MessageResponse(BaseModel):
    message: str
