"""HTTP routes: admin catalog CRUD, availability listing and booking."""

from __future__ import annotations

from fastapi import APIRouter, Request

from grocery.application.add_grocery import AddGroceryHandler
from grocery.application.book_order import BookOrderHandler
from grocery.application.dto import BookingItemSpec
from grocery.application.list_groceries import ListGroceriesHandler
from grocery.application.remove_grocery import RemoveGroceryHandler
from grocery.application.show_order import ListUserOrdersHandler, ShowOrderHandler
from grocery.application.update_grocery import UpdateGroceryHandler
from grocery.infrastructure.bootstrap import (
    grocery_repository,
    order_repository,
    stock_ledger,
)
from grocery.infrastructure.database import Database
from grocery.infrastructure.web.schemas import (
    BookingRequest,
    GroceryCreateRequest,
    GroceryResponse,
    GroceryUpdateRequest,
    MessageResponse,
    OrderResponse,
)

router = APIRouter()


def _database(request: Request) -> Database:
    return request.app.state.database


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


# --- Admin ------------------------------------------------------------------


@router.post("/api/admin/grocery", status_code=201, response_model=GroceryResponse)
def add_grocery(payload: GroceryCreateRequest, request: Request) -> GroceryResponse:
    handler = AddGroceryHandler(grocery_repository(_database(request)))
    dto = handler.handle(name=payload.name, price=payload.price, inventory=payload.inventory)
    return GroceryResponse.from_dto(dto)


@router.get("/api/admin/grocery", response_model=list[GroceryResponse])
def list_all_groceries(request: Request) -> list[GroceryResponse]:
    handler = ListGroceriesHandler(grocery_repository(_database(request)))
    return [GroceryResponse.from_dto(dto) for dto in handler.handle()]


@router.put("/api/admin/grocery/{grocery_id}", response_model=GroceryResponse)
def update_grocery(
    grocery_id: str, payload: GroceryUpdateRequest, request: Request
) -> GroceryResponse:
    handler = UpdateGroceryHandler(grocery_repository(_database(request)))
    dto = handler.handle(
        grocery_id,
        name=payload.name,
        price=payload.price,
        inventory=payload.inventory,
    )
    return GroceryResponse.from_dto(dto)


@router.delete("/api/admin/grocery/{grocery_id}", response_model=MessageResponse)
def remove_grocery(grocery_id: str, request: Request) -> MessageResponse:
    RemoveGroceryHandler(grocery_repository(_database(request))).handle(grocery_id)
    return MessageResponse(message="Grocery item removed successfully")


# --- User -------------------------------------------------------------------


@router.get("/api/grocery", response_model=list[GroceryResponse])
def list_available_groceries(request: Request) -> list[GroceryResponse]:
    handler = ListGroceriesHandler(grocery_repository(_database(request)))
    return [GroceryResponse.from_dto(dto) for dto in handler.handle(available_only=True)]


@router.post("/api/booking", status_code=201, response_model=OrderResponse)
def book(payload: BookingRequest, request: Request) -> OrderResponse:
    database = _database(request)
    handler = BookOrderHandler(
        ledger=stock_ledger(database),
        order_repo=order_repository(database),
        retry=request.app.state.retry,
    )
    dto = handler.handle(
        user_id=payload.userId,
        item_specs=[
            BookingItemSpec(grocery_id=item.groceryId, quantity=item.quantity)
            for item in payload.items
        ],
    )
    return OrderResponse.from_dto(dto)


@router.get("/api/booking", response_model=list[OrderResponse])
def list_user_orders(userId: str, request: Request) -> list[OrderResponse]:
    handler = ListUserOrdersHandler(order_repository(_database(request)))
    return [OrderResponse.from_dto(dto) for dto in handler.handle(userId)]


@router.get("/api/booking/{order_id}", response_model=OrderResponse)
def show_order(order_id: str, request: Request) -> OrderResponse:
    dto = ShowOrderHandler(order_repository(_database(request))).handle(order_id)
    return OrderResponse.from_dto(dto)
