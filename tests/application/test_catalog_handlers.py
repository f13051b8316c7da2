"""Tests for the catalog administration and order query use cases."""

from decimal import Decimal

import pytest

from grocery.application.add_grocery import AddGroceryHandler
from grocery.application.book_order import BookOrderHandler
from grocery.application.dto import BookingItemSpec
from grocery.application.list_groceries import ListGroceriesHandler
from grocery.application.remove_grocery import RemoveGroceryHandler
from grocery.application.show_order import ListUserOrdersHandler, ShowOrderHandler
from grocery.application.update_grocery import UpdateGroceryHandler
from grocery.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import (
    FakeGroceryRepository,
    FakeOrderRepository,
    FakeStockLedger,
    make_grocery,
    no_wait_retry,
)


class TestAddGrocery:

    def test_adds_item(self):
        repo = FakeGroceryRepository()
        dto = AddGroceryHandler(repo).handle(name=" Apple ", price="0.99", inventory=12)
        assert dto.name == "Apple"
        assert dto.price == Decimal("0.99")
        assert repo.get_by_id(dto.id).inventory == 12

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddGroceryHandler(FakeGroceryRepository()).handle(name=" ", price="1", inventory=1)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddGroceryHandler(FakeGroceryRepository()).handle(name="x", price="-1", inventory=1)

    def test_negative_inventory_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddGroceryHandler(FakeGroceryRepository()).handle(name="x", price="1", inventory=-1)

    def test_inventory_beyond_store_range_rejected(self):
        with pytest.raises(ValidationError, match="Inventory cannot exceed"):
            AddGroceryHandler(FakeGroceryRepository()).handle(
                name="x", price="1", inventory=10**20
            )


class TestListGroceries:

    def test_lists_all_or_only_available(self):
        repo = FakeGroceryRepository([make_grocery("a", 3), make_grocery("b", 0)])
        handler = ListGroceriesHandler(repo)
        assert [g.id for g in handler.handle()] == ["a", "b"]
        assert [g.id for g in handler.handle(available_only=True)] == ["a"]


class TestUpdateGrocery:

    def test_partial_update_keeps_other_fields(self):
        repo = FakeGroceryRepository([make_grocery("a", 3, price="2.00")])
        dto = UpdateGroceryHandler(repo).handle("a", price="2.50")
        assert dto.price == Decimal("2.50")
        assert dto.inventory == 3
        assert dto.name == "Item a"

    def test_inventory_is_a_reset_not_a_delta(self):
        repo = FakeGroceryRepository([make_grocery("a", 3)])
        assert UpdateGroceryHandler(repo).handle("a", inventory=10).inventory == 10

    def test_unknown_id(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateGroceryHandler(FakeGroceryRepository()).handle("nope", name="x")


class TestRemoveGrocery:

    def test_removes_item(self):
        repo = FakeGroceryRepository([make_grocery("a", 3)])
        RemoveGroceryHandler(repo).handle("a")
        assert repo.get_by_id("a") is None

    def test_unknown_id(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            RemoveGroceryHandler(FakeGroceryRepository()).handle("nope")

    def test_historical_orders_survive_removal(self):
        groceries = FakeGroceryRepository([make_grocery("a", 3)])
        orders = FakeOrderRepository()
        dto = BookOrderHandler(FakeStockLedger(groceries), orders, no_wait_retry()).handle(
            "u1", [BookingItemSpec("a", 2)]
        )
        RemoveGroceryHandler(groceries).handle("a")
        shown = ShowOrderHandler(orders).handle(dto.id)
        assert [(l.grocery_id, l.quantity) for l in shown.lines] == [("a", 2)]


class TestOrderQueries:

    def test_show_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="Order ord_404 not found"):
            ShowOrderHandler(FakeOrderRepository()).handle("ord_404")

    def test_list_by_user(self):
        groceries = FakeGroceryRepository([make_grocery("a", 10)])
        orders = FakeOrderRepository()
        booker = BookOrderHandler(FakeStockLedger(groceries), orders, no_wait_retry())
        booker.handle("u1", [BookingItemSpec("a", 1)])
        booker.handle("u2", [BookingItemSpec("a", 1)])
        booker.handle("u1", [BookingItemSpec("a", 2)])
        listed = ListUserOrdersHandler(orders).handle("u1")
        assert [o.lines[0].quantity for o in listed] == [1, 2]

    def test_list_requires_user(self):
        with pytest.raises(ValidationError, match="User id is required"):
            ListUserOrdersHandler(FakeOrderRepository()).handle("")
