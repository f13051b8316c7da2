"""CLI commands for bookings."""

from __future__ import annotations

import click

from grocery.application.book_order import BookOrderHandler
from grocery.application.dto import BookingItemSpec, OrderDTO
from grocery.application.show_order import ListUserOrdersHandler, ShowOrderHandler
from grocery.infrastructure.bootstrap import order_repository, retry_policy, stock_ledger
from grocery.infrastructure.cli.context import store
from grocery.infrastructure.config import load_settings


def _parse_items(raw: str) -> list[BookingItemSpec]:
    """Parse 'id1:3,id2:5' into a BookingItemSpec list."""
    specs: list[BookingItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemId:Quantity'."
            )
        grocery_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{grocery_id}'."
            )
        specs.append(BookingItemSpec(grocery_id=grocery_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Created: {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Item':<26} {'Qty':>5}")
    click.echo(f"  {'-'*32}")
    for line in dto.lines:
        click.echo(f"  {line.grocery_id:<26} {line.quantity:>5}")


@click.command("create")
@click.option("--user", required=True, help="User id placing the booking.")
@click.option("--items", required=True, help="Items as 'ItemId:Qty,ItemId:Qty'.")
def booking_create(user: str, items: str) -> None:
    """Book several items in one all-or-nothing order."""
    specs = _parse_items(items)
    with store() as database:
        handler = BookOrderHandler(
            ledger=stock_ledger(database),
            order_repo=order_repository(database),
            retry=retry_policy(load_settings()),
        )
        dto = handler.handle(user_id=user, item_specs=specs)
    _display_order(dto)


@click.command("show")
@click.argument("order_id")
def booking_show(order_id: str) -> None:
    """Show a stored order."""
    with store() as database:
        dto = ShowOrderHandler(order_repository(database)).handle(order_id)
    _display_order(dto)


@click.command("list")
@click.option("--user", required=True, help="User id.")
def booking_list(user: str) -> None:
    """List a user's orders, oldest first."""
    with store() as database:
        orders = ListUserOrdersHandler(order_repository(database)).handle(user)

    if not orders:
        click.echo(f"No orders for {user}.")
        return

    for dto in orders:
        total = sum(line.quantity for line in dto.lines)
        click.echo(f"{dto.id}  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}  {total} items")
