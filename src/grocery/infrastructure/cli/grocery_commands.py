"""CLI commands for catalog administration."""

from __future__ import annotations

import click

from grocery.application.add_grocery import AddGroceryHandler
from grocery.application.list_groceries import ListGroceriesHandler
from grocery.application.remove_grocery import RemoveGroceryHandler
from grocery.application.update_grocery import UpdateGroceryHandler
from grocery.infrastructure.bootstrap import grocery_repository
from grocery.infrastructure.cli.context import store


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Unit price, e.g. '2.49'.")
@click.option("--inventory", required=True, type=int, help="Units in stock.")
def item_add(name: str, price: str, inventory: int) -> None:
    """Add an item to the catalog."""
    with store() as database:
        dto = AddGroceryHandler(grocery_repository(database)).handle(
            name=name, price=price, inventory=inventory
        )
    click.echo(f"Item {dto.id} added: {dto.name} (${dto.price:.2f}, {dto.inventory} in stock)")


@click.command("list")
@click.option("--available", is_flag=True, help="Only items with stock left.")
def item_list(available: bool) -> None:
    """List catalog items."""
    with store() as database:
        items = ListGroceriesHandler(grocery_repository(database)).handle(
            available_only=available
        )

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<26} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 67)
    for dto in items:
        click.echo(f"{dto.id:<26} {dto.name:<20} {'$' + format(dto.price, '.2f'):>10} {dto.inventory:>8}")


@click.command("update")
@click.argument("item_id")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--inventory", default=None, type=int, help="New stock level (replaces the old one).")
def item_update(item_id: str, name: str | None, price: str | None, inventory: int | None) -> None:
    """Update an item's name, price or stock level."""
    with store() as database:
        dto = UpdateGroceryHandler(grocery_repository(database)).handle(
            item_id, name=name, price=price, inventory=inventory
        )
    click.echo(f"Item {dto.id} updated: {dto.name} (${dto.price:.2f}, {dto.inventory} in stock)")


@click.command("remove")
@click.argument("item_id")
def item_remove(item_id: str) -> None:
    """Remove an item from the catalog."""
    with store() as database:
        RemoveGroceryHandler(grocery_repository(database)).handle(item_id)
    click.echo(f"Item {item_id} removed")
