import click
import uvicorn

from grocery.domain.exceptions import DomainException
from grocery.infrastructure.bootstrap import open_database, retry_policy
from grocery.infrastructure.cli.booking_commands import booking_create, booking_list, booking_show
from grocery.infrastructure.cli.grocery_commands import (
    item_add,
    item_list,
    item_remove,
    item_update,
)
from grocery.infrastructure.config import load_settings
from grocery.infrastructure.logging_setup import configure_logging
from grocery.infrastructure.web.app import create_app


@click.group()
def cli() -> None:
    """Grocery Booking Service"""


@cli.group()
def item() -> None:
    """Manage catalog items."""


@cli.group()
def booking() -> None:
    """Place and inspect bookings."""


@cli.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: $HOST).")
@click.option("--port", default=None, type=int, help="Port to listen on (default: $PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Open the store and serve the HTTP API."""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)

    try:
        database = open_database(settings)
    except DomainException as exc:
        raise click.ClickException(f"Cannot start: {exc}")

    app = create_app(database, retry_policy(settings), settings.cors_origins)
    try:
        uvicorn.run(
            app,
            host=host or settings.host,
            port=port or settings.port,
            log_level=settings.log_level.lower(),
        )
    finally:
        database.close()


# Register subcommands
item.add_command(item_add)
item.add_command(item_list)
item.add_command(item_update)
item.add_command(item_remove)
booking.add_command(booking_create)
booking.add_command(booking_show)
booking.add_command(booking_list)
