"""Store access shared by the CLI commands."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click

from grocery.domain.exceptions import DomainException
from grocery.infrastructure.bootstrap import open_database
from grocery.infrastructure.config import load_settings
from grocery.infrastructure.database import Database


@contextmanager
def store() -> Iterator[Database]:
    """Open the configured store for one command and close it afterwards.

    Domain errors raised inside the block become ClickExceptions (exit 1).
    """
    try:
        database = open_database(load_settings())
    except DomainException as exc:
        raise click.ClickException(str(exc))
    try:
        yield database
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        database.close()
