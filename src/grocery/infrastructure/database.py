"""SQLite store handle with explicit open/close.

The process opens one ``Database`` before serving and closes it on
shutdown.  Repositories receive the handle; they never reach for a
global.  Each unit of work gets its own short-lived connection, so
threads serving unrelated requests share no Python-level lock and
SQLite's own locking serializes writers.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from grocery.domain.exceptions import PersistenceError, TransientStoreError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS groceries (
    id        TEXT PRIMARY KEY,
    name      TEXT NOT NULL,
    price     TEXT NOT NULL,
    inventory INTEGER NOT NULL CHECK (inventory >= 0)
);

CREATE TABLE IF NOT EXISTS orders (
    id         TEXT PRIMARY KEY,
    user_id    TEXT NOT NULL,
    created_at TEXT NOT NULL
);

-- grocery_id is a plain reference: deleting a grocery never touches orders.
CREATE TABLE IF NOT EXISTS order_lines (
    order_id   TEXT NOT NULL REFERENCES orders (id),
    position   INTEGER NOT NULL,
    grocery_id TEXT NOT NULL,
    quantity   INTEGER NOT NULL CHECK (quantity > 0),
    PRIMARY KEY (order_id, position)
);

CREATE INDEX IF NOT EXISTS idx_orders_user ON orders (user_id, created_at);
"""


class Database:

    def __init__(self, path: str, timeout: float = 5.0) -> None:
        self._path = path
        self._timeout = timeout
        self._is_open = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> None:
        """Verify the store is reachable and apply the schema.

        Raises PersistenceError if it is not.
        """
        try:
            Path(self._path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Store unreachable at {self._path}: {exc}") from exc
        try:
            conn = self._connect()
            try:
                conn.execute("PRAGMA journal_mode=WAL;")
                conn.executescript(SCHEMA)
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Store unreachable at {self._path}: {exc}") from exc
        self._is_open = True
        logger.info("Store opened at %s", self._path)

    def close(self) -> None:
        if not self._is_open:
            return
        self._is_open = False
        try:
            conn = self._connect()
            try:
                conn.execute("PRAGMA wal_checkpoint(TRUNCATE);")
            finally:
                conn.close()
        except sqlite3.Error:
            logger.warning("WAL checkpoint on close failed for %s", self._path, exc_info=True)
        logger.info("Store closed at %s", self._path)

    @contextmanager
    def transaction(self, write: bool = False) -> Iterator[sqlite3.Connection]:
        """Yield a connection; commit on success, roll back on error.

        Write transactions take the write lock up front (BEGIN IMMEDIATE)
        so they wait on the busy timeout instead of failing mid-way.

        ``sqlite3.OperationalError`` (locked/busy database, I/O trouble)
        becomes TransientStoreError; any other sqlite error becomes
        PersistenceError.
        """
        if not self._is_open:
            raise PersistenceError("Store is not open")
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise TransientStoreError(f"Cannot connect to store: {exc}") from exc
        try:
            with conn:
                if write:
                    conn.execute("BEGIN IMMEDIATE")
                yield conn
        except sqlite3.OperationalError as exc:
            raise TransientStoreError(str(exc)) from exc
        except sqlite3.Error as exc:
            raise PersistenceError(str(exc)) from exc
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path, timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        return conn
