"""
SQLite-backed user store.

The store owns a single ``sqlite3`` connection that is opened once at
application startup and shared by every request until shutdown.  The
schema is a single ``users`` table created with ``IF NOT EXISTS``, so
opening the same file repeatedly never fails or duplicates it.

``AUTOINCREMENT`` is used for the primary key: SQLite then tracks the
highest id ever issued in ``sqlite_sequence`` and never hands out an id
twice, even if rows are removed by hand.

All ``sqlite3`` errors are re-raised as ``StoreError`` so the API layer
can map them to a generic 500 response.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Optional

from fastapi import Request

from .exceptions import StoreError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);
"""

# starter_api/app/core/db.py -> project root (the directory holding starter_api/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def resolve_database_path(db_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and the special ``:memory:`` name are used as is;
    relative paths are resolved against the project root.
    """
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    return str((PROJECT_ROOT / db_url).resolve())


class UserStore:
    """Persistence for user records in a single SQLite table."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Open the connection and ensure the schema exists.

        Calling ``open`` on an already open store does nothing.
        """
        if self._conn is not None:
            return
        try:
            if self.path != ":memory:":
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            # Requests may be served from worker threads (TestClient,
            # sync dependencies), so the connection must not be pinned
            # to the thread that created it.
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.executescript(SCHEMA)
            conn.commit()
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"cannot open user store at {self.path}: {exc}") from exc
        self._conn = conn
        logger.info("Opened user store at %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.close()
        finally:
            self._conn = None
        logger.info("Closed user store at %s", self.path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("user store is not open")
        return self._conn

    def insert(self, name: Optional[str]) -> int:
        """Insert one user and return the id assigned by SQLite."""
        conn = self._connection()
        try:
            cursor = conn.execute("INSERT INTO users (name) VALUES (?)", (name,))
            conn.commit()
        except sqlite3.Error as exc:
            try:
                conn.rollback()
            except sqlite3.Error:
                logger.exception("Rollback after failed insert also failed")
            raise StoreError(f"insert failed: {exc}") from exc
        return cursor.lastrowid

    def list(self) -> List[sqlite3.Row]:
        """Return all users in the table's natural order."""
        conn = self._connection()
        try:
            return conn.execute("SELECT id, name FROM users").fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"select failed: {exc}") from exc


def get_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store opened at startup."""
    return request.app.state.store
