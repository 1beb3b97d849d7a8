"""
SQLite storage backend.

Rows of the ``guitars`` table are ordered by ``position``; a rewrite
replaces every row inside one transaction so a failed write leaves
the previous list in place.
"""
import logging
import sqlite3
from typing import Iterable, List, Optional

from ..core.db import get_connection, init_db
from ..core.exceptions import StoreUnavailable
from .base import Store

logger = logging.getLogger(__name__)


class SQLiteStore(Store):
    """Keeps the names in the ``guitars`` table."""

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url
        self._initialised = False

    def _connect(self) -> sqlite3.Connection:
        if not self._initialised:
            init_db(self.database_url)
            self._initialised = True
        return get_connection(self.database_url)

    def read_all(self) -> List[str]:
        try:
            conn = self._connect()
            try:
                rows = conn.execute("SELECT name FROM guitars ORDER BY position ASC").fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.error("Could not read guitars from %s: %s", self.database_url, exc)
            raise StoreUnavailable("Could not read guitars database", detail=str(exc)) from exc
        return [row["name"] for row in rows if row["name"].strip()]

    def write_all(self, names: Iterable[str]) -> None:
        rows = [(position, name) for position, name in enumerate(names)]
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.execute("DELETE FROM guitars")
                    conn.executemany(
                        "INSERT INTO guitars (position, name) VALUES (?, ?)",
                        rows,
                    )
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.error("Could not write guitars to %s: %s", self.database_url, exc)
            raise StoreUnavailable("Could not write guitars database", detail=str(exc)) from exc
