"""Runs discovery queries against an SQLite connection."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Sequence
from typing import Any

from .errors import DatabaseError

_log = logging.getLogger(__name__)

_ROW_NOT_FOUND = "no rows returned by a query that expected to return at least one row"


class Executor:
    """Executes queries and turns driver failures into DatabaseError."""

    def __init__(self, connection: sqlite3.Connection | str | os.PathLike) -> None:
        if isinstance(connection, (str, os.PathLike)):
            connection = sqlite3.connect(connection)
        self.connection = connection

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[Sequence[Any]]:
        """Run a parameterised query and return every row."""
        _log.debug("%s, %r", sql, params)
        try:
            return self.connection.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Sequence[Any]:
        """Run a parameterised query and return its first row."""
        _log.debug("%s, %r", sql, params)
        try:
            row = self.connection.execute(sql, tuple(params)).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc
        if row is None:
            raise DatabaseError(_ROW_NOT_FOUND)
        return row

    def fetch_all_raw(self, sql: str) -> list[Sequence[Any]]:
        """Run a query without parameters and return every row."""
        _log.debug("%s", sql)
        try:
            return self.connection.execute(sql).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc