"""Queries that check what an SQLite database contains."""

from __future__ import annotations

from typing import Any, NamedTuple

from .columns import SQLITE_MASTER


class Statement(NamedTuple):
    """An SQL statement with its bound parameters."""

    sql: str
    params: tuple[Any, ...]


def query_tables() -> Statement:
    """A query listing every user table, in a column named ``table_name``."""
    return Statement(
        f'SELECT "name" AS "table_name" FROM "{SQLITE_MASTER}" '
        'WHERE "type" = ? AND "name" <> ?',
        ("table", "sqlite_sequence"),
    )


def has_column(table: str, column: str) -> Statement:
    """A query whose single value is true when ``table`` has ``column``."""
    return Statement(
        'SELECT COUNT(*) > 0 AS "has_column" FROM pragma_table_info(?) '
        'WHERE "name" = ?',
        (table, column),
    )


def has_index(table: str, index: str) -> Statement:
    """A query whose single value is true when ``table`` has an index ``index``."""
    return Statement(
        f'SELECT COUNT(*) > 0 AS "has_index" FROM "{SQLITE_MASTER}" '
        'WHERE "type" = ? AND "tbl_name" = ? AND "name" = ?',
        ("index", table, index),
    )