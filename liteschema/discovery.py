"""Discovers the whole schema of an SQLite database."""

from __future__ import annotations

import os
import sqlite3

from .columns import IndexInfo
from .executor import Executor
from .probe import query_tables
from .schema import Schema
from .table import TableDef


class SchemaDiscovery:
    """Reads tables, columns, keys and indexes from an SQLite database."""

    def __init__(self, connection: sqlite3.Connection | str | os.PathLike) -> None:
        self.executor = Executor(connection)

    def _table_names(self) -> list[str]:
        return [row[0] for row in self.executor.fetch_all(*query_tables())]

    def discover(self) -> Schema:
        """Discover every table of the database and the indexes made on them."""
        tables = []
        for name in self._table_names():
            table = TableDef(name=name)
            table.pk_is_autoincrement(self.executor)
            table.get_foreign_keys(self.executor)
            table.get_column_info(self.executor)
            table.get_constraints(self.executor)
            tables.append(table)
        return Schema(tables=tables, indexes=self.discover_indexes())

    def discover_indexes(self) -> list[IndexInfo]:
        """Discover the indexes made by CREATE INDEX on every table."""
        indexes: list[IndexInfo] = []
        for name in self._table_names():
            table = TableDef(name=name)
            table.get_indexes(self.executor)
            indexes.extend(table.indexes)
        return indexes