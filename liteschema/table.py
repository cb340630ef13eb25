"""Table definitions discovered from an SQLite database."""

from __future__ import annotations

from dataclasses import dataclass, field

from .columns import (
    SQLITE_MASTER,
    ColumnInfo,
    ForeignKeysInfo,
    IndexedColumns,
    IndexInfo,
    column_from_row,
    foreign_key_from_row,
    indexed_columns_from_rows,
    partial_index_from_row,
)
from .executor import Executor


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _pragma(name: str, argument: str) -> str:
    escaped = argument.replace("'", "''")
    return f"PRAGMA {name}('{escaped}')"


def _column_list(columns: list[str]) -> str:
    return "(" + ", ".join(_quote(column) for column in columns) + ")"


def _inline_index(index: IndexInfo) -> str:
    """Render an index as a constraint inside CREATE TABLE."""
    words = []
    if index.origin == "c":
        words.append(f"CONSTRAINT {_quote(index.index_name)}")
    if index.unique:
        words.append("UNIQUE")
    words.append(_column_list(index.columns))
    return " ".join(words)


@dataclass
class TableDef:
    """A table with its columns, foreign keys, indexes and constraints."""

    name: str = ""
    foreign_keys: list[ForeignKeysInfo] = field(default_factory=list)
    indexes: list[IndexInfo] = field(default_factory=list)
    constraints: list[IndexInfo] = field(default_factory=list)
    columns: list[ColumnInfo] = field(default_factory=list)
    auto_increment: bool = False

    def pk_is_autoincrement(self, executor: Executor) -> TableDef:
        """Mark the table as autoincrementing if its SQL says AUTOINCREMENT."""
        sql = (
            f'SELECT 1 FROM "{SQLITE_MASTER}" '
            'WHERE "type" = ? AND "name" = ? AND "sql" LIKE ?'
        )
        if executor.fetch_all(sql, ("table", self.name, "%AUTOINCREMENT%")):
            self.auto_increment = True
        return self

    def get_constraints(self, executor: Executor) -> None:
        """Collect the UNIQUE constraints, which SQLite implements as indexes."""
        self.constraints.extend(self._collect_indexes(executor, "u"))

    def get_indexes(self, executor: Executor) -> None:
        """Collect the indexes made by CREATE INDEX."""
        self.indexes.extend(self._collect_indexes(executor, "c"))

    def get_foreign_keys(self, executor: Executor) -> TableDef:
        """Collect the foreign keys, joining the columns of multi-column keys."""
        rows = executor.fetch_all_raw(_pragma("foreign_key_list", self.name))
        last_id = None
        for foreign_key in map(foreign_key_from_row, rows):
            if foreign_key.id == last_id:
                previous = self.foreign_keys[-1]
                previous.from_columns.extend(foreign_key.from_columns)
                previous.to_columns.extend(foreign_key.to_columns)
            else:
                self.foreign_keys.append(foreign_key)
            last_id = foreign_key.id
        return self

    def get_column_info(self, executor: Executor) -> TableDef:
        """Collect every column of the table."""
        rows = executor.fetch_all_raw(_pragma("table_info", self.name))
        self.columns.extend(column_from_row(row) for row in rows)
        return self

    def _collect_indexes(self, executor: Executor, origin: str) -> list[IndexInfo]:
        rows = executor.fetch_all_raw(_pragma("index_list", self.name))
        partials = [
            partial
            for partial in map(partial_index_from_row, rows)
            if partial.origin == origin
        ]
        found = []
        for partial in partials:
            indexed = self._single_index_info(executor, partial.name)
            found.append(
                IndexInfo(
                    index_type=indexed.index_type,
                    index_name=indexed.name,
                    table_name=indexed.table,
                    unique=partial.unique,
                    origin=partial.origin,
                    partial=partial.partial,
                    columns=indexed.indexed_columns,
                )
            )
        return found

    def _single_index_info(self, executor: Executor, index_name: str) -> IndexedColumns:
        master_row = executor.fetch_one(
            f'SELECT * FROM "{SQLITE_MASTER}" WHERE "name" = ?', (index_name,)
        )
        column_rows = executor.fetch_all_raw(_pragma("index_info", index_name))
        return indexed_columns_from_rows(master_row, column_rows)

    def write(self) -> str:
        """Render a CREATE TABLE statement for this table."""
        definitions: list[str] = []
        primary_keys: list[str] = []

        for column in self.columns:
            parts = [_quote(column.name), column.column_type.to_sql()]
            if column.not_null:
                parts.append("NOT NULL")
            if self.auto_increment and column.primary_key:
                parts.append("PRIMARY KEY AUTOINCREMENT")
            elif column.primary_key:
                primary_keys.append(column.name)
            default = column.default_value.to_sql()
            if default is not None:
                parts.append(f"DEFAULT {default}")
            definitions.append(" ".join(part for part in parts if part))

        definitions.extend(_inline_index(index) for index in self.constraints)

        if primary_keys:
            definitions.append(f"PRIMARY KEY {_column_list(primary_keys)}")

        for foreign_key in self.foreign_keys:
            definitions.append(
                f"FOREIGN KEY {_column_list(foreign_key.from_columns)} "
                f"REFERENCES {_quote(foreign_key.table)} "
                f"{_column_list(foreign_key.to_columns)} "
                f"ON DELETE {foreign_key.on_delete.to_sql()} "
                f"ON UPDATE {foreign_key.on_update.to_sql()}"
            )

        return f"CREATE TABLE {_quote(self.name)} ( {', '.join(definitions)} )"