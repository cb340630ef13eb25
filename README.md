# liteschema

liteschema reads the structure of an SQLite database into plain Python dataclasses. It reads tables, columns, defaults, primary keys, foreign keys, UNIQUE constraints and explicitly created indexes. Each table and index can then be written back out as a `CREATE` statement.

liteschema needs only the standard library and works through `sqlite3`.

## Installation

```
pip install liteschema
```

## Discovering a schema

```python
import sqlite3

from liteschema.discovery import SchemaDiscovery

connection = sqlite3.connect("app.db")
schema = SchemaDiscovery(connection).discover()

for table in schema.tables:
    print(table.name, [column.name for column in table.columns])
    print(table.write())        # CREATE TABLE ...

for index in schema.indexes:
    print(index.write())        # CREATE INDEX ...
```

`SchemaDiscovery` accepts an open `sqlite3.Connection`. It also accepts a path, which it opens with `sqlite3.connect`.

`discover()` returns a `liteschema.schema.Schema` with two lists:

- `tables`: one `TableDef` for each entry of type `table` in `sqlite_master`. SQLite's internal `sqlite_sequence` table is left out.
- `indexes`: every index created with `CREATE INDEX` (origin `c`). `SchemaDiscovery.discover_indexes()` returns this list on its own.

Each `liteschema.table.TableDef` has these fields:

- `columns`: a list of `ColumnInfo` from `PRAGMA table_info`. Each column holds its `cid`, `name`, a parsed `column_type`, `not_null`, `primary_key` and a `default_value`.
- `foreign_keys`: a list of `ForeignKeysInfo` from `PRAGMA foreign_key_list`. The rows of a multi-column key are joined into one entry, with `from_columns` and `to_columns`. Each entry also has `on_update`, `on_delete` and `match_action`.
- `constraints`: the UNIQUE constraints, which SQLite implements as indexes of origin `u`. Each one is an `IndexInfo`.
- `auto_increment`: true when the table's SQL contains `AUTOINCREMENT`.

`Schema.merge_indexes_into_table()` appends each unique index in `schema.indexes` to the `constraints` of its table. It then returns the schema.

### Writing SQL back out

`TableDef.write()` returns a `CREATE TABLE` statement. Each column carries its type, `NOT NULL` and `DEFAULT` where they apply. A primary key column of an autoincrementing table gets `PRIMARY KEY AUTOINCREMENT` inline. Other primary key columns are gathered into a table-level `PRIMARY KEY (...)`. The statement ends with the UNIQUE constraints and the `FOREIGN KEY ... REFERENCES ... ON DELETE ... ON UPDATE ...` clauses.

`IndexInfo.write()` returns a `CREATE [UNIQUE] INDEX` statement. The index name is kept only for indexes created with `CREATE INDEX`. SQLite generates the names of all other indexes, so `write()` leaves those out.

## Column types and defaults

```python
from liteschema.types import parse_type

parse_type("varchar(255)")    # ColumnType(kind=TypeKind.STRING, length=255)
parse_type("decimal(10, 2)")  # ColumnType(kind=TypeKind.DECIMAL, precision=(10, 2))
parse_type("geometry")        # ColumnType(kind=TypeKind.CUSTOM, name="geometry")
```

`ColumnType.to_sql()` renders a type back into its declared form.

`liteschema.columns.parse_default` reads a `dflt_value` and returns a `DefaultType`. The value's kind is one of `INTEGER`, `FLOAT`, `STRING`, `NULL`, `UNSPECIFIED` or `CURRENT_TIMESTAMP`. `DefaultType.to_sql()` returns the text of a `DEFAULT` clause, or `None` when no clause should be written.

Foreign key actions parse to `ForeignKeyAction`, and an unknown action becomes `NO_ACTION`. MATCH clauses parse to `MatchAction`, and an unknown clause becomes `NONE`.

## Probe queries

`liteschema.probe` builds SQL and its parameters as a `Statement(sql, params)` named tuple. You run the statement on your own connection:

```python
from liteschema.probe import has_column, has_index, query_tables

sql, params = has_column("users", "email")
exists = bool(connection.execute(sql, params).fetchone()[0])

sql, params = has_index("users", "idx_users_email")
sql, params = query_tables()   # one row per table, column "table_name"
```

## Running queries directly

`liteschema.executor.Executor` wraps a connection and provides three methods: `fetch_all(sql, params)`, `fetch_one(sql, params)` and `fetch_all_raw(sql)`. Every query is logged at debug level on the `liteschema.executor` logger.

## Errors

All errors derive from `liteschema.errors.DiscoveryError`.

- `DatabaseError` wraps any `sqlite3.Error` raised while a query runs. `fetch_one` also raises it when the query returns no row. The original cause is kept in `.cause`.
- `ParseIntegerError`, `ParseFloatError` and `NoIndexesFoundError` are defined for callers that need them. Discovery itself does not raise them.

## What it does not do

- It has no command-line tool. It is used as a library only.
- It reads tables and indexes. It does not read views or triggers, and it does not keep the `WHERE` clause of partial indexes.
- It produces SQL text but never runs that SQL against a database.

## Running the tests

```
pip install -e ".[test]"
pytest
```