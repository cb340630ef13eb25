import sqlite3

import pytest

from liteschema.executor import Executor
from liteschema.probe import has_column, has_index, query_tables


@pytest.fixture
def connection():
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE books (id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT)")
    connection.execute("CREATE TABLE authors (id INTEGER, name TEXT)")
    connection.execute("CREATE INDEX idx_books_title ON books (title)")
    connection.execute("INSERT INTO books (title) VALUES ('x')")
    yield connection
    connection.close()


def test_query_tables_lists_user_tables(connection):
    rows = Executor(connection).fetch_all(*query_tables())
    assert sorted(row[0] for row in rows) == ["authors", "books"]


def test_query_tables_names_its_column(connection):
    cursor = connection.execute(*query_tables())
    assert cursor.description[0][0] == "table_name"


@pytest.mark.parametrize(
    ("table", "column", "expected"),
    [("books", "title", 1), ("books", "name", 0), ("authors", "name", 1), ("missing", "id", 0)],
)
def test_has_column(connection, table, column, expected):
    assert Executor(connection).fetch_one(*has_column(table, column))[0] == expected


@pytest.mark.parametrize(
    ("table", "index", "expected"),
    [
        ("books", "idx_books_title", 1),
        ("authors", "idx_books_title", 0),
        ("books", "idx_other", 0),
    ],
)
def test_has_index(connection, table, index, expected):
    assert Executor(connection).fetch_one(*has_index(table, index))[0] == expected


def test_statements_carry_their_arguments():
    assert has_column("books", "title").params == ("books", "title")
    assert has_index("books", "idx").params[1:] == ("books", "idx")