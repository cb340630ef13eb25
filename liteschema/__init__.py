"""Discover the tables, columns, keys and indexes of an SQLite database and write them back as SQL."""

__version__ = "0.1.0"

__all__ = ["columns", "discovery", "errors", "executor", "probe", "schema", "table", "types"]