"""Columns, indexes and foreign keys as read from SQLite's pragmas."""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .types import ColumnType, DefaultKind, DefaultType, parse_type

SQLITE_MASTER = "sqlite_master"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_F32_MAX = 3.4028234663852886e38
_I32_RE = re.compile(r"[+-]?[0-9]+")
_F32_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _parse_i32(text: str) -> int | None:
    if not _I32_RE.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _parse_f32(text: str) -> float | None:
    if not _F32_RE.fullmatch(text):
        return None
    value = float(text)
    if math.isfinite(value) and abs(value) > _F32_MAX:
        value = math.copysign(math.inf, value)
    return value


def parse_default(value: str | None) -> DefaultType:
    """Interpret a ``dflt_value`` from ``PRAGMA table_info``."""
    if value == "NULL":
        return DefaultType(DefaultKind.NULL)
    if not value:
        return DefaultType(DefaultKind.UNSPECIFIED)
    text = value.replace("'", "")
    integer = _parse_i32(text)
    if integer is not None:
        return DefaultType(DefaultKind.INTEGER, integer)
    number = _parse_f32(text)
    if number is not None:
        return DefaultType(DefaultKind.FLOAT, number)
    if text == "CURRENT_TIMESTAMP":
        return DefaultType(DefaultKind.CURRENT_TIMESTAMP)
    return DefaultType(DefaultKind.STRING, text)


@dataclass
class ColumnInfo:
    """A column of an SQLite table."""

    cid: int
    name: str
    column_type: ColumnType
    not_null: bool
    default_value: DefaultType
    primary_key: bool


def column_from_row(row: Sequence[Any]) -> ColumnInfo:
    """Build a ColumnInfo from a ``PRAGMA table_info`` row."""
    return ColumnInfo(
        cid=row[0],
        name=row[1],
        column_type=parse_type(row[2] or ""),
        not_null=bool(row[3]),
        default_value=parse_default(row[4]),
        primary_key=bool(row[5]),
    )


@dataclass
class IndexInfo:
    """An index together with the columns it covers."""

    index_type: str = ""
    index_name: str = ""
    table_name: str = ""
    unique: bool = False
    origin: str = ""
    partial: int = 0
    columns: list[str] = field(default_factory=list)

    def write(self) -> str:
        """Render a CREATE INDEX statement for this index.

        The name is kept only for indexes made by CREATE INDEX (origin ``c``);
        other names are generated by SQLite and are left out.
        """
        words = ["CREATE"]
        if self.unique:
            words.append("UNIQUE")
        words.append("INDEX")
        if self.origin == "c":
            words.append(_quote(self.index_name))
        columns = ", ".join(_quote(column) for column in self.columns)
        words.append(f"ON {_quote(self.table_name)} ({columns})")
        return " ".join(words)


@dataclass
class PartialIndexInfo:
    """An index as listed by ``PRAGMA index_list``."""

    seq: int = 0
    name: str = ""
    unique: bool = False
    origin: str = ""
    partial: int = 0


def partial_index_from_row(row: Sequence[Any]) -> PartialIndexInfo:
    """Build a PartialIndexInfo from a ``PRAGMA index_list`` row."""
    return PartialIndexInfo(
        seq=row[0],
        name=row[1],
        unique=bool(row[2]),
        origin=row[3],
        partial=row[4],
    )


@dataclass
class IndexedColumns:
    """An index's ``sqlite_master`` entry and the columns it covers."""

    index_type: str = ""
    name: str = ""
    table: str = ""
    root_page: int = 0
    indexed_columns: list[str] = field(default_factory=list)


def indexed_columns_from_rows(
    row: Sequence[Any], rows: Sequence[Sequence[Any]]
) -> IndexedColumns:
    """Combine a ``sqlite_master`` row with its ``PRAGMA index_info`` rows."""
    return IndexedColumns(
        index_type=row[0],
        name=row[1],
        table=row[2],
        root_page=row[3],
        indexed_columns=[column_row[2] for column_row in rows],
    )


class ForeignKeyAction(enum.Enum):
    """An ON UPDATE or ON DELETE action."""

    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"
    CASCADE = "CASCADE"

    def to_sql(self) -> str:
        """The action as written in SQL."""
        return self.value


def parse_foreign_key_action(action: str) -> ForeignKeyAction:
    """Map an action name to a ForeignKeyAction; unknown names mean NO ACTION."""
    try:
        return ForeignKeyAction(action)
    except ValueError:
        return ForeignKeyAction.NO_ACTION


class MatchAction(enum.Enum):
    """A foreign key's MATCH clause."""

    SIMPLE = "MATCH SIMPLE"
    PARTIAL = "MATCH PARTIAL"
    FULL = "MATCH FULL"
    NONE = "MATCH NONE"


def parse_match_action(action: str) -> MatchAction:
    """Map a MATCH clause to a MatchAction; unknown text means none."""
    try:
        return MatchAction(action)
    except ValueError:
        return MatchAction.NONE


@dataclass
class ForeignKeysInfo:
    """A foreign key, possibly spanning several columns."""

    id: int = 0
    seq: int = 0
    table: str = ""
    from_columns: list[str] = field(default_factory=list)
    to_columns: list[str] = field(default_factory=list)
    on_update: ForeignKeyAction = ForeignKeyAction.NO_ACTION
    on_delete: ForeignKeyAction = ForeignKeyAction.NO_ACTION
    match_action: MatchAction = MatchAction.NONE


def foreign_key_from_row(row: Sequence[Any]) -> ForeignKeysInfo:
    """Build a ForeignKeysInfo from a ``PRAGMA foreign_key_list`` row."""
    return ForeignKeysInfo(
        id=row[0],
        seq=row[1],
        table=row[2],
        from_columns=[row[3]],
        to_columns=[row[4]],
        on_update=parse_foreign_key_action(row[5]),
        on_delete=parse_foreign_key_action(row[6]),
        match_action=parse_match_action(row[7]),
    )