"""Column types and default values as SQLite reports them."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF
_U32_RE = re.compile(r"\+?[0-9]+")


class TypeKind(enum.Enum):
    """The kinds of column type that discovery distinguishes."""

    CHAR = "char"
    STRING = "string"
    TEXT = "text"
    TINY_INTEGER = "tiny_integer"
    SMALL_INTEGER = "small_integer"
    INTEGER = "integer"
    BIG_INTEGER = "big_integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATE_TIME = "date_time"
    TIMESTAMP = "timestamp"
    TIMESTAMP_WITH_TIME_ZONE = "timestamp_with_time_zone"
    TIME = "time"
    DATE = "date"
    BINARY = "binary"
    VAR_BINARY = "var_binary"
    BLOB = "blob"
    BOOLEAN = "boolean"
    MONEY = "money"
    JSON = "json"
    JSON_BINARY = "json_binary"
    UUID = "uuid"
    CUSTOM = "custom"


_FIXED_SQL = {
    TypeKind.TEXT: "text",
    TypeKind.TINY_INTEGER: "tinyint",
    TypeKind.SMALL_INTEGER: "smallint",
    TypeKind.INTEGER: "integer",
    TypeKind.BIG_INTEGER: "bigint",
    TypeKind.FLOAT: "float",
    TypeKind.DOUBLE: "double",
    TypeKind.DATE_TIME: "datetime_text",
    TypeKind.TIMESTAMP: "timestamp_text",
    TypeKind.TIMESTAMP_WITH_TIME_ZONE: "timestamp_with_timezone_text",
    TypeKind.TIME: "time_text",
    TypeKind.DATE: "date_text",
    TypeKind.BLOB: "blob",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.JSON: "json_text",
    TypeKind.JSON_BINARY: "jsonb_text",
    TypeKind.UUID: "uuid_text",
}

_SIMPLE_NAMES = {
    "text": TypeKind.TEXT,
    "tinyint": TypeKind.TINY_INTEGER,
    "smallint": TypeKind.SMALL_INTEGER,
    "int": TypeKind.INTEGER,
    "integer": TypeKind.INTEGER,
    "bigint": TypeKind.BIG_INTEGER,
    "float": TypeKind.FLOAT,
    "double": TypeKind.DOUBLE,
    "datetime_text": TypeKind.DATE_TIME,
    "timestamp": TypeKind.TIMESTAMP,
    "timestamp_text": TypeKind.TIMESTAMP,
    "timestamp_with_timezone_text": TypeKind.TIMESTAMP_WITH_TIME_ZONE,
    "time_text": TypeKind.TIME,
    "date_text": TypeKind.DATE,
    "boolean": TypeKind.BOOLEAN,
    "json_text": TypeKind.JSON,
    "jsonb_text": TypeKind.JSON_BINARY,
    "uuid_text": TypeKind.UUID,
}


@dataclass(frozen=True)
class ColumnType:
    """A column type, with its length, precision or custom name where it has one."""

    kind: TypeKind
    length: int | None = None
    precision: tuple[int, int] | None = None
    name: str | None = None

    def to_sql(self) -> str:
        """Render the type as it would be declared in SQLite."""
        if self.kind in _FIXED_SQL:
            return _FIXED_SQL[self.kind]
        if self.kind is TypeKind.CHAR:
            return _with_args("char", self.length)
        if self.kind is TypeKind.STRING:
            return _with_args("varchar", self.length)
        if self.kind is TypeKind.BINARY:
            return _with_args("blob", self.length)
        if self.kind is TypeKind.VAR_BINARY:
            return _with_args("varbinary_blob", self.length)
        if self.kind is TypeKind.DECIMAL:
            return _with_args("real", *(self.precision or ()))
        if self.kind is TypeKind.MONEY:
            return _with_args("real_money", *(self.precision or ()))
        return self.name or ""


def _with_args(name: str, *args: int | None) -> str:
    values = [str(arg) for arg in args if arg is not None]
    return f"{name}({', '.join(values)})" if values else name


def _parse_u32(text: str) -> int | None:
    text = text.strip()
    if not _U32_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def parse_type(data_type: str) -> ColumnType:
    """Map a declared SQLite type such as ``varchar(255)`` to a ColumnType."""
    type_name = data_type
    parts: list[int] = []
    prefix, separator, suffix = data_type.partition("(")
    if separator and suffix.endswith(")"):
        type_name = prefix
        for part in suffix[:-1].split(","):
            number = _parse_u32(part)
            if number is None:
                break
            parts.append(number)

    first = parts[0] if parts else None
    pair = (parts[0], parts[1]) if len(parts) == 2 else None
    lowered = type_name.lower()

    if lowered in _SIMPLE_NAMES:
        return ColumnType(_SIMPLE_NAMES[lowered])
    if lowered == "char":
        return ColumnType(TypeKind.CHAR, length=first)
    if lowered == "varchar":
        return ColumnType(TypeKind.STRING, length=first)
    if lowered in ("decimal", "real"):
        return ColumnType(TypeKind.DECIMAL, precision=pair)
    if lowered == "blob":
        if len(parts) == 1:
            return ColumnType(TypeKind.BINARY, length=first)
        return ColumnType(TypeKind.BLOB)
    if lowered == "varbinary_blob" and len(parts) == 1:
        return ColumnType(TypeKind.VAR_BINARY, length=first)
    if lowered == "real_money":
        return ColumnType(TypeKind.MONEY, precision=pair)
    return ColumnType(TypeKind.CUSTOM, name=data_type)


class DefaultKind(enum.Enum):
    """The kinds of value an SQLite ``dflt_value`` can hold."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    NULL = "null"
    UNSPECIFIED = "unspecified"
    CURRENT_TIMESTAMP = "current_timestamp"


@dataclass(frozen=True)
class DefaultType:
    """A column's default value."""

    kind: DefaultKind
    value: int | float | str | None = None

    def to_sql(self) -> str | None:
        """Render the value for a DEFAULT clause, or None when no clause is written."""
        if self.kind is DefaultKind.INTEGER:
            return str(self.value)
        if self.kind is DefaultKind.FLOAT:
            return _format_float(float(self.value))
        if self.kind is DefaultKind.STRING:
            return "'" + str(self.value).replace("'", "''") + "'"
        if self.kind is DefaultKind.CURRENT_TIMESTAMP:
            return "CURRENT_TIMESTAMP"
        return None


def _format_float(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)