import pytest

from liteschema.types import (
    ColumnType,
    DefaultKind,
    DefaultType,
    TypeKind,
    parse_type,
)


@pytest.mark.parametrize(
    "declared, kind",
    [
        ("text", TypeKind.TEXT),
        ("tinyint", TypeKind.TINY_INTEGER),
        ("smallint", TypeKind.SMALL_INTEGER),
        ("int", TypeKind.INTEGER),
        ("INTEGER", TypeKind.INTEGER),
        ("bigint", TypeKind.BIG_INTEGER),
        ("float", TypeKind.FLOAT),
        ("double", TypeKind.DOUBLE),
        ("datetime_text", TypeKind.DATE_TIME),
        ("timestamp", TypeKind.TIMESTAMP),
        ("timestamp_text", TypeKind.TIMESTAMP),
        ("timestamp_with_timezone_text", TypeKind.TIMESTAMP_WITH_TIME_ZONE),
        ("time_text", TypeKind.TIME),
        ("date_text", TypeKind.DATE),
        ("blob", TypeKind.BLOB),
        ("boolean", TypeKind.BOOLEAN),
        ("json_text", TypeKind.JSON),
        ("jsonb_text", TypeKind.JSON_BINARY),
        ("uuid_text", TypeKind.UUID),
    ],
)
def test_simple_types(declared, kind):
    assert parse_type(declared) == ColumnType(kind)


def test_varchar_with_and_without_length():
    assert parse_type("varchar(255)") == ColumnType(TypeKind.STRING, length=255)
    assert parse_type("varchar") == ColumnType(TypeKind.STRING)


def test_char_length():
    assert parse_type("char(10)") == ColumnType(TypeKind.CHAR, length=10)


def test_decimal_needs_two_parts():
    assert parse_type("decimal(10, 2)") == ColumnType(TypeKind.DECIMAL, precision=(10, 2))
    assert parse_type("real") == ColumnType(TypeKind.DECIMAL)
    assert parse_type("decimal(10)") == ColumnType(TypeKind.DECIMAL)
    assert parse_type("decimal(10, x)") == ColumnType(TypeKind.DECIMAL)


def test_blob_variants():
    assert parse_type("blob(16)") == ColumnType(TypeKind.BINARY, length=16)
    assert parse_type("blob(1, 2)") == ColumnType(TypeKind.BLOB)


def test_varbinary_requires_length():
    assert parse_type("varbinary_blob(32)") == ColumnType(TypeKind.VAR_BINARY, length=32)
    assert parse_type("varbinary_blob") == ColumnType(TypeKind.CUSTOM, name="varbinary_blob")


def test_money_precision():
    assert parse_type("real_money(19, 4)") == ColumnType(TypeKind.MONEY, precision=(19, 4))
    assert parse_type("real_money") == ColumnType(TypeKind.MONEY)


def test_unknown_type_keeps_full_declaration():
    assert parse_type("Geometry(bar)") == ColumnType(TypeKind.CUSTOM, name="Geometry(bar)")
    assert parse_type("") == ColumnType(TypeKind.CUSTOM, name="")


def test_unclosed_parenthesis_is_custom():
    assert parse_type("varchar(255") == ColumnType(TypeKind.CUSTOM, name="varchar(255")


def test_non_numeric_length_is_dropped():
    assert parse_type("varchar(abc)") == ColumnType(TypeKind.STRING)


def test_length_limited_to_unsigned_32_bits():
    assert parse_type("varchar(4294967295)").length == 4294967295
    assert parse_type("varchar(4294967296)").length is None


def test_case_insensitive():
    assert parse_type("VarChar(20)") == parse_type("varchar(20)")


@pytest.mark.parametrize(
    "column_type",
    [
        ColumnType(TypeKind.CHAR, length=3),
        ColumnType(TypeKind.CHAR),
        ColumnType(TypeKind.STRING, length=64),
        ColumnType(TypeKind.STRING),
        ColumnType(TypeKind.TEXT),
        ColumnType(TypeKind.INTEGER),
        ColumnType(TypeKind.BIG_INTEGER),
        ColumnType(TypeKind.DECIMAL, precision=(8, 3)),
        ColumnType(TypeKind.DECIMAL),
        ColumnType(TypeKind.MONEY, precision=(19, 4)),
        ColumnType(TypeKind.BINARY, length=16),
        ColumnType(TypeKind.VAR_BINARY, length=8),
        ColumnType(TypeKind.BLOB),
        ColumnType(TypeKind.DATE_TIME),
        ColumnType(TypeKind.TIMESTAMP),
        ColumnType(TypeKind.TIMESTAMP_WITH_TIME_ZONE),
        ColumnType(TypeKind.UUID),
        ColumnType(TypeKind.CUSTOM, name="geometry"),
    ],
)
def test_round_trip(column_type):
    assert parse_type(column_type.to_sql()) == column_type


def test_varchar_rendering():
    assert ColumnType(TypeKind.STRING, length=255).to_sql() == "varchar(255)"


def test_default_rendering():
    assert DefaultType(DefaultKind.INTEGER, 5).to_sql() == "5"
    assert DefaultType(DefaultKind.CURRENT_TIMESTAMP).to_sql() == "CURRENT_TIMESTAMP"
    assert DefaultType(DefaultKind.STRING, "it's").to_sql() == "'it''s'"


def test_null_and_unspecified_write_no_default():
    assert DefaultType(DefaultKind.NULL).to_sql() is None
    assert DefaultType(DefaultKind.UNSPECIFIED).to_sql() is None


def test_float_default_round_trips_through_float():
    rendered = DefaultType(DefaultKind.FLOAT, 1.5).to_sql()
    assert float(rendered) == 1.5