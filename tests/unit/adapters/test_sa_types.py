"""Unit tests for the custom SQLAlchemy column types."""

from decimal import Decimal

import pytest
from sqlalchemy import Numeric, String
from sqlalchemy.dialects import postgresql, sqlite

from ordersync.adapters.db.sa_types import ExactDecimal

SQLITE = sqlite.dialect()
POSTGRES = postgresql.dialect()


class TestExactDecimalStorageType:
    """The storage type depends on the backend."""

    @staticmethod
    def test_sqlite_stores_text():
        """SQLite has no exact numeric; values are kept as decimal text."""
        assert isinstance(ExactDecimal().load_dialect_impl(SQLITE), String)

    @staticmethod
    def test_postgres_stores_numeric():
        """PostgreSQL uses its exact NUMERIC type."""
        assert isinstance(ExactDecimal().load_dialect_impl(POSTGRES), Numeric)

    @staticmethod
    def test_python_type_is_decimal():
        """Tooling sees `Decimal` on the Python side."""
        assert ExactDecimal().python_type is Decimal


class TestExactDecimalBind:
    """Values going into the database."""

    @staticmethod
    def test_none_passes_through():
        """NULL stays NULL on every backend."""
        assert ExactDecimal().process_bind_param(None, SQLITE) is None
        assert ExactDecimal().process_bind_param(None, POSTGRES) is None

    @staticmethod
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("10.00"), "10.00"),
            (Decimal("0.1"), "0.1"),
            (3, "3"),
            ("19.99", "19.99"),
        ],
    )
    def test_sqlite_binds_exact_text(value, expected):
        """The text keeps every digit, including trailing zeros."""
        assert ExactDecimal().process_bind_param(value, SQLITE) == expected

    @staticmethod
    def test_postgres_binds_decimal():
        """PostgreSQL receives a `Decimal` for its NUMERIC column."""
        bound = ExactDecimal().process_bind_param("1.10", POSTGRES)
        assert isinstance(bound, Decimal)
        assert bound == Decimal("1.10")

    @staticmethod
    def test_literal_rendering_reuses_bind_logic():
        """Literal SQL rendering produces the same value as binding."""
        assert ExactDecimal().process_literal_param(Decimal("2.50"), SQLITE) == "2.50"


class TestExactDecimalResult:
    """Values coming back from the database."""

    @staticmethod
    def test_none_passes_through():
        """NULL reads back as None."""
        assert ExactDecimal().process_result_value(None, SQLITE) is None

    @staticmethod
    def test_text_is_parsed_exactly():
        """Decimal text reads back without floating point drift."""
        value = ExactDecimal().process_result_value("0.30", SQLITE)
        assert value == Decimal("0.30")
        assert str(value) == "0.30"

    @staticmethod
    def test_decimal_is_returned_as_is():
        """Drivers that already return `Decimal` are left alone."""
        value = Decimal("5.5")
        assert ExactDecimal().process_result_value(value, POSTGRES) is value
