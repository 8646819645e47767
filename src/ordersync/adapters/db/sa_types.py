"""Custom SQLAlchemy types for ORDERSYNC.

These types encapsulate small, backend-aware behaviors while preserving clear
Python-side types for tooling.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import BigInteger, Integer, Numeric, String
from sqlalchemy.types import TypeDecorator

from ordersync.adapters.db.engine import SQLITE

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect
    from sqlalchemy.types import TypeEngine

__all__ = ["BIGINT_PK", "ExactDecimal"]


BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")

# Wide enough for any Decimal rendered with the default 28-digit context.
_DECIMAL_TEXT_LENGTH = 64


class ExactDecimal(TypeDecorator[Decimal]):  # pylint: disable=too-many-ancestors
    """Exact decimal number.

    Stored as ``NUMERIC`` where the backend has an exact decimal type. SQLite
    only has floating point numerics, so there the value is stored as its
    decimal text and parsed back on read. Either way the Python side always
    sees `Decimal`.
    """

    impl = Numeric(asdecimal=True)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == SQLITE:
            return dialect.type_descriptor(String(_DECIMAL_TEXT_LENGTH))
        return dialect.type_descriptor(Numeric(asdecimal=True))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value) if dialect.name == SQLITE else value

    def process_result_value(self, value: Any, dialect: Dialect) -> Decimal | None:
        if value is None:
            return None
        if isinstance(value, Decimal):
            return value
        return Decimal(str(value))

    def process_literal_param(self, value: Any, dialect: Dialect) -> Any:
        # just reuse bind logic for literal rendering
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[Decimal]:
        return Decimal
