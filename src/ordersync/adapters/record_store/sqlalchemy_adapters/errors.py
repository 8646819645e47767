"""Mapping of SQLAlchemy errors onto record store errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import DBAPIError, IntegrityError

from ordersync.interfaces.record_store import DuplicateKeyError, StorageFailureError

EMPTY_STRING = ""  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class UniqueKey:
    """A unique or primary key constraint, as the drivers report its violation.

    PostgreSQL names the constraint (``duplicate key value violates unique
    constraint "uq_orders_id"``); SQLite lists its columns (``UNIQUE
    constraint failed: orders.id``). Matching on either leaves out other
    integrity errors whose message merely quotes a key value.
    """

    constraint: str
    columns: tuple[str, ...]

    def violated_by(self, message: str) -> bool:
        msg = message.lower()
        return (
            f'unique constraint "{self.constraint}"' in msg
            or f"unique constraint failed: {', '.join(self.columns)}" in msg
        )


ORDER_ID_KEY = UniqueKey("uq_orders_id", ("orders.id",))
ORDER_ITEM_KEY = UniqueKey(
    "pk_order_items", ("order_items.order_id", "order_items.id")
)


def _message(error: DBAPIError) -> str:
    return str(error.orig) if error.orig not in (None, EMPTY_STRING) else str(error)


@contextmanager
def translated_errors(
    table: str, key: tuple[str, ...], unique: UniqueKey | None = None
) -> Iterator[None]:
    """Translate SQLAlchemy driver errors raised inside the block.

    Args:
        table: Logical table name reported on key collisions.
        key: Key of the row being written, reported on key collisions.
        unique: The key constraint the block may collide with, if any.

    Raises:
        DuplicateKeyError: If `unique` is violated.
        StorageFailureError: For any other DBAPI error (other constraints,
            operational, connection, ...).
    """
    try:
        yield
    except IntegrityError as e:
        msg = _message(e)
        if unique is not None and unique.violated_by(msg):
            raise DuplicateKeyError(table, key, msg) from e
        raise StorageFailureError(msg) from e
    except DBAPIError as e:
        raise StorageFailureError(_message(e)) from e
