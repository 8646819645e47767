"""In-memory OrderItemStore implementation."""

from ordersync.interfaces.record_store import (
    DuplicateKeyError,
    OrderItemRow,
    OrderItemStore,
    RecordNotFoundError,
    StorageFailureError,
)

from .tables import InMemoryTables

TABLE = "order_items"


def items_of(tables: InMemoryTables, order_id: str) -> list[OrderItemRow]:
    """Item rows of one order, ordered by position then id."""
    return sorted(
        (row for row in tables.items.values() if row.order_id == order_id),
        key=lambda row: (row.position, row.id),
    )


class InMemoryOrderItemStore(OrderItemStore):
    """In-memory OrderItemStore for testing and non-durable use cases.

    Note: This implementation is not thread-safe.
    """

    def __init__(self, tables: InMemoryTables):
        self._tables = tables

    def find_by_order(self, order_id: str) -> list[OrderItemRow]:
        return items_of(self._tables, order_id)

    def insert(self, row: OrderItemRow) -> None:
        if row.order_id not in self._tables.orders:
            raise StorageFailureError(
                f"order_items.order_id references missing order '{row.order_id}'"
            )
        if row.key in self._tables.items:
            raise DuplicateKeyError(TABLE, row.key)
        self._tables.items[row.key] = row

    def update(self, row: OrderItemRow) -> None:
        if row.key not in self._tables.items:
            raise RecordNotFoundError(TABLE, row.key)
        self._tables.items[row.key] = row

    def delete(self, order_id: str, item_id: str) -> None:
        self._tables.items.pop((order_id, item_id), None)
