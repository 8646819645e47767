"""In-memory OrderStore implementation."""

from dataclasses import replace
from decimal import Decimal

from ordersync.interfaces.record_store import (
    DuplicateKeyError,
    OrderRow,
    OrderStore,
    RecordNotFoundError,
)

from .order_item_store import InMemoryOrderItemStore, items_of
from .tables import InMemoryTables

TABLE = "orders"


class InMemoryOrderStore(OrderStore):
    """In-memory OrderStore for testing and non-durable use cases.

    - Non-durable: all data is lost when the tables are discarded.
    - Scan order is insertion order.
    """

    def __init__(self, tables: InMemoryTables):
        self._tables = tables

    # --- writes ---

    def insert(self, row: OrderRow) -> None:
        if row.id in self._tables.orders:
            raise DuplicateKeyError(TABLE, (row.id,))

        # stage on a copy so a failing item leaves nothing behind
        staged = self._tables.snapshot()
        staged.orders[row.id] = replace(row, items=())
        item_store = InMemoryOrderItemStore(staged)
        for item in row.items:
            item_store.insert(item)
        self._tables.restore(staged)

    def update(self, order_id: str, *, customer_id: str, total: Decimal) -> None:
        if (current := self._tables.orders.get(order_id)) is None:
            raise RecordNotFoundError(TABLE, (order_id,))
        self._tables.orders[order_id] = replace(
            current, customer_id=customer_id, total=total
        )

    # --- reads ---

    def exists(self, order_id: str) -> bool:
        return order_id in self._tables.orders

    def find_by_id(self, order_id: str) -> OrderRow | None:
        if (row := self._tables.orders.get(order_id)) is None:
            return None
        return replace(row, items=tuple(items_of(self._tables, order_id)))

    def scan_all(self) -> list[OrderRow]:
        return [
            replace(row, items=tuple(items_of(self._tables, order_id)))
            for order_id, row in self._tables.orders.items()
        ]
