"""SQLAlchemy-backed OrderStore.

Orders live in the ``orders`` table and their items in ``order_items``
(see adapters.record_store.schema). Reads expand the items with one extra
query per call, not per order.
"""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update

from ordersync.interfaces.record_store import (
    OrderItemRow,
    OrderRow,
    OrderStore,
    RecordNotFoundError,
)

from ..schema import order_items, orders
from .errors import ORDER_ID_KEY, ORDER_ITEM_KEY, translated_errors
from .order_item_store import item_row_from_mapping, item_row_values

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, RowMapping

TABLE = "orders"


class SqlAlchemyOrderStore(OrderStore):
    """OrderStore over the ``orders`` and ``order_items`` tables.

    - `scan_all` returns orders by ascending insertion sequence (``seq``).
    - Items come back ordered by ``position``.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --------------------------------------------------------------------- #
    # Writes
    # --------------------------------------------------------------------- #

    def insert(self, row: OrderRow) -> None:
        with translated_errors(TABLE, (row.id,), ORDER_ID_KEY):
            self.connection.execute(
                insert(orders).values(
                    id=row.id, customer_id=row.customer_id, total=row.total
                )
            )

        if not row.items:
            return

        # one statement for the whole item batch
        with translated_errors("order_items", (row.id,), ORDER_ITEM_KEY):
            self.connection.execute(
                insert(order_items), [item_row_values(item) for item in row.items]
            )

    def update(self, order_id: str, *, customer_id: str, total: Decimal) -> None:
        stmt = (
            update(orders)
            .where(orders.c.id == order_id)
            .values(customer_id=customer_id, total=total)
        )
        with translated_errors(TABLE, (order_id,)):
            result = self.connection.execute(stmt)
        if result.rowcount == 0:
            raise RecordNotFoundError(TABLE, (order_id,))

    # --------------------------------------------------------------------- #
    # Reads
    # --------------------------------------------------------------------- #

    def exists(self, order_id: str) -> bool:
        stmt = select(orders.c.id).where(orders.c.id == order_id)
        with translated_errors(TABLE, (order_id,)):
            return self.connection.execute(stmt).first() is not None

    def find_by_id(self, order_id: str) -> OrderRow | None:
        stmt = select(orders).where(orders.c.id == order_id)
        with translated_errors(TABLE, (order_id,)):
            if not (order := self.connection.execute(stmt).mappings().first()):
                return None
            items = self._select_items(order_id)
        return self._order_row(order, items.get(order_id, []))

    def scan_all(self) -> list[OrderRow]:
        stmt = select(orders).order_by(orders.c.seq.asc())
        with translated_errors(TABLE, ()):
            rows = self.connection.execute(stmt).mappings().all()
            items = self._select_items()
        return [self._order_row(row, items.get(row["id"], [])) for row in rows]

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _select_items(self, order_id: str | None = None) -> dict[str, list[OrderItemRow]]:
        """Fetch item rows, grouped by order id and ordered by position.

        Args:
            order_id: Restrict to a single order; None fetches every item.
        """
        stmt = select(order_items).order_by(
            order_items.c.order_id.asc(),
            order_items.c.position.asc(),
            order_items.c.id.asc(),
        )
        if order_id is not None:
            stmt = stmt.where(order_items.c.order_id == order_id)

        grouped: dict[str, list[OrderItemRow]] = defaultdict(list)
        for mapping in self.connection.execute(stmt).mappings():
            grouped[mapping["order_id"]].append(item_row_from_mapping(mapping))
        return grouped

    @staticmethod
    def _order_row(mapping: RowMapping, items: list[OrderItemRow]) -> OrderRow:
        return OrderRow(
            id=mapping["id"],
            customer_id=mapping["customer_id"],
            total=mapping["total"],
            items=tuple(items),
        )
