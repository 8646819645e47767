"""SQLAlchemy-backed OrderItemStore."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from ordersync.interfaces.record_store import (
    OrderItemRow,
    OrderItemStore,
    RecordNotFoundError,
)

from ..schema import order_items
from .errors import ORDER_ITEM_KEY, translated_errors

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, RowMapping

TABLE = "order_items"


def item_row_from_mapping(mapping: RowMapping) -> OrderItemRow:
    """Build an `OrderItemRow` from a result mapping of the ``order_items`` table."""
    return OrderItemRow(
        id=mapping["id"],
        order_id=mapping["order_id"],
        name=mapping["name"],
        price=mapping["price"],
        product_id=mapping["product_id"],
        quantity=mapping["quantity"],
        position=mapping["position"],
    )


def item_row_values(row: OrderItemRow) -> dict[str, object]:
    """Column values for inserting `row` into ``order_items``."""
    return {
        "order_id": row.order_id,
        "id": row.id,
        "name": row.name,
        "price": row.price,
        "product_id": row.product_id,
        "quantity": row.quantity,
        "position": row.position,
    }


class SqlAlchemyOrderItemStore(OrderItemStore):
    """OrderItemStore over the ``order_items`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def find_by_order(self, order_id: str) -> list[OrderItemRow]:
        stmt = (
            select(order_items)
            .where(order_items.c.order_id == order_id)
            .order_by(order_items.c.position.asc(), order_items.c.id.asc())
        )
        with translated_errors(TABLE, (order_id,)):
            rows = self.connection.execute(stmt).mappings().all()
        return [item_row_from_mapping(row) for row in rows]

    def insert(self, row: OrderItemRow) -> None:
        with translated_errors(TABLE, row.key, ORDER_ITEM_KEY):
            self.connection.execute(insert(order_items).values(**item_row_values(row)))

    def update(self, row: OrderItemRow) -> None:
        stmt = (
            update(order_items)
            .where(
                order_items.c.order_id == row.order_id,
                order_items.c.id == row.id,
            )
            .values(
                name=row.name,
                price=row.price,
                product_id=row.product_id,
                quantity=row.quantity,
                position=row.position,
            )
        )
        with translated_errors(TABLE, row.key):
            result = self.connection.execute(stmt)
        if result.rowcount == 0:
            raise RecordNotFoundError(TABLE, row.key)

    def delete(self, order_id: str, item_id: str) -> None:
        stmt = delete(order_items).where(
            order_items.c.order_id == order_id,
            order_items.c.id == item_id,
        )
        with translated_errors(TABLE, (order_id, item_id)):
            self.connection.execute(stmt)
