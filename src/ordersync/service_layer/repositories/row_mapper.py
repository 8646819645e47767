"""Conversions between the order aggregate and its persisted rows."""

from __future__ import annotations

from ordersync.domain.aggregates import LineItem, Order
from ordersync.interfaces.record_store import OrderItemRow, OrderRow


def to_item_row(order_id: str, item: LineItem, position: int = 0) -> OrderItemRow:
    """Convert a LineItem into the row stored under `order_id`."""
    return OrderItemRow(
        id=item.id,
        order_id=order_id,
        name=item.name,
        price=item.price,
        product_id=item.product_id,
        quantity=item.quantity,
        position=position,
    )


def to_order_row(order: Order) -> OrderRow:
    """Convert an Order into its row, with the total computed now."""
    return OrderRow(
        id=order.id,
        customer_id=order.customer_id,
        total=order.total(),
        items=tuple(
            to_item_row(order.id, item, position)
            for position, item in enumerate(order.items)
        ),
    )


def to_line_item(row: OrderItemRow) -> LineItem:
    """Build a fresh LineItem from a stored item row."""
    return LineItem(
        item_id=row.id,
        name=row.name,
        price=row.price,
        product_id=row.product_id,
        quantity=row.quantity,
    )


def to_order(row: OrderRow) -> Order:
    """Build a fresh Order from a stored order row and its item rows.

    The stored total is ignored; the aggregate derives its own.

    Raises:
        EmptyOrderError: If the row has no items.
    """
    return Order(
        order_id=row.id,
        customer_id=row.customer_id,
        items=[to_line_item(item) for item in row.items],
    )
