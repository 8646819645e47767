"""ORDERSYNC orders CLI: read-only views of stored orders.

Tables are rendered with Rich on **stdout**; notices go to **stderr**.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from ordersync.bootstrap import build_order_repository
from ordersync.interfaces.record_store import RecordStoreError

from .db import connect_engine
from .helpers import error, warn

if TYPE_CHECKING:
    from ordersync.domain.aggregates import Order
    from ordersync.service_layer.repositories import OrderRepository


def _repository() -> OrderRepository:
    return build_order_repository(engine=connect_engine())


def _orders_table(orders: list[Order]) -> Table:
    table = Table(title="Orders")
    table.add_column("ID", no_wrap=True)
    table.add_column("Customer")
    table.add_column("Items", justify="right")
    table.add_column("Total", justify="right")
    for order in orders:
        table.add_row(
            order.id, order.customer_id, str(len(order.items)), str(order.total())
        )
    return table


def _items_table(order: Order) -> Table:
    table = Table(title=f"Order {order.id} ({order.customer_id})")
    table.add_column("Item", no_wrap=True)
    table.add_column("Name")
    table.add_column("Product")
    table.add_column("Qty", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Subtotal", justify="right")
    for item in order.items:
        table.add_row(
            item.id,
            item.name,
            item.product_id,
            str(item.quantity),
            str(item.price),
            str(item.subtotal),
        )
    table.add_section()
    table.add_row("", "", "", "", "Total", str(order.total()))
    return table


@click.group(cls=clickx.ExtraGroup)
def orders() -> None:
    """Inspect stored orders."""


@orders.command(name="list")
def list_orders() -> None:
    """List every stored order, oldest first."""
    try:
        found = _repository().find_all()
    except RecordStoreError as e:
        raise click.ClickException(str(e)) from e

    if not found:
        warn("No orders found.")
        return
    Console().print(_orders_table(found))


@orders.command()
@click.argument("order_id")
@click.pass_context
def show(ctx: click.Context, order_id: str) -> None:
    """Show one order and its line items."""
    try:
        order = _repository().find(order_id)
    except RecordStoreError as e:
        raise click.ClickException(str(e)) from e

    if order is None:
        error(f"Order with ID {order_id} not found.")
        ctx.exit(1)
    Console().print(_items_table(order))
