"""Repository for the order aggregate.

Each write runs inside exactly one unit of work: either every statement of
the operation commits, or none does. Reads rebuild fresh aggregates from the
stored rows; there is no identity map.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ordersync.domain.reconciliation import reconcile_items
from ordersync.interfaces.record_store import DuplicateKeyError

from .errors import DuplicateOrderError, OrderNotFoundError
from .row_mapper import to_item_row, to_line_item, to_order, to_order_row

if TYPE_CHECKING:
    from ordersync.domain.aggregates import Order
    from ordersync.interfaces.record_store import OrderRow
    from ordersync.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class OrderRepository:
    """Persists and reloads `Order` aggregates through a unit of work.

    Concurrency: a single logical writer per order is assumed. There is no
    version check, so two concurrent updates of the same order race and the
    later commit wins.
    """

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    # --- Saves ---

    def create(self, order: Order) -> None:
        """Persist a new order and all of its items.

        Raises:
            DuplicateOrderError: If an order with the same ID already exists.
            StorageFailureError: On any other storage failure.
        """
        with self.uow:
            try:
                self.uow.orders.insert(to_order_row(order))
            except DuplicateKeyError as e:
                raise DuplicateOrderError(order.id) from e
            self.uow.commit()

        logger.info("Created order %s with %d item(s)", order.id, len(order.items))

    def update(self, order: Order) -> None:
        """Bring the stored order in line with `order`.

        Loads the stored items, reconciles them against the aggregate's items,
        deletes, updates and inserts item rows accordingly, then rewrites the
        customer reference and the total.

        Raises:
            OrderNotFoundError: If the order has never been created.
            StorageFailureError: On any storage failure; nothing is committed.
        """
        with self.uow:
            if not self.uow.orders.exists(order.id):
                raise OrderNotFoundError(order.id)

            saved_items = [
                to_line_item(row) for row in self.uow.order_items.find_by_order(order.id)
            ]
            changes = reconcile_items(saved_items, order.items)
            logger.debug(
                "Order %s: %d item change(s), %d to create, %d to update, %d to delete",
                order.id,
                len(changes),
                len(changes.to_create),
                len(changes.to_update),
                len(changes.to_delete),
            )

            positions = {item.id: position for position, item in enumerate(order.items)}

            for item in changes.to_delete:
                self.uow.order_items.delete(order.id, item.id)
            for item in changes.to_update:
                self.uow.order_items.update(
                    to_item_row(order.id, item, positions[item.id])
                )
            for item in changes.to_create:
                self.uow.order_items.insert(
                    to_item_row(order.id, item, positions[item.id])
                )

            self.uow.orders.update(
                order.id, customer_id=order.customer_id, total=order.total()
            )
            self.uow.commit()

        logger.info("Updated order %s", order.id)

    # --- Loads ---

    def find(self, order_id: str | None) -> Order | None:
        """Get an order from its ID.

        Args:
            order_id: The ID of the order to retrieve.

        Returns:
            A freshly built order, or None if `order_id` is empty or unknown.

        Raises:
            StorageFailureError: On storage failure (absence is not a failure).
        """
        if not order_id:
            return None

        with self.uow:
            row = self.uow.orders.find_by_id(order_id)

        if row is None:
            return None
        return self._rebuild(row)

    def find_all(self) -> list[Order]:
        """Get every stored order, in insertion order."""
        with self.uow:
            rows = self.uow.orders.scan_all()
        return [self._rebuild(row) for row in rows]

    # --- Internals ---

    @staticmethod
    def _rebuild(row: OrderRow) -> Order:
        order = to_order(row)
        if (total := order.total()) != row.total:
            logger.warning(
                "Stored total %s of order %s does not match its items (%s)",
                row.total,
                row.id,
                total,
            )
        return order
