"""Record store interfaces for the order aggregate.

This module defines:
- The persisted row shapes `OrderItemRow` and `OrderRow`.
- The `OrderItemStore` and `OrderStore` ports (framework-free ABCs).

Contract overview
-----------------
Item rows are keyed by ``(order_id, id)``: an item identity is unique only
within its parent order. Order rows are keyed by ``id``.

Writes:
- `insert` fails with `DuplicateKeyError` on a key collision.
- `update` overwrites a row wholesale and fails with `RecordNotFoundError`
  when the row does not exist.
- `OrderItemStore.delete` is a no-op when the row does not exist.
- Inserting an item whose parent order does not exist fails with
  `StorageFailureError`.
- Any other driver or constraint failure surfaces as `StorageFailureError`.

Reads:
- Item rows are returned in ascending `position`.
- `OrderStore.scan_all` returns orders in insertion order.
- A missing order reads as `None`, never as an error.

Writes are not committed by the stores themselves; the surrounding unit of
work decides.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from decimal import Decimal

# --- Row DTOs ---


@dataclass(frozen=True, slots=True)
class OrderItemRow:
    """Persisted line item row."""

    # pylint: disable=too-many-instance-attributes

    id: str  # pylint: disable=invalid-name
    order_id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int
    position: int = 0  # index of the item within its order

    @property
    def key(self) -> tuple[str, str]:
        """The row key, ``(order_id, id)``."""
        return (self.order_id, self.id)


@dataclass(frozen=True, slots=True)
class OrderRow:
    """Persisted order row, with its item rows expanded.

    Notes:
      - `total` is a snapshot written at persistence time, not a source of truth.
      - `items` are ordered by `position`.
    """

    id: str  # pylint: disable=invalid-name
    customer_id: str
    total: Decimal
    items: tuple[OrderItemRow, ...] = ()


# --- Store Interfaces ---


class OrderItemStore(abc.ABC):
    """Record store for line item rows, scoped by parent order."""

    @abc.abstractmethod
    def find_by_order(self, order_id: str) -> list[OrderItemRow]:
        """Return every item row of an order, ordered by position.

        Args:
            order_id: The parent order identity.

        Returns:
            The item rows; empty if the order has none or does not exist.
        """

    @abc.abstractmethod
    def insert(self, row: OrderItemRow) -> None:
        """Insert a new item row.

        Raises:
            DuplicateKeyError: If ``(order_id, id)`` already exists.
            StorageFailureError: If the parent order does not exist, or on
                any other storage failure.
        """

    @abc.abstractmethod
    def update(self, row: OrderItemRow) -> None:
        """Overwrite the item row with key ``(row.order_id, row.id)``.

        Raises:
            RecordNotFoundError: If the row does not exist.
            StorageFailureError: On any other storage failure.
        """

    @abc.abstractmethod
    def delete(self, order_id: str, item_id: str) -> None:
        """Delete the item row with key ``(order_id, item_id)``.

        A missing row is a no-op.
        """


class OrderStore(abc.ABC):
    """Record store for order rows."""

    @abc.abstractmethod
    def insert(self, row: OrderRow) -> None:
        """Insert an order row together with its nested item rows.

        Raises:
            DuplicateKeyError: If an order with `row.id` already exists.
            StorageFailureError: On any other storage failure.
        """

    @abc.abstractmethod
    def update(self, order_id: str, *, customer_id: str, total: Decimal) -> None:
        """Rewrite the scalar fields of an order row.

        Raises:
            RecordNotFoundError: If the order does not exist.
            StorageFailureError: On any other storage failure.
        """

    @abc.abstractmethod
    def exists(self, order_id: str) -> bool:
        """Return True if an order row with this identity exists."""

    @abc.abstractmethod
    def find_by_id(self, order_id: str) -> OrderRow | None:
        """Return the order row with its items expanded, or None if absent."""

    @abc.abstractmethod
    def scan_all(self) -> list[OrderRow]:
        """Return every order row with its items expanded, in insertion order."""
