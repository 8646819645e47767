"""Order Aggregate"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from ordersync.domain.errors import DuplicateLineItemError, EmptyOrderError

from .line_item import LineItem


class Order:
    """Aggregate root representing a customer's order and its line items.

    The item sequence is fixed at construction. To change the shape of an
    order, build a new `Order` with the desired items; quantities can also be
    changed in place through `LineItem.change_quantity`.

    The total is always derived from the items and never cached.
    """

    __slots__ = ("_id", "_customer_id", "_items")

    def __init__(self, order_id: str, customer_id: str, items: Iterable[LineItem]) -> None:
        """Create an order.

        Args:
            order_id: Globally unique identity of the order.
            customer_id: Reference to the owning customer.
            items: The line items, in display order.

        Raises:
            EmptyOrderError: If `items` is empty.
            DuplicateLineItemError: If two items share the same identity.
        """
        items = tuple(items)
        if not items:
            raise EmptyOrderError(order_id)

        seen: set[str] = set()
        for item in items:
            if item.id in seen:
                raise DuplicateLineItemError(order_id, item.id)
            seen.add(item.id)

        self._id = order_id
        self._customer_id = customer_id
        self._items = items

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """Identity of the order."""
        return self._id

    @property
    def customer_id(self) -> str:
        """Reference to the owning customer."""
        return self._customer_id

    @property
    def items(self) -> tuple[LineItem, ...]:
        """The line items, read-only."""
        return self._items

    def total(self) -> Decimal:
        """Sum of the subtotals of all items."""
        return sum((item.subtotal for item in self._items), Decimal(0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (
            self._id == other._id
            and self._customer_id == other._customer_id
            and self._items == other._items
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self._id!r}, customer_id={self._customer_id!r}, "
            f"items={list(self._items)!r})"
        )
