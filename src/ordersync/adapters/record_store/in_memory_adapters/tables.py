"""In-memory shared tables for the in-memory record store adapters."""

from __future__ import annotations

from dataclasses import dataclass, field

from ordersync.interfaces.record_store import OrderItemRow, OrderRow


@dataclass(slots=True)
class InMemoryTables:
    """Shared in-memory backing store for the in-memory record stores.

    A single shared instance should be passed to both `InMemoryOrderStore` and
    `InMemoryOrderItemStore` so they see the same orders and items, the way
    two repositories share one database.

    - ``orders`` is keyed by order id; dict insertion order is the scan order.
      Stored rows carry no items (``items == ()``); items live in ``items``.
    - ``items`` is keyed by ``(order_id, item_id)``.
    """

    orders: dict[str, OrderRow] = field(default_factory=dict)
    items: dict[tuple[str, str], OrderItemRow] = field(default_factory=dict)

    def snapshot(self) -> InMemoryTables:
        """Return a copy of the current contents (rows are immutable)."""
        return InMemoryTables(orders=dict(self.orders), items=dict(self.items))

    def restore(self, snapshot: InMemoryTables) -> None:
        """Replace the current contents with those of `snapshot`, in place."""
        self.orders.clear()
        self.orders.update(snapshot.orders)
        self.items.clear()
        self.items.update(snapshot.items)
