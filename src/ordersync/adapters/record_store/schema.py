"""Order aggregate schema.

Defines the ``orders`` and ``order_items`` tables used by ORDERSYNC to persist
the order aggregate. One order row owns many item rows through the
``order_items.order_id`` reference.

Constraints (enforced here):

| Constraint                          | Purpose                                   |
|-------------------------------------|-------------------------------------------|
| UNIQUE(orders.id)                   | order identity                            |
| PK(order_items.order_id, id)        | item identity is unique within its order  |
| FK(order_items.order_id → orders.id)| items always belong to an existing order  |
| CHECK(quantity > 0)                 | mirrors the line item invariant           |

Item rows are deleted explicitly by the repository when reconciliation drops
them; no cascading delete is configured on the reference.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    PrimaryKeyConstraint,
    String,
    Table,
)

from ordersync.adapters.db.metadata import metadata
from ordersync.adapters.db.sa_types import BIGINT_PK, ExactDecimal

__all__ = ["order_items", "orders"]

orders = Table(
    "orders",
    metadata,
    # BIGINT IDENTITY on Postgres, the rowid alias on SQLite
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Insertion sequence; defines the natural scan order.",
    ),
    Column(
        "id",
        String(200),
        nullable=False,
        unique=True,
        comment="Order identity.",
    ),
    Column(
        "customer_id",
        String(200),
        nullable=False,
        comment="Reference to the owning customer.",
    ),
    Column(
        "total",
        ExactDecimal(),
        nullable=False,
        comment="Snapshot of the item total written on create/update.",
    ),
    comment="One row per order aggregate.",
)

order_items = Table(
    "order_items",
    metadata,
    Column(
        "order_id",
        String(200),
        ForeignKey("orders.id"),
        nullable=False,
        comment="Parent order identity.",
    ),
    Column(
        "id",
        String(200),
        nullable=False,
        comment="Item identity, unique within its order.",
    ),
    Column("name", String(500), nullable=False, comment="Display name."),
    Column("price", ExactDecimal(), nullable=False, comment="Unit price."),
    Column(
        "product_id",
        String(200),
        nullable=False,
        comment="Reference to the product.",
    ),
    Column("quantity", Integer, nullable=False, comment="Number of units."),
    Column(
        "position",
        Integer,
        nullable=False,
        default=0,
        comment="Index of the item within its order.",
    ),
    PrimaryKeyConstraint("order_id", "id"),
    CheckConstraint("quantity > 0", name="positive_quantity"),
    Index(None, "order_id", "position"),
    comment="One row per line item.",
)
