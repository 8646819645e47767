"""Defines the in-memory record store adapter package.

The in-memory stores are suitable for testing, prototyping, and scenarios
where durability is not a concern. Both stores operate on one shared
`InMemoryTables` instance.
"""

from .order_item_store import InMemoryOrderItemStore
from .order_store import InMemoryOrderStore
from .tables import InMemoryTables

__all__ = ["InMemoryOrderItemStore", "InMemoryOrderStore", "InMemoryTables"]
