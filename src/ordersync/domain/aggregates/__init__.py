"""Aggregates package.

The order aggregate root and the line items it owns are re-exported here to
provide a single, convenient import path.
"""

from .line_item import LineItem
from .order import Order

__all__ = ["LineItem", "Order"]
