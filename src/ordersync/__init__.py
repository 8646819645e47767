"""ORDERSYNC

Persistence for a sales order aggregate (an order and its line items).
Keeps stored rows in step with an in-memory aggregate by reconciling the
persisted item set against the desired one inside a single unit of work.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
