"""ORDERSYNC Record Store Interface Package"""

from .errors import (
    DuplicateKeyError,
    RecordNotFoundError,
    RecordStoreError,
    StorageFailureError,
)
from .record_store import (
    OrderItemRow,
    OrderItemStore,
    OrderRow,
    OrderStore,
)

__all__ = [
    "DuplicateKeyError",
    "OrderItemRow",
    "OrderItemStore",
    "OrderRow",
    "OrderStore",
    "RecordNotFoundError",
    "RecordStoreError",
    "StorageFailureError",
]
