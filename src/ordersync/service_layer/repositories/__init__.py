"""Package for repository implementations."""

from .errors import DuplicateOrderError, OrderNotFoundError, RepositoryError
from .order_repository import OrderRepository

__all__ = [
    "DuplicateOrderError",
    "OrderNotFoundError",
    "OrderRepository",
    "RepositoryError",
]
