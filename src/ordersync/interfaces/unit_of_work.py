"""Unit of Work interface for ORDERSYNC.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the order and order item record stores, with abstract
commit/rollback methods.
"""

from __future__ import annotations

import abc
import logging

from .record_store import OrderItemStore, OrderStore

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    orders: OrderStore
    order_items: OrderItemStore

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, exc_type, exc, tb):
        """Exit the unit of work context.

        Default behavior is to roll back on exit. After a commit this
        discards nothing.
        """
        if exc_type is not None:
            logger.debug("Rolling back %s after %s", type(self).__name__, exc_type.__name__)
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
