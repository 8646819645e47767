"""Defines the SQLAlchemy record store adapter package.

This package contains SQLAlchemy Core implementations of the order and order
item record stores. They execute on a caller-supplied `Connection` and never
commit on their own; the unit of work owns the transaction.
"""

from .order_item_store import SqlAlchemyOrderItemStore
from .order_store import SqlAlchemyOrderStore

__all__ = [
    "SqlAlchemyOrderItemStore",
    "SqlAlchemyOrderStore",
]
