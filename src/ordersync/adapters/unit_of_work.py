"""Units of Work for ORDERSYNC.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection and the
SQLAlchemy record stores, plus an in-memory counterpart that emulates
commit/rollback with snapshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordersync.adapters.record_store.in_memory_adapters import (
    InMemoryOrderItemStore,
    InMemoryOrderStore,
    InMemoryTables,
)
from ordersync.adapters.record_store.sqlalchemy_adapters import (
    SqlAlchemyOrderItemStore,
    SqlAlchemyOrderStore,
)
from ordersync.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Each entry opens a new connection (which begins a transaction on first
    use) and closes it on exit.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.orders = SqlAlchemyOrderStore(self.connection)
        self.order_items = SqlAlchemyOrderItemStore(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work for testing purposes.

    Takes a snapshot of the shared tables on entry; `rollback` restores the
    last committed snapshot and `commit` moves it forward.

    Note: This implementation is not thread-safe.
    """

    def __init__(self, tables: InMemoryTables | None = None):
        self.tables = tables if tables is not None else InMemoryTables()
        self.orders = InMemoryOrderStore(self.tables)
        self.order_items = InMemoryOrderItemStore(self.tables)
        self._committed = self.tables.snapshot()
        self.commits = 0

    def __enter__(self):
        self._committed = self.tables.snapshot()
        return super().__enter__()

    def commit(self):
        self._committed = self.tables.snapshot()
        self.commits += 1

    def rollback(self):
        self.tables.restore(self._committed)
