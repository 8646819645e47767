"""Pytest fixtures for record store contract tests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from ordersync.adapters.record_store.in_memory_adapters import (
    InMemoryOrderItemStore,
    InMemoryOrderStore,
    InMemoryTables,
)
from ordersync.adapters.record_store.sqlalchemy_adapters import (
    SqlAlchemyOrderItemStore,
    SqlAlchemyOrderStore,
)
from ordersync.interfaces.record_store import OrderItemStore, OrderStore

# pylint: disable=redefined-outer-name


@dataclass
class Stores:
    """Both stores of one backend, sharing the same underlying data."""

    orders: OrderStore
    items: OrderItemStore


@pytest.fixture(params=["memory", "sqlite"])
def stores(request: pytest.FixtureRequest, sqlite_engine_memory) -> Iterator[Stores]:
    """Return a fresh pair of stores for the requested backend.

    Current params:
      - `"memory"` → in-memory stores over one `InMemoryTables`
      - `"sqlite"` → SQLAlchemy stores over one SQLite in-memory connection

    Each invocation yields brand-new, empty stores.
    """
    match request.param:
        case "memory":
            tables = InMemoryTables()
            yield Stores(InMemoryOrderStore(tables), InMemoryOrderItemStore(tables))
        case "sqlite":
            with sqlite_engine_memory.begin() as connection:
                yield Stores(
                    SqlAlchemyOrderStore(connection), SqlAlchemyOrderItemStore(connection)
                )
        case _:
            raise ValueError(f"unknown store type: {request.param}")
