"""Pytest fixtures for order repository contract tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from ordersync.adapters.record_store.in_memory_adapters import InMemoryOrderItemStore
from ordersync.adapters.record_store.sqlalchemy_adapters import SqlAlchemyOrderItemStore
from ordersync.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from ordersync.interfaces.record_store import OrderItemStore
from ordersync.service_layer.repositories import OrderRepository

# pylint: disable=redefined-outer-name


@dataclass
class Backend:
    """A repository plus the item store class it writes through."""

    repo: OrderRepository
    item_store_cls: type[OrderItemStore]


@pytest.fixture(params=["memory", "sqlite"])
def backend(request: pytest.FixtureRequest, sqlite_engine_memory) -> Backend:
    """Return a repository over a fresh, empty backend.

    Current params:
      - `"memory"` → `InMemoryUnitOfWork`
      - `"sqlite"` → `SqlAlchemyUnitOfWork` on an in-memory SQLite engine
    """
    match request.param:
        case "memory":
            return Backend(OrderRepository(InMemoryUnitOfWork()), InMemoryOrderItemStore)
        case "sqlite":
            return Backend(
                OrderRepository(SqlAlchemyUnitOfWork(sqlite_engine_memory)),
                SqlAlchemyOrderItemStore,
            )
        case _:
            raise ValueError(f"unknown backend: {request.param}")


@pytest.fixture
def repo(backend: Backend) -> OrderRepository:
    return backend.repo
