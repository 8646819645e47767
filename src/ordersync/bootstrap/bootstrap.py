"""Wire the order repository to a unit of work."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordersync import config
from ordersync.adapters.db.engine import make_engine
from ordersync.adapters.unit_of_work import SqlAlchemyUnitOfWork
from ordersync.service_layer.repositories import OrderRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Engine

    from ordersync.interfaces.unit_of_work import AbstractUnitOfWork


def build_write_uow(
    url: str | URL | None = None, *, engine: Engine | None = None
) -> AbstractUnitOfWork:
    """Build a unit of work over `engine`, or over a new engine for `url`.

    Without either, the URL comes from `ORDERSYNC_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no engine, URL or environment variable is given.
    """
    if engine is None:
        engine = make_engine(url if url is not None else config.get_db_url())
    return SqlAlchemyUnitOfWork(engine)


def build_order_repository(
    url: str | URL | None = None,
    uow: AbstractUnitOfWork | None = None,
    *,
    engine: Engine | None = None,
) -> OrderRepository:
    """Build an order repository.

    Args:
        url: Database URL; defaults to `ORDERSYNC_DB_URL`.
        uow: An existing unit of work; `url` and `engine` are then ignored.
        engine: An existing engine to build the unit of work on; `url` is
            then ignored.

    Raises:
        DatabaseUrlNotSetError: If none of `url`, `uow`, `engine` or the
            environment variable is provided.
    """
    if uow is None:
        uow = build_write_uow(url, engine=engine)
    return OrderRepository(uow)
