"""Test the bootstrap functions."""

from decimal import Decimal

import pytest

from ordersync import config
from ordersync.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from ordersync.bootstrap import build_order_repository, build_write_uow
from ordersync.domain.aggregates import LineItem, Order
from ordersync.service_layer.repositories import OrderRepository

# pylint: disable=redefined-outer-name


class TestBuildWriteUoW:
    """Tests for the build_write_uow function."""

    @staticmethod
    def test_build_write_uow_returns_uow():
        """A SQLAlchemy unit of work is built for the given URL."""
        uow = build_write_uow(url="sqlite:///:memory:")
        assert isinstance(uow, SqlAlchemyUnitOfWork)
        assert uow.engine.dialect.name == "sqlite"

    @staticmethod
    def test_build_write_uow_defaults_to_environment(monkeypatch, sqlite_url):
        monkeypatch.setenv(config.DB_URL_ENV_VAR, sqlite_url)
        assert str(build_write_uow().engine.url) == sqlite_url


class TestBuildOrderRepository:
    """Tests for the build_order_repository function."""

    @staticmethod
    def test_uses_given_engine(sqlite_engine_file):
        """An existing engine is reused rather than a new one built."""
        repo = build_order_repository(engine=sqlite_engine_file)
        assert repo.uow.engine is sqlite_engine_file

    @staticmethod
    def test_uses_given_uow():
        """An explicit unit of work wins over any URL."""
        uow = InMemoryUnitOfWork()
        repo = build_order_repository(uow=uow)
        assert isinstance(repo, OrderRepository)
        assert repo.uow is uow

    @staticmethod
    def test_uses_url_from_environment(monkeypatch, sqlite_url):
        """Without arguments, the URL comes from ORDERSYNC_DB_URL."""
        monkeypatch.setenv(config.DB_URL_ENV_VAR, sqlite_url)
        repo = build_order_repository()
        assert str(repo.uow.engine.url) == sqlite_url

    @staticmethod
    def test_missing_url_raises(monkeypatch):
        """No URL, no unit of work and no environment variable is an error."""
        monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
        with pytest.raises(config.DatabaseUrlNotSetError):
            build_order_repository()

    @staticmethod
    def test_built_repository_round_trips(sqlite_engine_file):
        """A repository built from a URL persists orders to that database."""
        repo = build_order_repository(str(sqlite_engine_file.url))
        order = Order("o-1", "c-1", [LineItem("a", "A", Decimal("1.25"), "p-a", 4)])

        repo.create(order)

        assert build_order_repository(str(sqlite_engine_file.url)).find("o-1") == order
