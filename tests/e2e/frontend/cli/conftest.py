"""Fixtures for end-to-end tests of the CLI's logging options.

The tests drive real commands against a file database holding one order
whose stored total disagrees with its items, so that reading it logs a
WARNING from the repository.
"""

import logging
from decimal import Decimal

import pytest
from click.testing import CliRunner
from sqlalchemy import update

from ordersync.adapters.record_store.schema import orders
from ordersync.adapters.unit_of_work import SqlAlchemyUnitOfWork
from ordersync.config import DB_URL_ENV_VAR
from ordersync.domain.aggregates import LineItem, Order
from ordersync.service_layer.repositories import OrderRepository

# pylint: disable=redefined-outer-name

STALE_ORDER_ID = "o-stale"

# loggers whose level the CLI may change for the rest of the process
TOUCHED_LOGGERS = ("ordersync", "sqlalchemy", "sqlalchemy.engine")


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo `-L` overrides applied by the CLI during a test."""
    saved = {name: logging.getLogger(name).level for name in TOUCHED_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def stale_order_db(sqlite_engine_file, sqlite_url) -> str:
    """URL of a database with one order whose stored total is wrong."""
    OrderRepository(SqlAlchemyUnitOfWork(sqlite_engine_file)).create(
        Order(
            STALE_ORDER_ID,
            "carol",
            [LineItem("1", "Crate", Decimal("12.00"), "p-crate", 2)],
        )
    )
    with sqlite_engine_file.begin() as conn:
        conn.execute(
            update(orders)
            .where(orders.c.id == STALE_ORDER_ID)
            .values(total=Decimal("999.00"))
        )
    return sqlite_url


@pytest.fixture
def activity_log(tmp_path):
    return tmp_path / "logs" / "activity.log"


@pytest.fixture
def runner(stale_order_db, activity_log) -> CliRunner:
    """Runner bound to the seeded database and a temporary activity log.

    A wide terminal keeps Rich from wrapping log lines.
    """
    return CliRunner(
        env={
            DB_URL_ENV_VAR: stale_order_db,
            "ORDERSYNC_ACTIVITY_LOG": str(activity_log),
            "COLUMNS": "240",
        }
    )
