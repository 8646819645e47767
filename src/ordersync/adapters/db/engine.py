"""Engine construction.

Every ORDERSYNC engine is built by `make_engine`. On SQLite it switches on
foreign key enforcement for each new connection (SQLite leaves it off, which
would let item rows reference orders that do not exist) and runs file
databases in write-ahead-log mode so readers do not block the writer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Engine

logger = logging.getLogger(__name__)

SQLITE = "sqlite"

SQLITE_CONNECT_PRAGMAS = (
    "PRAGMA foreign_keys = ON",
    "PRAGMA journal_mode = WAL",
    "PRAGMA synchronous = NORMAL",
)


def backend_name(url: str | URL) -> str:
    """Backend part of a database URL, without the driver (``"sqlite"``, ``"postgresql"``)."""
    return make_url(url).get_backend_name()


def _apply_sqlite_pragmas(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        for pragma in SQLITE_CONNECT_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for *url*, configured for use by the record stores."""
    engine = create_engine(url, echo=echo)
    if backend_name(url) == SQLITE:
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    logger.debug("Engine ready for %s", engine.url.render_as_string(hide_password=True))
    return engine
