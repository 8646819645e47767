"""Logging setup for the ORDERSYNC CLI.

Two destinations are configured on the root logger:

- the **console** (stderr, rendered by Rich), whose threshold follows the
  ``-v``/``-q`` flags;
- the **activity log**, a plain text file that accumulates what ORDERSYNC did
  to the stored orders across runs: orders created and updated, tables
  created, stored totals found out of line with their items. Only records
  from the ``ordersync`` loggers are written there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

PROJECT_LOGGER = "ordersync"

ACTIVITY_FORMAT = "%(asctime)s %(levelname)-8s %(source)s: %(message)s"


class SourceFilter(logging.Filter):
    """Set ``record.source`` to a short name for the emitting component.

    Project loggers are reduced to their module name
    (``ordersync.service_layer.repositories.order_repository`` becomes
    ``order_repository``), other libraries to their top-level package
    (``sqlalchemy.engine.Engine`` becomes ``sqlalchemy``).
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == PROJECT_LOGGER or record.name.startswith(
            f"{PROJECT_LOGGER}."
        ):
            record.source = record.name.rsplit(".", 1)[-1]
        else:
            record.source = record.name.partition(".")[0]
        return True


def verbosity(verbose: int = 0, quiet: int = 0) -> int:
    """Console level for the given number of ``-v`` and ``-q`` flags.

    WARNING is the baseline; each flag moves one level, clamped to
    DEBUG..CRITICAL.
    """
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def console_handler(
    level: int, *, color: bool = True, show_path: bool = False
) -> RichHandler:
    """Rich handler writing ``[source] message`` lines to stderr."""
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=show_path,
        enable_link_path=False,
        rich_tracebacks=True,
    )
    handler.addFilter(SourceFilter())
    handler.setFormatter(logging.Formatter("[%(source)s] %(message)s"))
    return handler


def activity_handler(path: Path, level: int = logging.INFO) -> logging.FileHandler:
    """File handler appending project records to the activity log at *path*.

    The file (and its directory) is only created once a record is written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setLevel(level)
    handler.addFilter(logging.Filter(PROJECT_LOGGER))
    handler.addFilter(SourceFilter())
    handler.setFormatter(logging.Formatter(ACTIVITY_FORMAT))
    return handler


def configure_logging(
    *,
    level: int = logging.WARNING,
    debug: bool = False,
    color: bool = True,
    activity_log: Path | None = None,
    logger_levels: Mapping[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console and activity handlers on the root logger.

    Args:
        level: Console threshold.
        debug: Lower both destinations to DEBUG and show source locations on
            the console.
        color: Allow colored console output.
        activity_log: Activity log path, or None to keep no activity log.
        logger_levels: Levels set on individual loggers, applying to both
            destinations (e.g. ``{"sqlalchemy": logging.WARNING}``).

    Returns:
        The installed handlers.
    """
    handlers: list[logging.Handler] = [
        console_handler(logging.DEBUG if debug else level, color=color, show_path=debug)
    ]
    if activity_log is not None:
        handlers.append(
            activity_handler(activity_log, logging.DEBUG if debug else logging.INFO)
        )

    # the root passes everything; each handler applies its own threshold
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(logger_level)

    return handlers
