"""ORDERSYNC CLI entry point.

The top-level ``ordersync`` group configures logging and hosts the command
groups:

- ``ordersync db``: create and inspect the order tables (init/status).
- ``ordersync orders``: read stored orders (list/show).

Examples
    $ ordersync db init
    $ ordersync -v orders show o-1
    $ ordersync -L sqlalchemy.engine=INFO orders list
"""

import logging
import sys
from pathlib import Path

import click
import click_extra as clickx
import sqlalchemy
from platformdirs import user_log_dir

from ordersync import __version__
from ordersync.logging import configure_logging, verbosity

from .db import db as db_group
from .helpers import LoggerLevel, resolve_logger_levels
from .orders import orders as orders_group

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LOG = Path(user_log_dir("ordersync", appauthor=False)) / "activity.log"

HELP = """ORDERSYNC command-line interface.

    ORDERSYNC persists customer orders and their line items in a relational
    store. Updates reconcile the stored items against the order's current
    items, and every save runs in a single transaction.

    What a run changes or finds (tables created, stored totals out of line
    with their items) is appended to the activity log.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Show less on the console: -q for ERROR only, -qq for CRITICAL only.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log everything at DEBUG, on the console and in the activity log, "
    "with source locations.",
)
@click.option(
    "--activity-log",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_ACTIVITY_LOG,
    envvar="ORDERSYNC_ACTIVITY_LOG",
    show_default=True,
    show_envvar=True,
    help="File the activity log is appended to.",
)
@click.option(
    "--no-activity-log",
    is_flag=True,
    help="Keep no activity log for this run.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    type=LoggerLevel(),
    multiple=True,
    envvar="ORDERSYNC_LOGGER_LEVELS",
    show_envvar=True,
    help="Set the level of one logger, for the console and the activity log "
    "alike. Repeatable, e.g. -L sqlalchemy.engine=INFO -L ordersync=DEBUG. "
    "sqlalchemy is kept at WARNING unless overridden.",
)
@clickx.pass_context
def ordersync(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    activity_log: Path,
    no_activity_log: bool,
    logger_levels: tuple[tuple[str, int], ...],
) -> None:
    """ORDERSYNC command-line interface."""
    configure_logging(
        level=verbosity(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        activity_log=None if no_activity_log else activity_log,
        logger_levels=resolve_logger_levels(logger_levels),
    )
    logger.debug(
        "ordersync %s on Python %s with SQLAlchemy %s",
        __version__,
        sys.version.split()[0],
        sqlalchemy.__version__,
    )

    # closes the activity log once the command finishes
    ctx.call_on_close(logging.shutdown)


ordersync.add_command(db_group)
ordersync.add_command(orders_group)
