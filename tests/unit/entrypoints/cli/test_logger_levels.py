"""Unit tests for the ``NAME=LEVEL`` option type."""

import logging

import click
import pytest
from click.testing import CliRunner

from ordersync.entrypoints.cli.helpers import LoggerLevel, resolve_logger_levels


@click.command()
@click.option("-L", "pairs", type=LoggerLevel(), multiple=True, envvar="LEVELS")
def show_levels(pairs):
    for name, level in resolve_logger_levels(pairs).items():
        click.echo(f"{name}={logging.getLevelName(level)}")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("sqlalchemy.engine=INFO", ("sqlalchemy.engine", logging.INFO)),
        ("ordersync=debug", ("ordersync", logging.DEBUG)),
        (" ordersync = Error ", ("ordersync", logging.ERROR)),
    ],
)
def test_convert(value, expected):
    assert LoggerLevel().convert(value, None, None) == expected


def test_converted_pairs_pass_through():
    """Defaults given as pairs are not converted twice."""
    pair = ("ordersync", logging.INFO)
    assert LoggerLevel().convert(pair, None, None) is pair


@pytest.mark.parametrize(
    ("value", "message"),
    [
        ("ordersync", "is not of the form NAME=LEVEL"),
        ("=INFO", "is not of the form NAME=LEVEL"),
        ("ordersync=LOUD", "unknown level 'LOUD'"),
        ("ordersync=", "unknown level ''"),
    ],
)
def test_convert_rejects(value, message):
    with pytest.raises(click.BadParameter, match=message):
        LoggerLevel().convert(value, None, None)


def test_sqlalchemy_defaults_to_warning():
    assert resolve_logger_levels(()) == {"sqlalchemy": logging.WARNING}


def test_user_pairs_override_defaults_and_last_pair_wins():
    levels = resolve_logger_levels(
        (("sqlalchemy", logging.INFO), ("ordersync", logging.DEBUG), ("ordersync", logging.ERROR))
    )
    assert levels == {"sqlalchemy": logging.INFO, "ordersync": logging.ERROR}


def test_environment_variable_is_split_on_whitespace():
    result = CliRunner().invoke(
        show_levels, env={"LEVELS": "sqlalchemy=ERROR  ordersync=INFO"}
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["sqlalchemy=ERROR", "ordersync=INFO"]
