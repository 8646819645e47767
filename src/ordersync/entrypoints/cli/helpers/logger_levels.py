"""The ``NAME=LEVEL`` parameter type behind ``ordersync -L``."""

from __future__ import annotations

import logging

import click

# loggers quietened unless the user says otherwise
DEFAULT_LOGGER_LEVELS = {"sqlalchemy": logging.WARNING}

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggerLevel(click.ParamType):
    """Converts ``sqlalchemy.engine=info`` into ``("sqlalchemy.engine", 20)``.

    Level names are case-insensitive. Used with ``multiple=True``, the option
    collects a tuple of pairs; values read from an environment variable are
    split on whitespace.
    """

    name = "name=level"

    def convert(self, value, param, ctx) -> tuple[str, int]:
        if isinstance(value, tuple):
            return value

        logger_name, sep, level_name = value.partition("=")
        logger_name = logger_name.strip()
        if not sep or not logger_name:
            self.fail(f"{value!r} is not of the form NAME=LEVEL", param, ctx)

        level_name = level_name.strip().upper()
        if level_name not in LEVEL_NAMES:
            self.fail(
                f"unknown level {level_name!r} for {logger_name!r}, "
                f"expected one of {', '.join(LEVEL_NAMES)}",
                param,
                ctx,
            )
        return logger_name, logging.getLevelName(level_name)


def resolve_logger_levels(pairs: tuple[tuple[str, int], ...]) -> dict[str, int]:
    """Defaults overlaid with the user's pairs; the last pair for a name wins."""
    return {**DEFAULT_LOGGER_LEVELS, **dict(pairs)}
