"""Helpers shared by the CLI commands."""

from .db_url import sanitize_url
from .logger_levels import LoggerLevel, resolve_logger_levels
from .messages import error, success, warn

__all__ = [
    "LoggerLevel",
    "error",
    "resolve_logger_levels",
    "sanitize_url",
    "success",
    "warn",
]
