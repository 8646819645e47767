"""One-line status notices printed by the CLI commands.

Notices go to stderr so that reports written to stdout stay pipeable. Each
notice starts with a marker; streams that cannot encode the emoji marker get
an ASCII one instead.
"""

import click

# kind -> (emoji, ascii fallback, color)
NOTICE_STYLES = {
    "warning": ("⚠️", "[!]", "yellow"),
    "success": ("✅", "[OK]", "green"),
    "error": ("❌", "[X]", "red"),
}


def marker(kind: str) -> str:
    """Marker for a notice of *kind*, as supported by stderr's encoding."""
    emoji, fallback, _ = NOTICE_STYLES[kind]
    stream = click.get_text_stream("stderr")
    try:
        emoji.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return fallback
    return emoji


def _notice(kind: str, msg: str) -> None:
    color = NOTICE_STYLES[kind][2]
    click.secho(f"{marker(kind)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    _notice("warning", msg)


def success(msg: str) -> None:
    _notice("success", msg)


def error(msg: str) -> None:
    _notice("error", msg)
