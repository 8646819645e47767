"""Fixtures for the CLI workflow tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from ordersync.config import DB_URL_ENV_VAR


@pytest.fixture
def activity_log(tmp_path: Path) -> Path:
    """Activity log destination inside the test's temp dir."""
    return tmp_path / "activity.log"


@pytest.fixture
def make_runner(activity_log: Path):
    """Factory for CliRunners with a given database URL ("" means unset)."""

    def _make(db_url: str = "") -> CliRunner:
        return CliRunner(
            env={DB_URL_ENV_VAR: db_url, "ORDERSYNC_ACTIVITY_LOG": str(activity_log)}
        )

    return _make
