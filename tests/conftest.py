"""Shared pytest configuration for the ORDERSYNC test suite.

Each test is marked after the suite directory it lives in
(``tests/unit/...`` gets ``unit``, ``tests/e2e/...`` gets ``e2e``, ...), so
``pytest -m unit`` selects a suite without per-directory bookkeeping.
"""

from pathlib import Path

import pytest

pytest_plugins = (
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
)

TESTS_ROOT = Path(__file__).resolve().parent

SUITES = ("unit", "contract", "integration", "functional", "e2e")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        suite = path.relative_to(TESTS_ROOT).parts[0]
        if suite in SUITES and item.get_closest_marker(suite) is None:
            item.add_marker(getattr(pytest.mark, suite))


@pytest.fixture
def engine(request: pytest.FixtureRequest):
    """The engine fixture named by an indirect ``engine`` parameter.

    Lets one test run against several backends:
    ``@pytest.mark.parametrize("engine", ["sqlite_engine_file", "postgres_engine"], indirect=True)``
    """
    return request.getfixturevalue(request.param)
