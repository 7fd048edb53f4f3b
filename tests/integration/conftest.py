"""Suite mark for PARASEMPRE tests that touch a real SQLite or Postgres database."""

from pathlib import Path

import pytest

from tests.helpers.markers import mark_suite

# pylint: disable=unused-argument

SUITE_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark PARASEMPRE tests under `tests/integration/` as `integration`."""
    mark_suite(items, SUITE_ROOT, "integration")
