"""Suite mark for black-box tests of the `parasempre` command as a user runs it."""

from pathlib import Path

import pytest

from tests.helpers.markers import mark_suite

# pylint: disable=unused-argument

SUITE_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark PARASEMPRE tests under `tests/functional/` as `functional`."""
    mark_suite(items, SUITE_ROOT, "functional")
