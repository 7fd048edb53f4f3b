"""Suite mark for PARASEMPRE unit tests.

Domain, services and CLI helpers, all over in-memory fakes.
"""

from pathlib import Path

import pytest

from tests.helpers.markers import mark_suite

# pylint: disable=unused-argument

SUITE_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark PARASEMPRE tests under `tests/unit/` as `unit`."""
    mark_suite(items, SUITE_ROOT, "unit")
