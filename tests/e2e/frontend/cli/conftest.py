"""Fixtures for end-to-end tests of the `parasempre` command.

Every invocation runs against a temp-file SQLite database migrated to head,
with the groom's and bride's codes seeded from the environment.
"""

import pytest
from click.testing import CliRunner

from parasempre.entrypoints.cli.main import parasempre

# pylint: disable=redefined-outer-name

GROOM = "NOIVO"
BRIDE = "NOIVA"


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def app_env(sqlite_url, tmp_path):
    """Environment for commands that need a migrated database.

    The flight recorder writes to ``parasempre.log`` in the test's temp dir
    unless a test passes its own ``--log-path``.
    """
    return {
        "PARASEMPRE_DB_URL": sqlite_url,
        "PARASEMPRE_GROOM_CODE": GROOM,
        "PARASEMPRE_BRIDE_CODE": BRIDE,
        "PARASEMPRE_LOG_PATH": str(tmp_path / "parasempre.log"),
    }


@pytest.fixture
def invoke(runner, app_env):
    """Invoke the `parasempre` command with `app_env` applied."""

    def _invoke(args, **kwargs):
        env = {**app_env, **kwargs.pop("env", {})}
        return runner.invoke(parasempre, args, env=env, **kwargs)

    return _invoke
