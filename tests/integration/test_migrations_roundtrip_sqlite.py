"""Alembic round-trip smoke test for SQLite.

This test exercises the full *upgrade → downgrade* path against a temporary,
file-backed SQLite database to ensure:
  - `upgrade head` creates the `guests` and `access_credentials` tables, and
  - `downgrade base` drops them (and associated objects).

We use a file (not :memory:) so Alembic's schema changes persist across
connections within the test.
"""

from __future__ import annotations

from pathlib import Path

from alembic import command
from sqlalchemy import create_engine, text

from parasempre import config

# mypy: disable-error-code=no-untyped-def

TABLES = ("guests", "access_credentials")


def _tables(eng) -> set[str]:
    with eng.begin() as c:
        rows = c.execute(
            text("SELECT name FROM sqlite_master WHERE type='table'")
        ).fetchall()
    return {row[0] for row in rows}


def test_alembic_downgrade_upgrade_roundtrip_sqlite_tmp(tmp_path: Path):
    """Upgrade to head (assert tables exist) → downgrade to base (assert dropped).

    Uses `sqlite_master` to introspect table presence, which is stable on SQLite.
    """

    url = f"sqlite:///{tmp_path / 'parasempre.db'}"
    command.upgrade(config.build_alembic_config(url), "head")
    eng = create_engine(url)

    present = _tables(eng)
    for table in TABLES:
        assert table in present, f"{table} should exist after upgrade"

    command.downgrade(config.build_alembic_config(url), "base")

    present = _tables(eng)
    for table in TABLES:
        assert table not in present, f"{table} should be dropped after downgrade"

    eng.dispose()


def test_upgrade_is_idempotent(tmp_path: Path):
    """Upgrading a database already at head is a no-op."""
    url = f"sqlite:///{tmp_path / 'parasempre.db'}"
    command.upgrade(config.build_alembic_config(url), "head")
    command.upgrade(config.build_alembic_config(url), "head")

    eng = create_engine(url)
    with eng.begin() as c:
        version = c.execute(text("SELECT version_num FROM alembic_version")).scalar()
    eng.dispose()
    assert version == "4f1c2a9d7e3b"
