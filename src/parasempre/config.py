"""Configuration for PARASEMPRE.

Everything is read from the environment at call time so that tests and the
CLI can change it per invocation:

- ``PARASEMPRE_DB_URL``: SQLAlchemy database URL (required).
- ``PARASEMPRE_GROOM_CODE`` / ``PARASEMPRE_BRIDE_CODE``: access codes seeded
  for the two owners at startup (optional).
"""

import os
import sys
from dataclasses import dataclass
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "PARASEMPRE_DB_URL"  # pragma: no mutate
GROOM_CODE_ENV = "PARASEMPRE_GROOM_CODE"  # pragma: no mutate
BRIDE_CODE_ENV = "PARASEMPRE_BRIDE_CODE"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate
ALEMBIC_PACKAGE = "parasempre.adapters.db.alembic"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the PARASEMPRE_DB_URL environment variable is not set."""


@dataclass(frozen=True)
class OwnerCodes:
    """Access codes of the two owner accounts; empty when not configured."""

    groom: str = ""
    bride: str = ""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Raises:
        DatabaseUrlNotSetError: If `PARASEMPRE_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_owner_codes() -> OwnerCodes:
    """Read the owner access codes from the environment (blank if unset)."""
    return OwnerCodes(
        groom=os.environ.get(GROOM_CODE_ENV, "").strip(),
        bride=os.environ.get(BRIDE_CODE_ENV, "").strip(),
    )


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` pointing at the packaged migration scripts.

    Args:
        db_url: SQLAlchemy database URL. May be None only for commands that
            never connect (e.g. ``heads``, ``history``).
        stdout: Stream Alembic writes status lines to; override in tests.

    Returns:
        An `alembic.config.Config` with ``sqlalchemy.url`` and
        ``script_location`` set.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(files(ALEMBIC_PACKAGE)))
    return cfg
