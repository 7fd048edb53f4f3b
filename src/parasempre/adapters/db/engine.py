"""Engine factory.

All code that needs an Engine goes through `make_engine` so that SQLite
connections get the same PRAGMAs everywhere. In particular the
``foreign_keys`` PRAGMA is what makes ``ON DELETE SET NULL`` on
``access_credentials.guest_id`` work under SQLite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_BACKEND = "sqlite"

_SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys=ON;",
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA temp_store=MEMORY;",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if *url* points at a SQLite database (any driver)."""
    return make_url(str(url)).get_backend_name() == SQLITE_BACKEND


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for *url*.

    For SQLite, every new DBAPI connection enables foreign keys, WAL
    journaling, ``synchronous=NORMAL`` and in-memory temp storage.

    Args:
        url: Database connection URL.
        echo: If True, log SQL statements.

    Returns:
        Engine: The configured engine.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            for pragma in _SQLITE_PRAGMAS:
                cur.execute(pragma)
            cur.close()

    return engine
