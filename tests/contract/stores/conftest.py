"""Pytest fixtures for GuestStore and CredentialStore contract tests.

Provided fixtures
-----------------
- **stores**: Parametrized factory returning a fresh pair of stores that
  share one backend, so foreign-key behavior and the roster join can be
  checked. Backends:

  - ``"memory"``: the in-memory adapters over one `InMemoryStoreData`;
  - ``"sqlite_engine_memory"`` / ``"sqlite_engine_file"`` /
    ``"postgres_engine"``: the SQLAlchemy adapters over one connection
    from the named engine fixture.

SQL connections run in AUTOCOMMIT mode: every statement stands alone, so a
write rejected by a constraint does not poison the rest of the test (as it
would inside a Postgres transaction).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from parasempre.adapters.credential_store import (
    InMemoryCredentialStore,
    SqlAlchemyCredentialStore,
)
from parasempre.adapters.guest_store import InMemoryGuestStore, SqlAlchemyGuestStore
from parasempre.adapters.memory_store import InMemoryStoreData
from parasempre.interfaces.credential_store import CredentialStore
from parasempre.interfaces.guest_store import GuestStore

BACKENDS = ["memory", "sqlite_engine_memory", "sqlite_engine_file", "postgres_engine"]


@dataclass(frozen=True)
class Stores:
    """A guest store and a credential store over the same backend."""

    guests: GuestStore
    credentials: CredentialStore


@pytest.fixture(params=BACKENDS)
def stores(request: pytest.FixtureRequest) -> Iterator[Stores]:
    """Return fresh stores for the requested backend."""

    match request.param:
        case "memory":
            data = InMemoryStoreData()
            yield Stores(InMemoryGuestStore(data), InMemoryCredentialStore(data))
        case "sqlite_engine_memory" | "sqlite_engine_file" | "postgres_engine":
            engine = request.getfixturevalue(request.param)
            with engine.connect() as conn:
                conn = conn.execution_options(isolation_level="AUTOCOMMIT")
                yield Stores(
                    SqlAlchemyGuestStore(conn), SqlAlchemyCredentialStore(conn)
                )
        case _:
            raise ValueError(f"unknown backend: {request.param}")
