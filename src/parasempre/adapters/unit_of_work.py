"""SQLAlchemy-backed Unit of Work for PARASEMPRE.

Provides a context-managed UnitOfWork that opens one SQLAlchemy
Connection per block and binds both stores to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parasempre.adapters.credential_store import SqlAlchemyCredentialStore
from parasempre.adapters.db.errors import store_operation
from parasempre.adapters.guest_store import SqlAlchemyGuestStore
from parasempre.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Blocks must not be nested: each ``with`` opens a fresh connection.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        with store_operation("uow.connect"):
            self.connection = self.engine.connect()
        self.guests = SqlAlchemyGuestStore(self.connection)
        self.credentials = SqlAlchemyCredentialStore(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        with store_operation("uow.commit"):
            self.connection.commit()

    def rollback(self):
        with store_operation("uow.rollback"):
            self.connection.rollback()
