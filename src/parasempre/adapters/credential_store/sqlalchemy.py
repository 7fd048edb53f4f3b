"""Implementation of CredentialStore using SQLAlchemy Core."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, NoReturn

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from parasempre.adapters.db.errors import match_unique_violation, store_operation
from parasempre.adapters.db.schema import access_credentials, guests
from parasempre.domain.validation import Role
from parasempre.interfaces.credential_store import (
    AccessCredential,
    CredentialStore,
    NewCredential,
    RosterEntry,
)
from parasempre.interfaces.errors import CredentialCodeAlreadyTaken, GuestAlreadyLinked

CODE_UNIQUE = "uq_access_credentials_code"  # pragma: no mutate
GUEST_LINK_UNIQUE = "uq_access_credentials_guest_id"  # pragma: no mutate

if TYPE_CHECKING:
    from sqlalchemy import RowMapping
    from sqlalchemy.engine import Connection


class SqlAlchemyCredentialStore(CredentialStore):
    """CredentialStore backed by the ``access_credentials`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def get_by_code(self, code: str) -> AccessCredential | None:
        stmt = select(access_credentials).where(
            access_credentials.c.code == code.upper()
        )
        with store_operation("credentials.get_by_code"):
            row = self.connection.execute(stmt).mappings().first()
        return None if row is None else self._row_to_credential(row)

    def get_by_guest_id(self, guest_id: int) -> AccessCredential | None:
        stmt = select(access_credentials).where(
            access_credentials.c.guest_id == guest_id
        )
        with store_operation("credentials.get_by_guest_id"):
            row = self.connection.execute(stmt).mappings().first()
        return None if row is None else self._row_to_credential(row)

    def create(self, new_credential: NewCredential) -> AccessCredential:
        now = datetime.datetime.now(datetime.timezone.utc)
        stmt = (
            insert(access_credentials)
            .values(
                code=new_credential.code,
                role=new_credential.role.value,
                guest_id=new_credential.guest_id,
                created_at=now,
                updated_at=now,
            )
            .returning(access_credentials)
        )
        with store_operation("credentials.create"):
            try:
                row = self.connection.execute(stmt).mappings().one()
            except IntegrityError as e:
                self._raise_from_integrity_error(e, new_credential)
        return self._row_to_credential(row)

    def list_with_guest_names(self) -> list[RosterEntry]:
        stmt = (
            select(
                access_credentials.c.code,
                access_credentials.c.role,
                guests.c.first_name,
                guests.c.last_name,
            )
            .select_from(
                access_credentials.outerjoin(
                    guests, access_credentials.c.guest_id == guests.c.id
                )
            )
            .order_by(access_credentials.c.role, access_credentials.c.code)
        )
        with store_operation("credentials.list_with_guest_names"):
            rows = self.connection.execute(stmt).all()
        return [
            RosterEntry(
                code=row.code,
                role=Role(row.role),
                first_name=row.first_name or "",
                last_name=row.last_name or "",
            )
            for row in rows
        ]

    @staticmethod
    def _row_to_credential(row: RowMapping) -> AccessCredential:
        return AccessCredential(
            id=int(row["id"]),
            role=Role(row["role"]),
            code=row["code"],
            guest_id=None if row["guest_id"] is None else int(row["guest_id"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    @staticmethod
    def _raise_from_integrity_error(
        integrity_error: IntegrityError, new_credential: NewCredential
    ) -> NoReturn:
        """Raise the port error matching a rejected credential insert.

        Raises:
            GuestAlreadyLinked: If the guest already has a credential.
            CredentialCodeAlreadyTaken: If the code is in use.
            IntegrityError: Re-raised for any other integrity failure.
        """
        violation = match_unique_violation(
            integrity_error,
            {
                GUEST_LINK_UNIQUE: lambda: GuestAlreadyLinked(new_credential.guest_id or 0),
                CODE_UNIQUE: lambda: CredentialCodeAlreadyTaken(new_credential.code),
            },
        )
        if violation is None:
            raise integrity_error
        raise violation from integrity_error
