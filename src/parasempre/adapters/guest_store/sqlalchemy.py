"""Implementation of GuestStore using SQLAlchemy Core."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, NoReturn

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError

from parasempre.adapters.db.errors import match_unique_violation, store_operation
from parasempre.adapters.db.schema import guests
from parasempre.domain.validation import Relationship
from parasempre.interfaces.errors import GuestNameAlreadyTaken, GuestPhoneAlreadyTaken
from parasempre.interfaces.guest_store import (
    Guest,
    GuestChanges,
    GuestStore,
    NewGuest,
)

PHONE_UNIQUE = "uq_guests_phone"  # pragma: no mutate
NAME_UNIQUE = "uq_guests_first_name_last_name"  # pragma: no mutate

if TYPE_CHECKING:
    from sqlalchemy import RowMapping
    from sqlalchemy.engine import Connection


class SqlAlchemyGuestStore(GuestStore):
    """GuestStore backed by the ``guests`` table (Postgres and SQLite)."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- lookups ---

    def list(self) -> list[Guest]:
        stmt = select(guests).order_by(guests.c.created_at.desc(), guests.c.id.desc())
        with store_operation("guests.list"):
            rows = self.connection.execute(stmt).mappings().all()
        return [self._row_to_guest(row) for row in rows]

    def get_by_id(self, guest_id: int) -> Guest | None:
        return self._fetch_one("guests.get_by_id", guests.c.id == guest_id)

    def get_by_phone(self, phone: str) -> Guest | None:
        return self._fetch_one("guests.get_by_phone", guests.c.phone == phone)

    def get_by_name(self, first_name: str, last_name: str) -> Guest | None:
        return self._fetch_one(
            "guests.get_by_name",
            guests.c.first_name == first_name,
            guests.c.last_name == last_name,
        )

    def family_group_exists(self, family_group: int) -> bool:
        stmt = (
            select(guests.c.id).where(guests.c.family_group == family_group).limit(1)
        )
        with store_operation("guests.family_group_exists"):
            return self.connection.execute(stmt).first() is not None

    def next_family_group(self) -> int:
        stmt = select(func.coalesce(func.max(guests.c.family_group), 0))
        with store_operation("guests.next_family_group"):
            current = self.connection.execute(stmt).scalar_one()
        return int(current) + 1

    # --- writes ---

    def create(self, new_guest: NewGuest, creator: str) -> Guest:
        now = datetime.datetime.now(datetime.timezone.utc)
        stmt = (
            insert(guests)
            .values(
                first_name=new_guest.first_name,
                last_name=new_guest.last_name,
                phone=new_guest.phone,
                relationship=new_guest.relationship.value,
                family_group=new_guest.family_group,
                confirmed=False,
                created_by=creator,
                updated_by=creator,
                created_at=now,
                updated_at=now,
            )
            .returning(guests)
        )
        with store_operation("guests.create"):
            try:
                row = self.connection.execute(stmt).mappings().one()
            except IntegrityError as e:
                self._raise_from_integrity_error(
                    e, new_guest.first_name, new_guest.last_name, new_guest.phone
                )
        return self._row_to_guest(row)

    def update(
        self, guest_id: int, changes: GuestChanges, modifier: str
    ) -> Guest | None:
        stmt = (
            update(guests)
            .where(guests.c.id == guest_id)
            .values(
                first_name=changes.first_name,
                last_name=changes.last_name,
                phone=changes.phone,
                relationship=changes.relationship.value,
                confirmed=changes.confirmed,
                family_group=changes.family_group,
                updated_by=modifier,
                updated_at=datetime.datetime.now(datetime.timezone.utc),
            )
            .returning(guests)
        )
        with store_operation("guests.update"):
            try:
                row = self.connection.execute(stmt).mappings().one_or_none()
            except IntegrityError as e:
                self._raise_from_integrity_error(
                    e, changes.first_name, changes.last_name, changes.phone
                )
        return None if row is None else self._row_to_guest(row)

    def delete(self, guest_id: int) -> bool:
        stmt = delete(guests).where(guests.c.id == guest_id)
        with store_operation("guests.delete"):
            result = self.connection.execute(stmt)
        return result.rowcount == 1

    # --- internals ---

    def _fetch_one(self, operation: str, *criteria) -> Guest | None:
        stmt = select(guests).where(*criteria)
        with store_operation(operation):
            row = self.connection.execute(stmt).mappings().first()
        return None if row is None else self._row_to_guest(row)

    @staticmethod
    def _row_to_guest(row: RowMapping) -> Guest:
        return Guest(
            id=int(row["id"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            relationship=Relationship(row["relationship"]),
            confirmed=bool(row["confirmed"]),
            family_group=int(row["family_group"]),
            created_by=row["created_by"],
            updated_by=row["updated_by"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    @staticmethod
    def _raise_from_integrity_error(
        integrity_error: IntegrityError,
        first_name: str,
        last_name: str,
        phone: str | None,
    ) -> NoReturn:
        """Raise the port error matching a rejected guest write.

        Raises:
            GuestPhoneAlreadyTaken: If the phone constraint was violated.
            GuestNameAlreadyTaken: If the name-pair constraint was violated.
            IntegrityError: Re-raised for any other integrity failure.
        """
        violation = match_unique_violation(
            integrity_error,
            {
                PHONE_UNIQUE: lambda: GuestPhoneAlreadyTaken(phone or ""),
                NAME_UNIQUE: lambda: GuestNameAlreadyTaken(first_name, last_name),
            },
        )
        if violation is None:
            raise integrity_error
        raise violation from integrity_error
