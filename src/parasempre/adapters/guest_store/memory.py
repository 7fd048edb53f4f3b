"""In-memory GuestStore implementation for testing purposes."""

import dataclasses
import datetime

from parasempre.adapters.memory_store import InMemoryStoreData
from parasempre.interfaces.errors import GuestNameAlreadyTaken, GuestPhoneAlreadyTaken
from parasempre.interfaces.guest_store import (
    Guest,
    GuestChanges,
    GuestStore,
    NewGuest,
)

# pylint: disable=consider-using-assignment-expr


class InMemoryGuestStore(GuestStore):
    """In-memory implementation of the GuestStore interface.

    Enforces the same uniqueness rules as the database constraints.
    """

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def list(self) -> list[Guest]:
        return sorted(
            self._data.guests.values(),
            key=lambda g: (g.created_at, g.id),
            reverse=True,
        )

    def get_by_id(self, guest_id: int) -> Guest | None:
        return self._data.guests.get(guest_id)

    def get_by_phone(self, phone: str) -> Guest | None:
        for guest in self._data.guests.values():
            if guest.phone is not None and guest.phone == phone:
                return guest
        return None

    def get_by_name(self, first_name: str, last_name: str) -> Guest | None:
        for guest in self._data.guests.values():
            if (guest.first_name, guest.last_name) == (first_name, last_name):
                return guest
        return None

    def family_group_exists(self, family_group: int) -> bool:
        return any(g.family_group == family_group for g in self._data.guests.values())

    def next_family_group(self) -> int:
        return max((g.family_group for g in self._data.guests.values()), default=0) + 1

    def create(self, new_guest: NewGuest, creator: str) -> Guest:
        self._check_unique(
            new_guest.first_name, new_guest.last_name, new_guest.phone, exclude=None
        )
        now = datetime.datetime.now(datetime.timezone.utc)
        guest = Guest(
            id=self._data.next_guest_id(),
            first_name=new_guest.first_name,
            last_name=new_guest.last_name,
            phone=new_guest.phone,
            relationship=new_guest.relationship,
            family_group=new_guest.family_group,
            confirmed=False,
            created_by=creator,
            updated_by=creator,
            created_at=now,
            updated_at=now,
        )
        self._data.guests[guest.id] = guest
        return guest

    def update(
        self, guest_id: int, changes: GuestChanges, modifier: str
    ) -> Guest | None:
        current = self._data.guests.get(guest_id)
        if current is None:
            return None
        self._check_unique(
            changes.first_name, changes.last_name, changes.phone, exclude=guest_id
        )
        updated = dataclasses.replace(
            current,
            first_name=changes.first_name,
            last_name=changes.last_name,
            phone=changes.phone,
            relationship=changes.relationship,
            confirmed=changes.confirmed,
            family_group=changes.family_group,
            updated_by=modifier,
            updated_at=datetime.datetime.now(datetime.timezone.utc),
        )
        self._data.guests[guest_id] = updated
        return updated

    def delete(self, guest_id: int) -> bool:
        if self._data.guests.pop(guest_id, None) is None:
            return False
        # ON DELETE SET NULL
        for cred_id, cred in self._data.credentials.items():
            if cred.guest_id == guest_id:
                self._data.credentials[cred_id] = dataclasses.replace(
                    cred, guest_id=None
                )
        return True

    def _check_unique(
        self,
        first_name: str,
        last_name: str,
        phone: str | None,
        exclude: int | None,
    ) -> None:
        for guest in self._data.guests.values():
            if guest.id == exclude:
                continue
            if (guest.first_name, guest.last_name) == (first_name, last_name):
                raise GuestNameAlreadyTaken(first_name, last_name)
            if phone is not None and guest.phone == phone:
                raise GuestPhoneAlreadyTaken(phone)
