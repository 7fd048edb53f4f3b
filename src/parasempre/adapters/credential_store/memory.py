"""In-memory CredentialStore implementation for testing purposes."""

import datetime

from parasempre.adapters.memory_store import InMemoryStoreData
from parasempre.interfaces.credential_store import (
    AccessCredential,
    CredentialStore,
    NewCredential,
    RosterEntry,
)
from parasempre.interfaces.errors import CredentialCodeAlreadyTaken, GuestAlreadyLinked


class InMemoryCredentialStore(CredentialStore):
    """In-memory implementation of the CredentialStore interface."""

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def get_by_code(self, code: str) -> AccessCredential | None:
        code = code.upper()
        for cred in self._data.credentials.values():
            if cred.code == code:
                return cred
        return None

    def get_by_guest_id(self, guest_id: int) -> AccessCredential | None:
        for cred in self._data.credentials.values():
            if cred.guest_id == guest_id:
                return cred
        return None

    def create(self, new_credential: NewCredential) -> AccessCredential:
        if self.get_by_code(new_credential.code) is not None:
            raise CredentialCodeAlreadyTaken(new_credential.code)
        if (
            new_credential.guest_id is not None
            and self.get_by_guest_id(new_credential.guest_id) is not None
        ):
            raise GuestAlreadyLinked(new_credential.guest_id)

        now = datetime.datetime.now(datetime.timezone.utc)
        cred = AccessCredential(
            id=self._data.next_credential_id(),
            role=new_credential.role,
            code=new_credential.code,
            guest_id=new_credential.guest_id,
            created_at=now,
            updated_at=now,
        )
        self._data.credentials[cred.id] = cred
        return cred

    def list_with_guest_names(self) -> list[RosterEntry]:
        entries = []
        for cred in self._data.credentials.values():
            guest = (
                self._data.guests.get(cred.guest_id)
                if cred.guest_id is not None
                else None
            )
            entries.append(
                RosterEntry(
                    code=cred.code,
                    role=cred.role,
                    first_name=guest.first_name if guest else "",
                    last_name=guest.last_name if guest else "",
                )
            )
        return sorted(entries, key=lambda e: (e.role.value, e.code))
