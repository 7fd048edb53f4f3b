"""Interface for the Access Credential Store."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime

from parasempre.domain.validation import Role, normalize_credential_code

# --- Read Models ---


@dataclass(frozen=True, slots=True)
class AccessCredential:
    """Immutable read model for a stored access credential ("user").

    Conventions:
      - `code` is canonical uppercase.
      - `guest_id` is None for the owner accounts.
    """

    id: int
    role: Role
    code: str
    created_at: datetime
    updated_at: datetime
    guest_id: int | None = None


@dataclass(frozen=True, slots=True)
class RosterEntry:
    """Administrative roster row: a credential with its guest's name."""

    code: str
    role: Role
    first_name: str = ""
    last_name: str = ""


# --- Write Model ---


@dataclass(frozen=True, slots=True)
class NewCredential:
    """Immutable write model for a credential to be created."""

    code: str
    role: Role
    guest_id: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", normalize_credential_code(self.code))
        if self.role is Role.GUEST and self.guest_id is None:
            raise ValueError("guest credentials must be linked to a guest")
        if self.role is not Role.GUEST and self.guest_id is not None:
            raise ValueError("owner credentials cannot be linked to a guest")


# --- Interface ---


class CredentialStore(abc.ABC):
    """Interface for access-credential persistence."""

    @abc.abstractmethod
    def get_by_code(self, code: str) -> AccessCredential | None:
        """Get a credential by its code, or None.

        Note:
            `code` lookup is case-insensitive; implementers should uppercase it.
        """

    @abc.abstractmethod
    def get_by_guest_id(self, guest_id: int) -> AccessCredential | None:
        """Get the credential linked to *guest_id*, or None."""

    @abc.abstractmethod
    def create(self, new_credential: NewCredential) -> AccessCredential:
        """Store a new credential and return the stored record.

        Raises:
            CredentialCodeAlreadyTaken: If the code is already used.
            GuestAlreadyLinked: If the guest already has a credential.
        """

    @abc.abstractmethod
    def list_with_guest_names(self) -> list[RosterEntry]:
        """Return every credential joined with its guest's name.

        Ordered by role value, then code. Owner accounts have empty names.
        """
