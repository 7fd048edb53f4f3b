"""Interface for the Guest Store."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime, timedelta

from parasempre.domain.validation import Relationship

from .unsettable import UNSET, Unsettable, resolve

# pylint: disable=too-many-instance-attributes

# --- Read Model ---


@dataclass(frozen=True, slots=True)
class Guest:
    """Immutable read model for a stored guest.

    Conventions:
      - `phone` is None when the guest has no phone (never an empty string).
      - `created_by` / `updated_by` hold the credential codes of the creator
        and of the last modifier.
      - `created_at` / `updated_at` are UTC tz-aware datetimes.
    """

    id: int
    first_name: str
    last_name: str
    relationship: Relationship
    family_group: int
    created_by: str
    updated_by: str
    created_at: datetime
    updated_at: datetime
    phone: str | None = None
    confirmed: bool = False

    def __post_init__(self) -> None:
        for stamp in (self.created_at, self.updated_at):
            if stamp.tzinfo is None or stamp.utcoffset() != timedelta(0):
                raise ValueError("guest timestamps must be timezone-aware UTC")

    @property
    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"


# --- Write Models ---


@dataclass(frozen=True, slots=True)
class NewGuest:
    """Immutable write model for a guest to be created.

    The family group is always resolved before a NewGuest is built.
    """

    first_name: str
    last_name: str
    relationship: Relationship
    family_group: int
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class GuestChanges:
    """Fully resolved field values to write over an existing guest."""

    first_name: str
    last_name: str
    phone: str | None
    relationship: Relationship
    confirmed: bool
    family_group: int


@dataclass(frozen=True, slots=True)
class GuestPatch:
    """Immutable write model for a partial update of an existing guest.

    Only `phone` may be cleared (set to None); every other field is either
    left ``UNSET`` or given a concrete value.
    """

    first_name: Unsettable[str] = UNSET
    last_name: Unsettable[str] = UNSET
    phone: Unsettable[str] = UNSET
    relationship: Unsettable[Relationship] = UNSET
    confirmed: Unsettable[bool] = UNSET
    family_group: Unsettable[int] = UNSET

    def apply_to(self, head: Guest) -> GuestChanges:
        """Apply the patch to the given guest and return the values to write."""

        def _resolve(field, clearable=False):
            return resolve(
                getattr(self, field),
                getattr(head, field),
                clearable=clearable,
                field=field,
            )

        return GuestChanges(
            first_name=_resolve("first_name"),
            last_name=_resolve("last_name"),
            phone=_resolve("phone", clearable=True),
            relationship=_resolve("relationship"),
            confirmed=_resolve("confirmed"),
            family_group=_resolve("family_group"),
        )


# --- Interface ---


class GuestStore(abc.ABC):
    """Interface for guest persistence.

    Absence is signalled with None (or False for `delete`); genuine failures
    raise `StoreError` subclasses.
    """

    @abc.abstractmethod
    def list(self) -> list[Guest]:
        """Return every guest, most recently created first.

        Returns:
            A possibly empty list; never None.
        """

    @abc.abstractmethod
    def get_by_id(self, guest_id: int) -> Guest | None:
        """Get a guest by id, or None if it does not exist."""

    @abc.abstractmethod
    def get_by_phone(self, phone: str) -> Guest | None:
        """Get the guest using *phone*, or None."""

    @abc.abstractmethod
    def get_by_name(self, first_name: str, last_name: str) -> Guest | None:
        """Get the guest with exactly this first and last name, or None."""

    @abc.abstractmethod
    def family_group_exists(self, family_group: int) -> bool:
        """Return True if at least one guest belongs to *family_group*."""

    @abc.abstractmethod
    def next_family_group(self) -> int:
        """Return ``max(existing family groups, default 0) + 1``."""

    @abc.abstractmethod
    def create(self, new_guest: NewGuest, creator: str) -> Guest:
        """Store a new guest and return the stored record.

        Args:
            new_guest: The guest to create.
            creator: Credential code recorded as creator and last modifier.

        Raises:
            GuestNameAlreadyTaken: If the name pair is already used.
            GuestPhoneAlreadyTaken: If the phone is already used.
        """

    @abc.abstractmethod
    def update(
        self, guest_id: int, changes: GuestChanges, modifier: str
    ) -> Guest | None:
        """Overwrite a guest's fields, stamp the modifier, advance `updated_at`.

        Returns:
            The updated record, or None if *guest_id* does not exist.

        Raises:
            GuestNameAlreadyTaken: If the name pair is used by another guest.
            GuestPhoneAlreadyTaken: If the phone is used by another guest.
        """

    @abc.abstractmethod
    def delete(self, guest_id: int) -> bool:
        """Delete a guest. Returns False if it did not exist."""
