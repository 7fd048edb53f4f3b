"""Guest directory service.

Owns the guest records: listing, lookup, creation, partial update and
deletion, together with the rules that must hold afterwards (unique full
name, unique phone, existing family group).
"""

from __future__ import annotations

import logging
from typing import Protocol

from parasempre.domain.errors import (
    DuplicateGuestNameError,
    DuplicatePhoneError,
    FamilyGroupNotFoundError,
    ForbiddenError,
    GuestRecordNotFoundError,
    ValidationError,
)
from parasempre.domain.validation import (
    PHONE_FORMAT_MSG,
    Relationship,
    clean_text,
    is_valid_phone,
    normalize_credential_code,
)
from parasempre.interfaces.guest_store import Guest, GuestPatch, NewGuest
from parasempre.interfaces.unit_of_work import AbstractUnitOfWork
from parasempre.interfaces.unsettable import UNSET, Unsettable, is_set

from . import commands
from .failures import handle_failures

logger = logging.getLogger(__name__)

# pylint: disable=consider-using-assignment-expr


class CredentialLookup(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that can tell whether a caller credential exists."""

    def exists_by_credential(self, code: str) -> bool:
        """Return True if *code* belongs to a registered credential."""
        ...  # pylint: disable=unnecessary-ellipsis


# ============================================================================
#                              Input validation
# ============================================================================


def _require_name(value: str, field: str) -> str:
    value = clean_text(value, field)
    if not value:
        raise ValidationError(field, f"{field.replace('_', ' ')} is required")
    return value


def _optional_phone(value: str | None) -> str | None:
    """Trim a phone number; empty means "no phone"."""
    phone = clean_text(value, "phone")
    if not phone:
        return None
    if not is_valid_phone(phone):
        raise ValidationError("phone", PHONE_FORMAT_MSG)
    return phone


def _require_family_group(value: object) -> int:
    # bool is an int subclass but never a family group
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError("family_group", "family group must be a positive integer")
    return value


def _build_patch(cmd: commands.UpdateGuest) -> GuestPatch:
    """Validate the supplied fields of an update and type them.

    ``None`` on a field that cannot be cleared is passed through so that
    `GuestPatch.apply_to` rejects it.
    """

    def _set(value: Unsettable, check) -> Unsettable:
        if not is_set(value) or value is None:
            return value
        return check(value)

    phone: Unsettable[str] = UNSET
    if is_set(cmd.phone):
        phone = _optional_phone(cmd.phone)  # type: ignore[arg-type]

    confirmed = cmd.confirmed
    if is_set(confirmed) and confirmed is not None and not isinstance(confirmed, bool):
        raise ValidationError("confirmed", "confirmed must be true or false")

    return GuestPatch(
        first_name=_set(cmd.first_name, lambda v: _require_name(v, "first_name")),
        last_name=_set(cmd.last_name, lambda v: _require_name(v, "last_name")),
        phone=phone,
        relationship=_set(cmd.relationship, Relationship.parse),
        confirmed=confirmed,
        family_group=_set(cmd.family_group, _require_family_group),
    )


# ============================================================================
#                               Guest directory
# ============================================================================


class GuestDirectory:
    """Use-cases over the guest list.

    Args:
        uow: Unit of work giving access to the guest store. Each operation
            opens its own block on it.
        access: Credential lookup used to authorize mutations (normally the
            `AccessRegistry`).
    """

    def __init__(self, uow: AbstractUnitOfWork, access: CredentialLookup) -> None:
        self.uow = uow
        self.access = access

    # --- queries ---

    def list_guests(self) -> list[Guest]:
        """Return every guest, most recently created first."""
        with handle_failures("guests.list"), self.uow as uow:
            return uow.guests.list()

    def get_by_id(self, guest_id: int) -> Guest:
        """Return one guest.

        Raises:
            GuestRecordNotFoundError: If *guest_id* does not exist.
        """
        with handle_failures("guests.get"), self.uow as uow:
            if (guest := uow.guests.get_by_id(guest_id)) is None:
                raise GuestRecordNotFoundError(guest_id)
            return guest

    # --- commands ---

    def create(self, cmd: commands.CreateGuest, caller: str) -> Guest:
        """Add a guest to the list on behalf of *caller*.

        When `cmd.family_group` is None the guest opens a new family group
        numbered one past the highest existing group.

        Raises:
            ValidationError: If a field is missing or malformed.
            ForbiddenError: If *caller* is not a registered credential.
            DuplicateGuestNameError: If the full name is already used.
            DuplicatePhoneError: If the phone is already used.
            FamilyGroupNotFoundError: If an explicit group has no members.
            InternalError: If storage fails.
        """
        with handle_failures("guests.create"):
            first_name = _require_name(cmd.first_name, "first_name")
            last_name = _require_name(cmd.last_name, "last_name")
            phone = _optional_phone(cmd.phone)
            relationship = Relationship.parse(cmd.relationship)
            family_group = (
                None
                if cmd.family_group is None
                else _require_family_group(cmd.family_group)
            )
            caller = self._authorize(caller)

            with self.uow as uow:
                if uow.guests.get_by_name(first_name, last_name) is not None:
                    raise DuplicateGuestNameError(first_name, last_name)
                if phone is not None and uow.guests.get_by_phone(phone) is not None:
                    raise DuplicatePhoneError(phone)

                if family_group is None:
                    family_group = uow.guests.next_family_group()
                elif not uow.guests.family_group_exists(family_group):
                    raise FamilyGroupNotFoundError(family_group)

                guest = uow.guests.create(
                    NewGuest(
                        first_name=first_name,
                        last_name=last_name,
                        phone=phone,
                        relationship=relationship,
                        family_group=family_group,
                    ),
                    creator=caller,
                )
                uow.commit()

        logger.info(
            "Guest %d created by %s (family group %d)",
            guest.id,
            caller,
            guest.family_group,
        )
        return guest

    def update(self, guest_id: int, cmd: commands.UpdateGuest, caller: str) -> Guest:
        """Change the supplied fields of a guest on behalf of *caller*.

        Raises:
            ValidationError: If a supplied field is malformed, or a field that
                cannot be cleared is set to None.
            ForbiddenError: If *caller* is not a registered credential.
            GuestRecordNotFoundError: If *guest_id* does not exist.
            DuplicateGuestNameError: If the resulting full name belongs to
                another guest.
            DuplicatePhoneError: If the phone belongs to another guest.
            FamilyGroupNotFoundError: If a new group has no members.
            InternalError: If storage fails.
        """
        with handle_failures("guests.update"):
            patch = _build_patch(cmd)
            caller = self._authorize(caller)

            with self.uow as uow:
                head = uow.guests.get_by_id(guest_id)
                if head is None:
                    raise GuestRecordNotFoundError(guest_id)

                changes = patch.apply_to(head)

                if is_set(patch.first_name) or is_set(patch.last_name):
                    other = uow.guests.get_by_name(
                        changes.first_name, changes.last_name
                    )
                    if other is not None and other.id != guest_id:
                        raise DuplicateGuestNameError(
                            changes.first_name, changes.last_name
                        )

                if is_set(patch.phone) and changes.phone is not None:
                    other = uow.guests.get_by_phone(changes.phone)
                    if other is not None and other.id != guest_id:
                        raise DuplicatePhoneError(changes.phone)

                if (
                    changes.family_group != head.family_group
                    and not uow.guests.family_group_exists(changes.family_group)
                ):
                    raise FamilyGroupNotFoundError(changes.family_group)

                updated = uow.guests.update(guest_id, changes, modifier=caller)
                if updated is None:
                    raise GuestRecordNotFoundError(guest_id)
                uow.commit()

        logger.info("Guest %d updated by %s", guest_id, caller)
        return updated

    def delete(self, guest_id: int) -> None:
        """Remove a guest.

        Raises:
            GuestRecordNotFoundError: If *guest_id* does not exist.
            InternalError: If storage fails.
        """
        with handle_failures("guests.delete"):
            with self.uow as uow:
                if not uow.guests.delete(guest_id):
                    raise GuestRecordNotFoundError(guest_id)
                uow.commit()
        logger.info("Guest %d deleted", guest_id)

    # --- internals ---

    def _authorize(self, caller: str) -> str:
        """Return the canonical caller code, or raise `ForbiddenError`.

        Must run outside any unit-of-work block: the lookup opens its own.
        """
        code = normalize_credential_code(caller) if isinstance(caller, str) else ""
        if not code or not self.access.exists_by_credential(code):
            raise ForbiddenError()
        return code
