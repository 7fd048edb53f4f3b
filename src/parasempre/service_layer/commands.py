"""Module defining Commands.

Commands carry raw caller input into the services; validation happens
there, not here.
"""

from dataclasses import dataclass

from parasempre.domain.validation import Relationship
from parasempre.interfaces.unsettable import UNSET, Unsettable


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class CreateGuest(Command):
    """Command to add a guest to the guest list.

    An empty `phone` means "no phone". A `family_group` of None asks the
    directory to open a new group.
    """

    first_name: str
    last_name: str
    relationship: str | Relationship
    phone: str = ""
    family_group: int | None = None


@dataclass(frozen=True)
class UpdateGuest(Command):
    """Command to change some fields of an existing guest.

    Fields left as ``UNSET`` are not touched. For `phone`, None or an empty
    string clears the number.
    """

    first_name: Unsettable[str] = UNSET
    last_name: Unsettable[str] = UNSET
    phone: Unsettable[str] = UNSET
    relationship: Unsettable[str | Relationship] = UNSET
    confirmed: Unsettable[bool] = UNSET
    family_group: Unsettable[int] = UNSET


@dataclass(frozen=True)
class RegisterCredential(Command):
    """Command to link an access code to the guest owning a phone number."""

    phone: str
    code: str
