"""Access registry service.

Owns the link between access codes and guests: registering a code for the
guest owning a phone number, answering "does this phone have access",
"who am I" lookups, seeding the two owner accounts, and the roster view.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from parasempre.domain.errors import (
    AlreadyRegisteredError,
    CredentialTakenError,
    GuestNotFoundError,
    UnknownCredentialError,
)
from parasempre.domain.validation import (
    CREDENTIAL_CODE_LENGTH,
    Role,
    is_valid_credential_code,
    normalize_credential_code,
    require_credential_code,
    require_phone,
)
from parasempre.interfaces.credential_store import (
    AccessCredential,
    NewCredential,
    RosterEntry,
)
from parasempre.interfaces.errors import StoreError
from parasempre.interfaces.unit_of_work import AbstractUnitOfWork

from . import commands
from .failures import handle_failures

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PhoneCheck:
    """Outcome of `AccessRegistry.check_by_phone`.

    An unknown phone and a guest without a credential give the same answer.
    """

    exists: bool
    role: Role | None = None


class AccessRegistry:
    """Use-cases over access credentials."""

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    def exists_by_credential(self, code: str) -> bool:
        """Return True if *code* (any case, surrounding blanks ignored) exists."""
        code = normalize_credential_code(code) if isinstance(code, str) else ""
        if not code:
            return False
        with handle_failures("credentials.exists"), self.uow as uow:
            return uow.credentials.get_by_code(code) is not None

    def register(self, cmd: commands.RegisterCredential) -> AccessCredential:
        """Link the code in *cmd* to the guest owning the phone in *cmd*.

        Raises:
            ValidationError: If the phone or code is missing or malformed.
            GuestNotFoundError: If no guest has that phone.
            AlreadyRegisteredError: If the guest already has a credential.
            CredentialTakenError: If the code is already in use.
            InternalError: If storage fails.
        """
        with handle_failures("credentials.register"):
            phone = require_phone(cmd.phone)
            code = require_credential_code(cmd.code)

            with self.uow as uow:
                guest = uow.guests.get_by_phone(phone)
                if guest is None:
                    raise GuestNotFoundError()
                if uow.credentials.get_by_guest_id(guest.id) is not None:
                    raise AlreadyRegisteredError()
                if uow.credentials.get_by_code(code) is not None:
                    raise CredentialTakenError()

                credential = uow.credentials.create(
                    NewCredential(code=code, role=Role.GUEST, guest_id=guest.id)
                )
                uow.commit()

        logger.info("Credential %s registered for guest %d", code, guest.id)
        return credential

    def check_by_phone(self, phone: str) -> PhoneCheck:
        """Tell whether the guest owning *phone* has a credential.

        Raises:
            ValidationError: If the phone is missing or malformed.
            InternalError: If storage fails.
        """
        with handle_failures("credentials.check_by_phone"):
            phone = require_phone(phone)
            with self.uow as uow:
                guest = uow.guests.get_by_phone(phone)
                if guest is None:
                    return PhoneCheck(exists=False)
                credential = uow.credentials.get_by_guest_id(guest.id)
                if credential is None:
                    return PhoneCheck(exists=False)
                return PhoneCheck(exists=True, role=credential.role)

    def get_by_credential(self, code: str) -> AccessCredential:
        """Return the credential for *code*.

        Raises:
            UnknownCredentialError: If the code is unknown (or blank).
            InternalError: If storage fails.
        """
        with handle_failures("credentials.get"):
            code = normalize_credential_code(code) if isinstance(code, str) else ""
            if not code:
                raise UnknownCredentialError()
            with self.uow as uow:
                credential = uow.credentials.get_by_code(code)
            if credential is None:
                raise UnknownCredentialError()
            return credential

    def get_role_for_credential(self, code: str) -> Role:
        """Return the role of *code*; see `get_by_credential` for failures."""
        return self.get_by_credential(code).role

    def list_roster(self) -> list[RosterEntry]:
        """Return every credential with its guest's name, by role then code."""
        with handle_failures("credentials.roster"), self.uow as uow:
            return uow.credentials.list_with_guest_names()

    def seed_bootstrap(self, owner_a_code: str, owner_b_code: str) -> None:
        """Create the two owner credentials if they are missing.

        Blank codes are skipped. Existing codes are left untouched, whatever
        their role. Malformed codes and storage failures are logged and
        ignored: seeding never prevents the process from starting.
        """
        owners = ((Role.OWNER_A, owner_a_code), (Role.OWNER_B, owner_b_code))
        for role, raw_code in owners:
            code = normalize_credential_code(raw_code or "")
            if not code:
                logger.debug("No %s code configured; skipping seed", role.value)
                continue
            if not is_valid_credential_code(code):
                logger.warning(
                    "Ignoring malformed %s code: must be %d alphanumeric characters",
                    role.value,
                    CREDENTIAL_CODE_LENGTH,
                )
                continue
            try:
                self._seed_one(role, code)
            except StoreError:
                logger.exception("Could not seed %s credential", role.value)

    def _seed_one(self, role: Role, code: str) -> None:
        with self.uow as uow:
            if uow.credentials.get_by_code(code) is not None:
                logger.debug("%s credential already present", role.value)
                return
            uow.credentials.create(NewCredential(code=code, role=role))
            uow.commit()
        logger.info("Seeded %s credential", role.value)

