"""Domain-layer error definitions.

Every use-case failure is a `DomainError` carrying a `FailureKind` and a
message that is safe to show to the caller. Storage details never end up in
`message`; they travel on ``__cause__`` for the operational logs.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class FailureKind(str, Enum):
    """Closed set of failure categories reported by the services."""

    VALIDATION = "validation"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""

    kind: ClassVar[FailureKind] = FailureKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when an input field is missing or malformed."""

    kind = FailureKind.VALIDATION

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ForbiddenError(DomainError):
    """Raised when the caller credential is not recognized."""

    kind = FailureKind.FORBIDDEN

    def __init__(self, message: str = "caller is not authorized") -> None:
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when an operation would break a uniqueness rule."""

    kind = FailureKind.CONFLICT


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    kind = FailureKind.NOT_FOUND


class InternalError(DomainError):
    """Raised when storage or an unexpected failure prevents an operation.

    The message is always generic; chain the original exception with
    ``raise InternalError() from exc`` so it stays available for logging.
    """

    kind = FailureKind.INTERNAL

    def __init__(self) -> None:
        super().__init__("internal server error")


# ============================================================================
#                           Guest related errors
# ============================================================================


class GuestRecordNotFoundError(NotFoundError):
    """Raised when a guest id does not exist."""

    def __init__(self, guest_id: int) -> None:
        super().__init__(f"guest {guest_id} not found")
        self.guest_id = guest_id


class FamilyGroupNotFoundError(NotFoundError):
    """Raised when an explicit family group has no members."""

    def __init__(self, family_group: int) -> None:
        super().__init__(f"family group {family_group} not found")
        self.family_group = family_group


class DuplicateGuestNameError(ConflictError):
    """Raised when another guest already has the same first and last name."""

    def __init__(self, first_name: str, last_name: str) -> None:
        super().__init__(
            f"a guest named '{first_name} {last_name}' already exists"
        )
        self.first_name = first_name
        self.last_name = last_name


class DuplicatePhoneError(ConflictError):
    """Raised when another guest already uses the phone number."""

    def __init__(self, phone: str) -> None:
        super().__init__(f"phone '{phone}' is already registered to another guest")
        self.phone = phone


# ============================================================================
#                       Access credential related errors
# ============================================================================


class GuestNotFoundError(NotFoundError):
    """Raised when no guest matches the phone a credential is registered for."""

    def __init__(self) -> None:
        super().__init__("no guest found with this phone")


class AlreadyRegisteredError(ConflictError):
    """Raised when the guest already has a linked credential."""

    def __init__(self) -> None:
        super().__init__("this guest already has a registered credential")


class CredentialTakenError(ConflictError):
    """Raised when the credential code is already in use."""

    def __init__(self) -> None:
        super().__init__("this access code is already in use")


class UnknownCredentialError(NotFoundError):
    """Raised when a credential code does not resolve to any user."""

    def __init__(self) -> None:
        super().__init__("user not found")
