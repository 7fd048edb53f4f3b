"""Exceptions raised by storage ports.

Adapters translate their backend's failures into these types so that the
service layer never depends on a persistence library. Unique-constraint
violations get a dedicated subtype per constraint: they are the storage
backstop for the services' uniqueness pre-checks.
"""


class StoreError(Exception):
    """Base class for storage port errors."""


class StoreOperationError(StoreError):
    """A storage operation failed for a reason other than a uniqueness rule.

    Attributes:
        operation (str): Short name of the failing operation (e.g. "guests.create").
    """

    def __init__(self, operation: str, message: str | None = None) -> None:
        super().__init__(message or f"Storage operation '{operation}' failed.")
        self.operation = operation


class UniqueConstraintViolation(StoreError):
    """Base class for writes rejected by a storage-level unique constraint."""


class GuestNameAlreadyTaken(UniqueConstraintViolation):
    """Conflict: another guest already has this first and last name.

    Attributes:
        first_name (str): The conflicting first name.
        last_name (str): The conflicting last name.
    """

    def __init__(self, first_name: str, last_name: str) -> None:
        super().__init__(
            f"Guest name '{first_name} {last_name}' is already taken."
        )
        self.first_name = first_name
        self.last_name = last_name


class GuestPhoneAlreadyTaken(UniqueConstraintViolation):
    """Conflict: another guest already uses this phone.

    Attributes:
        phone (str): The conflicting phone number.
    """

    def __init__(self, phone: str) -> None:
        super().__init__(f"Phone '{phone}' is already bound to another guest.")
        self.phone = phone


class CredentialCodeAlreadyTaken(UniqueConstraintViolation):
    """Conflict: the credential code is already in use.

    Attributes:
        code (str): The conflicting credential code.
    """

    def __init__(self, code: str) -> None:
        super().__init__(f"Credential code '{code}' is already taken.")
        self.code = code


class GuestAlreadyLinked(UniqueConstraintViolation):
    """Conflict: the guest already has a linked credential.

    Attributes:
        guest_id (int): The guest that is already linked.
    """

    def __init__(self, guest_id: int) -> None:
        super().__init__(f"Guest {guest_id} already has a linked credential.")
        self.guest_id = guest_id
