"""Failure policy shared by the services.

Every public service operation runs inside `handle_failures`, which applies
one policy:

* domain failures are logged at WARNING and propagate unchanged;
* a unique-constraint violation surfacing from storage is turned into the
  conflict the matching pre-check would have raised;
* any other storage failure is logged with its traceback and replaced by a
  generic `InternalError` chained to the original.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from parasempre.domain.errors import (
    AlreadyRegisteredError,
    ConflictError,
    CredentialTakenError,
    DomainError,
    DuplicateGuestNameError,
    DuplicatePhoneError,
    InternalError,
)
from parasempre.interfaces.errors import (
    CredentialCodeAlreadyTaken,
    GuestAlreadyLinked,
    GuestNameAlreadyTaken,
    GuestPhoneAlreadyTaken,
    StoreError,
    UniqueConstraintViolation,
)

logger = logging.getLogger(__name__)


def conflict_from_violation(violation: UniqueConstraintViolation) -> ConflictError:
    """Return the domain conflict matching a storage unique violation."""
    match violation:
        case GuestNameAlreadyTaken(first_name=first, last_name=last):
            return DuplicateGuestNameError(first, last)
        case GuestPhoneAlreadyTaken(phone=phone):
            return DuplicatePhoneError(phone)
        case CredentialCodeAlreadyTaken():
            return CredentialTakenError()
        case GuestAlreadyLinked():
            return AlreadyRegisteredError()
    return ConflictError(str(violation))


@contextmanager
def handle_failures(operation: str) -> Iterator[None]:
    """Apply the service failure policy to the enclosed block.

    Args:
        operation: Name used in log records (e.g. ``"guests.create"``).

    Raises:
        DomainError: The domain failure raised in the block, or the one
            translated from a storage error.
    """
    logger.debug("Running %s", operation)
    try:
        yield
    except DomainError as e:
        logger.warning("%s rejected (%s): %s", operation, e.kind.value, e.message)
        raise
    except UniqueConstraintViolation as e:
        conflict = conflict_from_violation(e)
        logger.warning(
            "%s rejected by storage constraint (%s): %s",
            operation,
            conflict.kind.value,
            conflict.message,
        )
        raise conflict from e
    except StoreError as e:
        logger.exception("%s failed in storage", operation)
        raise InternalError() from e
