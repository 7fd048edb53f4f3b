"""Unit tests for the service failure policy."""

import logging

import pytest

from parasempre.domain.errors import (
    AlreadyRegisteredError,
    ConflictError,
    CredentialTakenError,
    DuplicateGuestNameError,
    DuplicatePhoneError,
    InternalError,
    NotFoundError,
)
from parasempre.interfaces.errors import (
    CredentialCodeAlreadyTaken,
    GuestAlreadyLinked,
    GuestNameAlreadyTaken,
    GuestPhoneAlreadyTaken,
    StoreOperationError,
    UniqueConstraintViolation,
)
from parasempre.service_layer.failures import conflict_from_violation, handle_failures

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("violation", "expected"),
    [
        (GuestNameAlreadyTaken("Maria", "Santos"), DuplicateGuestNameError),
        (GuestPhoneAlreadyTaken("11988888888"), DuplicatePhoneError),
        (CredentialCodeAlreadyTaken("USR01"), CredentialTakenError),
        (GuestAlreadyLinked(3), AlreadyRegisteredError),
        (UniqueConstraintViolation("something else"), ConflictError),
    ],
)
def test_conflict_from_violation(violation, expected) -> None:
    """Each storage violation maps to the matching domain conflict."""
    conflict = conflict_from_violation(violation)
    assert type(conflict) is expected


def test_name_conflict_keeps_names() -> None:
    """The mapped conflict still names the guest."""
    conflict = conflict_from_violation(GuestNameAlreadyTaken("Maria", "Santos"))
    assert conflict.message == "a guest named 'Maria Santos' already exists"


def test_domain_errors_pass_through(caplog) -> None:
    """Domain failures are logged at WARNING and re-raised unchanged."""
    error = NotFoundError("gone")
    with caplog.at_level(logging.WARNING, logger="parasempre"):
        with pytest.raises(NotFoundError) as exc_info:
            with handle_failures("guests.get"):
                raise error
    assert exc_info.value is error
    assert "guests.get rejected (not_found): gone" in caplog.text


def test_violation_becomes_conflict() -> None:
    """A storage unique violation is chained into its conflict."""
    violation = GuestPhoneAlreadyTaken("11988888888")
    with pytest.raises(DuplicatePhoneError) as exc_info:
        with handle_failures("guests.create"):
            raise violation
    assert exc_info.value.__cause__ is violation


def test_store_error_becomes_internal(caplog) -> None:
    """Other storage errors are logged with a traceback and hidden."""
    failure = StoreOperationError("guests.list", "connection reset by peer")
    with caplog.at_level(logging.ERROR, logger="parasempre"):
        with pytest.raises(InternalError) as exc_info:
            with handle_failures("guests.list"):
                raise failure
    assert exc_info.value.__cause__ is failure
    assert "connection reset" not in exc_info.value.message
    record = next(r for r in caplog.records if r.levelno == logging.ERROR)
    assert record.exc_info is not None


def test_other_exceptions_propagate() -> None:
    """Programming errors are not hidden behind InternalError."""
    with pytest.raises(KeyError):
        with handle_failures("guests.list"):
            raise KeyError("bug")
