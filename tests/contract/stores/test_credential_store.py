"""Contract tests for CredentialStore implementations."""

from __future__ import annotations

import pytest

from parasempre.domain.validation import Role
from parasempre.interfaces.credential_store import NewCredential, RosterEntry
from parasempre.interfaces.errors import CredentialCodeAlreadyTaken, GuestAlreadyLinked
from tests.helpers.time_asserts import assert_strict_utc

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def maria(stores, make_new_guest):
    """A stored guest to link credentials to."""
    return stores.guests.create(make_new_guest(phone="11988888888"), "NOIVO")


def test_create_owner(stores) -> None:
    """Owner credentials have no guest."""
    credential = stores.credentials.create(NewCredential(code="noivo", role=Role.OWNER_A))
    assert credential.id > 0
    assert credential.code == "NOIVO"
    assert credential.role is Role.OWNER_A
    assert credential.guest_id is None
    assert_strict_utc(credential.created_at)
    assert credential.created_at == credential.updated_at


def test_create_guest_credential(stores, maria) -> None:
    """Guest credentials are found by code and by guest."""
    credential = stores.credentials.create(
        NewCredential(code="USR01", role=Role.GUEST, guest_id=maria.id)
    )
    assert credential.guest_id == maria.id
    assert stores.credentials.get_by_guest_id(maria.id) == credential
    assert stores.credentials.get_by_code("USR01") == credential


def test_code_lookup_ignores_case(stores) -> None:
    """Codes are compared upper-cased."""
    stores.credentials.create(NewCredential(code="NOIVA", role=Role.OWNER_B))
    assert stores.credentials.get_by_code("noiva") is not None


def test_absent(stores) -> None:
    """Absence is None."""
    assert stores.credentials.get_by_code("ZZZZZ") is None
    assert stores.credentials.get_by_guest_id(999) is None


def test_code_is_unique(stores, maria) -> None:
    """Codes are global across roles."""
    stores.credentials.create(NewCredential(code="NOIVO", role=Role.OWNER_A))
    with pytest.raises(CredentialCodeAlreadyTaken) as exc_info:
        stores.credentials.create(
            NewCredential(code="NOIVO", role=Role.GUEST, guest_id=maria.id)
        )
    assert exc_info.value.code == "NOIVO"


def test_one_credential_per_guest(stores, maria) -> None:
    """A guest is linked at most once."""
    stores.credentials.create(
        NewCredential(code="USR01", role=Role.GUEST, guest_id=maria.id)
    )
    with pytest.raises(GuestAlreadyLinked) as exc_info:
        stores.credentials.create(
            NewCredential(code="USR02", role=Role.GUEST, guest_id=maria.id)
        )
    assert exc_info.value.guest_id == maria.id
    assert stores.credentials.get_by_code("USR02") is None


def test_owners_share_no_guest_link(stores) -> None:
    """Several unlinked credentials may coexist."""
    stores.credentials.create(NewCredential(code="NOIVO", role=Role.OWNER_A))
    stores.credentials.create(NewCredential(code="NOIVA", role=Role.OWNER_B))
    assert len(stores.credentials.list_with_guest_names()) == 2


def test_roster(stores, maria, make_new_guest) -> None:
    """Roster rows carry guest names, ordered by role value then code."""
    joao = stores.guests.create(make_new_guest("João", "Silva"), "NOIVO")
    stores.credentials.create(
        NewCredential(code="ZZZ01", role=Role.GUEST, guest_id=joao.id)
    )
    stores.credentials.create(
        NewCredential(code="AAA01", role=Role.GUEST, guest_id=maria.id)
    )
    stores.credentials.create(NewCredential(code="NOIVO", role=Role.OWNER_A))
    stores.credentials.create(NewCredential(code="NOIVA", role=Role.OWNER_B))

    assert stores.credentials.list_with_guest_names() == [
        RosterEntry(code="NOIVA", role=Role.OWNER_B),
        RosterEntry(code="NOIVO", role=Role.OWNER_A),
        RosterEntry(code="AAA01", role=Role.GUEST, first_name="Maria", last_name="Santos"),
        RosterEntry(code="ZZZ01", role=Role.GUEST, first_name="João", last_name="Silva"),
    ]


def test_roster_after_guest_deleted(stores, maria) -> None:
    """An unlinked guest credential shows with empty names."""
    stores.credentials.create(
        NewCredential(code="USR01", role=Role.GUEST, guest_id=maria.id)
    )
    stores.guests.delete(maria.id)
    assert stores.credentials.list_with_guest_names() == [
        RosterEntry(code="USR01", role=Role.GUEST)
    ]
