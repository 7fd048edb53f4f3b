"""Pytest fixtures for service layer unit tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from parasempre.interfaces.guest_store import Guest
from parasempre.service_layer.access_registry import AccessRegistry
from parasempre.service_layer.guest_directory import GuestDirectory

from .fakes import BRIDE, GROOM, FakeUoW

# pylint: disable=redefined-outer-name


@pytest.fixture
def uow() -> FakeUoW:
    """Fresh fake unit of work with empty stores."""
    return FakeUoW()


@pytest.fixture
def access(uow: FakeUoW) -> AccessRegistry:
    """Access registry over the fake unit of work."""
    return AccessRegistry(uow)


@pytest.fixture
def directory(uow: FakeUoW, access: AccessRegistry) -> GuestDirectory:
    """Guest directory authorizing through the access registry."""
    return GuestDirectory(uow, access)


@pytest.fixture
def owners(uow: FakeUoW, access: AccessRegistry) -> tuple[str, str]:
    """Seed both owner codes and reset the commit counter."""
    access.seed_bootstrap(GROOM, BRIDE)
    uow.commits = 0
    return GROOM, BRIDE


@pytest.fixture
def add_guest(
    directory: GuestDirectory, uow: FakeUoW, owners, make_create_guest
) -> Callable[..., Guest]:
    """Create a guest as the groom, forwarding overrides to `make_create_guest`.

    The commit counter is reset afterwards so tests only see their own
    commits.
    """

    def _add(*args, **overrides) -> Guest:
        guest = directory.create(make_create_guest(*args, **overrides), owners[0])
        uow.commits = 0
        return guest

    return _add
