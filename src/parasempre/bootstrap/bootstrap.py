"""Wire the services to their adapters."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from parasempre import config
from parasempre.adapters.db.engine import make_engine
from parasempre.adapters.unit_of_work import SqlAlchemyUnitOfWork
from parasempre.interfaces.unit_of_work import AbstractUnitOfWork
from parasempre.service_layer.access_registry import AccessRegistry
from parasempre.service_layer.guest_directory import GuestDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """The assembled application handed to entry points."""

    guests: GuestDirectory
    access: AccessRegistry


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a unit of work over a fresh engine for *url*."""
    return SqlAlchemyUnitOfWork(make_engine(url))


def build_services(uow: AbstractUnitOfWork) -> AppContainer:
    """Build both services over *uow*; the directory authorizes via the registry."""
    access = AccessRegistry(uow)
    return AppContainer(guests=GuestDirectory(uow, access), access=access)


def bootstrap(*, seed: bool = True) -> AppContainer:
    """Assemble the application from the environment.

    Args:
        seed: Create the owner credentials from `config.get_owner_codes`
            before returning. Seeding failures are logged, never raised.

    Raises:
        DatabaseUrlNotSetError: If no database URL is configured.
    """
    container = build_services(build_write_uow(config.get_db_url()))
    if seed:
        owners = config.get_owner_codes()
        logger.debug("Seeding owner credentials")
        container.access.seed_bootstrap(owners.groom, owners.bride)
    return container
