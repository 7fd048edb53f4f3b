"""GuestStore adapters."""

from .memory import InMemoryGuestStore
from .sqlalchemy import SqlAlchemyGuestStore

__all__ = ["InMemoryGuestStore", "SqlAlchemyGuestStore"]
