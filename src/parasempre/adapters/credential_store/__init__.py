"""CredentialStore adapters."""

from .memory import InMemoryCredentialStore
from .sqlalchemy import SqlAlchemyCredentialStore

__all__ = ["InMemoryCredentialStore", "SqlAlchemyCredentialStore"]
