"""Adapters (infrastructure) for PARASEMPRE.

Provide concrete implementations of the storage ports (in-memory and
SQLAlchemy), the guest-file readers used by bulk import, and the database
plumbing (engines, metadata, migrations).

Dependency rule: may import `parasempre.domain`, `parasempre.interfaces`
and the command dataclasses in `parasempre.service_layer.commands`; none of
those may import this package.
"""
