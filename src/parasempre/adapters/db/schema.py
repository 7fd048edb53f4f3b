"""Guest list schema.

Defines the ``guests`` and ``access_credentials`` tables.

Constraints (enforced here):

| Constraint                              | Purpose                                 |
|-----------------------------------------|-----------------------------------------|
| UNIQUE(first_name, last_name)           | one guest per full name                 |
| UNIQUE(phone)                           | one guest per phone (NULLs exempt)      |
| CHECK(family_group > 0)                 | family groups are positive              |
| CHECK(relationship IN ('P', 'R'))       | closed relationship set                 |
| UNIQUE(code)                            | credential codes are global             |
| UNIQUE(guest_id)                        | at most one credential per guest        |
| CHECK(role IN ('groom','bride','guest'))| closed role set                         |
| FK(guest_id) ON DELETE SET NULL         | deleting a guest unlinks its credential |

The unique constraints are the authoritative guard against concurrent
writers; the services pre-check the same rules only to produce a precise
message.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
    false,
    text,
)

from .metadata import metadata
from .sa_types import ID_PK, UTCDateTime

__all__ = ["access_credentials", "guests"]

guests = Table(
    "guests",
    metadata,
    Column("id", ID_PK, primary_key=True, autoincrement=True),
    Column("first_name", String(120), nullable=False),
    Column("last_name", String(120), nullable=False),
    Column(
        "phone",
        String(11),
        nullable=True,
        comment="National mobile number (DD9XXXXXXXX); NULL when unknown.",
    ),
    Column("relationship", String(1), nullable=False),
    Column("confirmed", Boolean, nullable=False, server_default=false()),
    Column("family_group", Integer, nullable=False),
    Column(
        "created_by",
        String(32),
        nullable=False,
        comment="Credential code of the creator.",
    ),
    Column(
        "updated_by",
        String(32),
        nullable=False,
        comment="Credential code of the last modifier.",
    ),
    Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    Column(
        "updated_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    UniqueConstraint("first_name", "last_name"),
    UniqueConstraint("phone"),
    CheckConstraint("family_group > 0", name="positive_family_group"),
    CheckConstraint("relationship IN ('P', 'R')", name="relationship_type"),
    comment="Wedding guest list. One row per invited person.",
)

access_credentials = Table(
    "access_credentials",
    metadata,
    Column("id", ID_PK, primary_key=True, autoincrement=True),
    Column(
        "guest_id",
        ID_PK,
        ForeignKey("guests.id", ondelete="SET NULL"),
        nullable=True,
        comment="Linked guest; NULL for the owner accounts.",
    ),
    Column("role", String(16), nullable=False),
    Column("code", String(32), nullable=False),
    Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    Column(
        "updated_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    UniqueConstraint("code"),
    UniqueConstraint("guest_id"),
    CheckConstraint("role IN ('groom', 'bride', 'guest')", name="role_type"),
    comment="Access codes allowed to mutate the guest list.",
)
