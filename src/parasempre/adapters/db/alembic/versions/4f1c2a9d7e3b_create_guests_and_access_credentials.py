"""create guests and access_credentials

Revision ID: 4f1c2a9d7e3b
Revises:
Create Date: 2026-10-19 18:02:11.514203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9d7e3b"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ID_PK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "guests",
        sa.Column("id", ID_PK, autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column(
            "phone",
            sa.String(length=11),
            nullable=True,
            comment="National mobile number (DD9XXXXXXXX); NULL when unknown.",
        ),
        sa.Column("relationship", sa.String(length=1), nullable=False),
        sa.Column(
            "confirmed", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column("family_group", sa.Integer(), nullable=False),
        sa.Column(
            "created_by",
            sa.String(length=32),
            nullable=False,
            comment="Credential code of the creator.",
        ),
        sa.Column(
            "updated_by",
            sa.String(length=32),
            nullable=False,
            comment="Credential code of the last modifier.",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "family_group > 0", name=op.f("ck_guests_positive_family_group")
        ),
        sa.CheckConstraint(
            "relationship IN ('P', 'R')", name=op.f("ck_guests_relationship_type")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_guests")),
        sa.UniqueConstraint(
            "first_name", "last_name", name=op.f("uq_guests_first_name_last_name")
        ),
        sa.UniqueConstraint("phone", name=op.f("uq_guests_phone")),
        comment="Wedding guest list. One row per invited person.",
    )

    op.create_table(
        "access_credentials",
        sa.Column("id", ID_PK, autoincrement=True, nullable=False),
        sa.Column(
            "guest_id",
            ID_PK,
            nullable=True,
            comment="Linked guest; NULL for the owner accounts.",
        ),
        sa.Column("role", sa.String(length=16), nullable=False),
        sa.Column("code", sa.String(length=32), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "role IN ('groom', 'bride', 'guest')",
            name=op.f("ck_access_credentials_role_type"),
        ),
        sa.ForeignKeyConstraint(
            ["guest_id"],
            ["guests.id"],
            name=op.f("fk_access_credentials_guest_id_guests"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_access_credentials")),
        sa.UniqueConstraint("code", name=op.f("uq_access_credentials_code")),
        sa.UniqueConstraint("guest_id", name=op.f("uq_access_credentials_guest_id")),
        comment="Access codes allowed to mutate the guest list.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("access_credentials")
    op.drop_table("guests")
