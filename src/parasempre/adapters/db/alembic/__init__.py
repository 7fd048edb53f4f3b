"""Packaged Alembic migration scripts (see `parasempre.config.build_alembic_config`)."""
