"""Database plumbing shared by the SQLAlchemy adapters.

Holds the shared `MetaData`, the table definitions, custom column types,
the engine factory, error translation and the packaged Alembic scripts.
"""
