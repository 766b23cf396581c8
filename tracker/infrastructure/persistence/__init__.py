"""Persistence: SQLAlchemy engine/session, ORM models, repositories, Alembic migrations."""
