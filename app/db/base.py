"""
SQLAlchemy declarative base.

Every model inherits from Base so Alembic can discover the tables
through Base.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""
