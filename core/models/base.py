"""Base model and mixins for all SQLAlchemy models.

Provides:
- Base: Declarative base class for all models
- IdentityMixin: Adds a store-assigned integer primary key

Identifiers are assigned by the database on insert and never change
afterwards; clients never supply them.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Largest value an Integer column holds on every supported backend (int4).
INT_COLUMN_MAX = 2**31 - 1


class Base(DeclarativeBase):
    """Declarative base for all catalog models."""
    pass


class IdentityMixin:
    """Mixin providing an auto-incrementing integer primary key."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
