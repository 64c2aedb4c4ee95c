"""
SQLAlchemy Base and Mixins

Declarative base shared by the fauna, plant and geolocation tables.
"""
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for the seeded reference tables."""


class SeededAtMixin:
    """
    Adds a created_at column stamped by the database on insert.

    Seeded rows are never updated in place: a refresh deletes every row of a
    table and inserts the file contents again, so created_at is the time of
    the seeding run that produced the row.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="Seeding run that inserted the row"
    )


def import_all_models():
    """
    Import all models to register them with SQLAlchemy Base.

    Must run before create_all so every table is part of the metadata.
    """
    from src.trailblazers.db import models  # noqa: F401
