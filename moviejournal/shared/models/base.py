"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in
Movie Journal: the declarative base and the timestamp mixin.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from moviejournal.shared.models.base import Base, TimestampMixin

    class MovieReviewRecord(Base, TimestampMixin):
        __tablename__ = "movie_reviews"
        id: Mapped[int] = mapped_column(Integer, primary_key=True)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Base.metadata is what Database.ensure_schema() hands to create_all(),
    so every record class must inherit from it to get its table created.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns that are automatically managed:
    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    Database Behavior:
    ==================
    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, touched by SQLAlchemy on every UPDATE
      statement (including Core update() statements) via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
