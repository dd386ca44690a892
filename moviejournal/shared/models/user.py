"""
User Record Model

Row mapping for the `users` table.

Model Hierarchy:
================
    UserRecord
       └── reviews (MovieReviewRecord[]) - Reviews owned by the user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ username         │ "john"                                                    │
│ email            │ "john@x.com"                                              │
│ password         │ "$2b$12$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ last_login       │ 2024-01-15T10:30:00Z                                      │
│ is_active        │ true                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, Integer, String, text, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviejournal.shared.models.base import Base


if TYPE_CHECKING:
    from moviejournal.shared.models.movie_review import MovieReviewRecord


class UserRecord(Base):
    """
    Persisted user account.

    The `password` column only ever holds a bcrypt digest. Rows are never
    hard-deleted by normal flows; deactivation flips `is_active`.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    # Bcrypt digest
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # Soft-delete flag; inactive users cannot log in
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        server_default=true(),
        nullable=False,
    )

    reviews: Mapped[list["MovieReviewRecord"]] = relationship(
        "MovieReviewRecord",
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserRecord(id={self.id}, username={self.username})>"
