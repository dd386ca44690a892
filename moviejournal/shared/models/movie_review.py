"""
MovieReview Record Model

Row mapping for the `movie_reviews` table.

SAMPLE MOVIE_REVIEW RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                 │ 12                                                      │
│ user_id            │ 7                                                       │
│ title              │ "Inception"                                             │
│ director           │ "Christopher Nolan"                                     │
│ genre              │ "Sci-Fi"                                                │
│ rating             │ 4.5                                                     │
│ review             │ "Complex and visually stunning."                        │
│ date_watched       │ 2023-12-15                                              │
│ ticket_image_path  │ "/home/john/tickets/inception.png"                      │
│ is_favorite        │ true                                                    │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    false,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviejournal.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from moviejournal.shared.models.user import UserRecord


class MovieReviewRecord(Base, TimestampMixin):
    """
    Persisted movie review owned by exactly one user.

    A user cannot hold two reviews with the same (title, director).
    """

    __tablename__ = "movie_reviews"

    __table_args__ = (
        UniqueConstraint("user_id", "title", "director", name="unique_user_movie_director"),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_movie_reviews_rating_range"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MOVIE
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    director: Mapped[str] = mapped_column(String(255), nullable=False)

    genre: Mapped[str] = mapped_column(String(100), nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # REVIEW
    # ═══════════════════════════════════════════════════════════════════════════

    # DECIMAL(2,1); read back as float
    rating: Mapped[float] = mapped_column(
        Numeric(2, 1, asdecimal=False),
        nullable=False,
    )

    review: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    date_watched: Mapped[date] = mapped_column(Date, nullable=False)

    # Added after the first release; see Database.ensure_schema()
    ticket_image_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    is_favorite: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["UserRecord"] = relationship(
        "UserRecord",
        back_populates="reviews",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<MovieReviewRecord(id={self.id}, user_id={self.user_id}, title={self.title})>"
