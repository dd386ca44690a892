"""
Database Models

SQLAlchemy ORM record classes for the two Movie Journal tables, plus the
enums shared across layers.

Model Relationships:
====================
    UserRecord (users)
       │
       └── MovieReviewRecord (movie_reviews)   user_id → users.id ON DELETE CASCADE

Records are persistence shapes only. Services translate them into the
in-memory entities in moviejournal.shared.entities before returning.

Usage:
======
    from moviejournal.shared.models import Base, UserRecord, MovieReviewRecord
"""

from moviejournal.shared.models.base import Base, TimestampMixin
from moviejournal.shared.models.enums import LoginField, SortOption
from moviejournal.shared.models.movie_review import MovieReviewRecord
from moviejournal.shared.models.user import UserRecord

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Records
    "UserRecord",
    "MovieReviewRecord",
    # Enums
    "LoginField",
    "SortOption",
]
