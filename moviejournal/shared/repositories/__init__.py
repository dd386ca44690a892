"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate SQL and return ORM records; they never commit.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Lookups, availability, profile/password updates
         └── MovieReviewRepository      ← Owner-scoped reads, search, aggregates, bulk delete

Usage Example:
==============
    from moviejournal.shared.db import get_database
    from moviejournal.shared.repositories import MovieReviewRepository

    with get_database().session_scope() as session:
        repo = MovieReviewRepository(session)
        total = repo.count_reviews(user_id=7)
"""

from moviejournal.shared.repositories.base import BaseRepository
from moviejournal.shared.repositories.user_repository import UserRepository
from moviejournal.shared.repositories.movie_review_repository import MovieReviewRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "MovieReviewRepository",
]
