"""
Domain Entities

Plain Python objects handed to and returned from the services. They
never hold a database session, so the desktop UI can keep them around
between calls.

Usage:
======
    from moviejournal.shared.entities import MovieReview, User
"""

from moviejournal.shared.entities.movie_review import MovieReview, parse_watch_date
from moviejournal.shared.entities.user import User

__all__ = [
    "MovieReview",
    "User",
    "parse_watch_date",
]
