"""
Pydantic Schemas

Read models returned by the services.

Usage:
======
    from moviejournal.shared.schemas import ReviewStatistics
"""

from moviejournal.shared.schemas.review import BaseSchema, ReviewStatistics

__all__ = [
    "BaseSchema",
    "ReviewStatistics",
]
