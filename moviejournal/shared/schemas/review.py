"""
Review Schemas

Read models handed to the presentation layer.

Usage:
======
    stats = service.get_statistics()
    stats.average_rating   # 4.65
    stats.model_dump()     # {"total_reviews": 2, ...}
"""

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - from_attributes: Allow creating from ORM records and entities
    - frozen: Snapshots are immutable once built
    """

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
    )


class ReviewStatistics(BaseSchema):
    """Dashboard numbers for one ledger scope, taken in a single session."""

    total_reviews: int = Field(default=0, ge=0, description="Reviews in scope")
    average_rating: float = Field(default=0.0, ge=0.0, le=5.0, description="Mean rating, 0.0 when empty")
    theater_visits: int = Field(default=0, ge=0, description="Reviews with a ticket image")
    favorites: int = Field(default=0, ge=0, description="Reviews flagged as favorite")

    @property
    def average_rating_display(self) -> str:
        """One decimal place, as the dashboard shows it."""
        return f"{self.average_rating:.1f}"
