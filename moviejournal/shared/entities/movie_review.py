"""
MovieReview Entity

In-memory representation of one review, independent of any session.

Two construction shapes:
    - New review typed into the form: date_watched is a "MM/DD/YYYY"
      string and is parsed leniently (today on any failure)
    - Hydrated from the store: date_watched is already a date, or use
      MovieReview.from_record(record)

Usage:
======
    review = MovieReview("Inception", "Christopher Nolan", "Sci-Fi", 4.5, "12/15/2023")
    review.rating = 7          # ignored, still 4.5
    review.date_watched_as_string()   # "12/15/2023"
"""

from datetime import date
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from moviejournal.shared.models.movie_review import MovieReviewRecord


MIN_RATING = 0.0
MAX_RATING = 5.0
DATE_SEPARATOR = "/"


def parse_watch_date(value: Optional[str]) -> date:
    """
    Parse a slash-delimited month/day/year string.

    One or two digit months and days are accepted ("3/7/2024"). Anything
    that is not exactly three numeric parts forming a real calendar date
    yields today's date instead of an error.
    """
    if value is None or not value.strip():
        return date.today()

    parts = value.strip().split(DATE_SEPARATOR)
    if len(parts) != 3:
        return date.today()

    try:
        month, day, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return date.today()


class MovieReview:
    """
    One movie review.

    Identity is (id, user_id, title, director); rating, dates and text do
    not take part in equality.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        director: Optional[str] = None,
        genre: Optional[str] = None,
        rating: float = 0.0,
        date_watched: Union[date, str, None] = None,
        *,
        id: Optional[int] = None,
        user_id: Optional[int] = None,
        review: Optional[str] = "",
        ticket_image_path: Optional[str] = None,
        is_favorite: bool = False,
    ) -> None:
        self.id = id
        self.user_id = user_id
        self.title = title
        self.director = director
        self.genre = genre
        self._rating = MIN_RATING
        self.rating = rating
        self.review = review if review is not None else ""
        if isinstance(date_watched, date):
            self.date_watched: Optional[date] = date_watched
        else:
            self.date_watched = parse_watch_date(date_watched)
        self.ticket_image_path = ticket_image_path
        self.is_favorite = is_favorite

    @classmethod
    def from_record(cls, record: "MovieReviewRecord") -> "MovieReview":
        """Hydrate from a movie_reviews row."""
        return cls(
            record.title,
            record.director,
            record.genre,
            float(record.rating),
            record.date_watched,
            id=record.id,
            user_id=record.user_id,
            review=record.review,
            ticket_image_path=record.ticket_image_path,
            is_favorite=bool(record.is_favorite),
        )

    @property
    def rating(self) -> float:
        return self._rating

    @rating.setter
    def rating(self, value: float) -> None:
        # Out-of-range values leave the previous rating in place
        if value is not None and MIN_RATING <= value <= MAX_RATING:
            self._rating = float(value)

    def date_watched_as_string(self) -> str:
        """Zero-padded MM/DD/YYYY, or "" when no date is set."""
        if self.date_watched is None:
            return ""
        return f"{self.date_watched.month:02d}/{self.date_watched.day:02d}/{self.date_watched.year:04d}"

    @property
    def has_ticket(self) -> bool:
        """True when a ticket image path is recorded (counts as a theater visit)."""
        return bool(self.ticket_image_path and self.ticket_image_path.strip())

    def _identity(self) -> tuple:
        return (self.id, self.user_id, self.title, self.director)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MovieReview):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return f"{self.title} - {self.director}"

    def __repr__(self) -> str:
        return f"<MovieReview(id={self.id}, user_id={self.user_id}, title={self.title!r}, rating={self.rating})>"
