"""
MovieReview repository for data access.

Every read and write takes an optional owner id. None means "all users"
(the admin view); an int restricts the statement to that owner's rows.
"""

from typing import Iterable, Optional

from sqlalchemy import Select, and_, delete, func, or_, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql.functions import count as sql_count

from ..models.movie_review import MovieReviewRecord
from .base import BaseRepository


class MovieReviewRepository(BaseRepository[MovieReviewRecord]):
    """Repository for MovieReviewRecord entity."""

    def __init__(self, session: Session):
        super().__init__(MovieReviewRecord, session)

    @staticmethod
    def _owned_by(stmt, user_id: Optional[int]):
        if user_id is None:
            return stmt
        return stmt.where(MovieReviewRecord.user_id == user_id)

    @staticmethod
    def _newest_first(stmt: Select) -> Select:
        # created_at has second resolution on some backends; id breaks ties
        return stmt.order_by(MovieReviewRecord.created_at.desc(), MovieReviewRecord.id.desc())

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_owned(self, review_id: int, user_id: Optional[int]) -> Optional[MovieReviewRecord]:
        """Fetch one review by id, only if it belongs to user_id (when given)."""
        stmt = self._owned_by(select(MovieReviewRecord).where(MovieReviewRecord.id == review_id), user_id)
        return self.session.scalar(stmt)

    def list_reviews(self, user_id: Optional[int]) -> list[MovieReviewRecord]:
        """All reviews in scope, most recently created first."""
        stmt = self._newest_first(self._owned_by(select(MovieReviewRecord), user_id))
        return list(self.session.scalars(stmt).all())

    def search(self, user_id: Optional[int], term: str) -> list[MovieReviewRecord]:
        """
        Case-insensitive substring match on title, director or genre.

        SQL Generated:
            SELECT * FROM movie_reviews
            WHERE user_id = 7 AND (lower(title) LIKE '%nolan%'
                OR lower(director) LIKE '%nolan%' OR lower(genre) LIKE '%nolan%')
            ORDER BY created_at DESC, id DESC
        """
        pattern = f"%{term.strip().lower()}%"
        stmt = select(MovieReviewRecord).where(
            or_(
                func.lower(MovieReviewRecord.title).like(pattern),
                func.lower(MovieReviewRecord.director).like(pattern),
                func.lower(MovieReviewRecord.genre).like(pattern),
            )
        )
        stmt = self._newest_first(self._owned_by(stmt, user_id))
        return list(self.session.scalars(stmt).all())

    def list_favorites(self, user_id: Optional[int]) -> list[MovieReviewRecord]:
        """Reviews flagged as favorite, most recently created first."""
        stmt = select(MovieReviewRecord).where(MovieReviewRecord.is_favorite.is_(True))
        stmt = self._newest_first(self._owned_by(stmt, user_id))
        return list(self.session.scalars(stmt).all())

    # ═══════════════════════════════════════════════════════════════════════════
    # AGGREGATES
    # ═══════════════════════════════════════════════════════════════════════════

    def average_rating(self, user_id: Optional[int]) -> float:
        """AVG(rating) in scope; 0.0 when there are no rows."""
        stmt = self._owned_by(select(func.avg(MovieReviewRecord.rating)), user_id)
        value = self.session.scalar(stmt)
        return float(value) if value is not None else 0.0

    def count_reviews(self, user_id: Optional[int]) -> int:
        stmt = self._owned_by(select(sql_count()).select_from(MovieReviewRecord), user_id)
        return self.session.scalar(stmt) or 0

    def count_favorites(self, user_id: Optional[int]) -> int:
        stmt = select(sql_count()).select_from(MovieReviewRecord).where(MovieReviewRecord.is_favorite.is_(True))
        return self.session.scalar(self._owned_by(stmt, user_id)) or 0

    def count_with_ticket(self, user_id: Optional[int]) -> int:
        """Rows whose ticket_image_path is present and not blank."""
        stmt = (
            select(sql_count())
            .select_from(MovieReviewRecord)
            .where(
                MovieReviewRecord.ticket_image_path.is_not(None),
                func.trim(MovieReviewRecord.ticket_image_path) != "",
            )
        )
        return self.session.scalar(self._owned_by(stmt, user_id)) or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    def overwrite(self, review_id: int, user_id: int, **values) -> int:
        """Full-row update keyed by (id, user_id); returns rows affected."""
        result = self.execute_bulk(
            update(MovieReviewRecord)
            .where(MovieReviewRecord.id == review_id, MovieReviewRecord.user_id == user_id)
            .values(**values)
        )
        return result.rowcount or 0

    def set_favorite(self, review_id: int, user_id: int, favorite: bool) -> int:
        return self.overwrite(review_id, user_id, is_favorite=favorite)

    def delete_owned(self, review_id: int, user_id: int) -> int:
        """Delete one review only if it belongs to user_id."""
        result = self.execute_bulk(
            delete(MovieReviewRecord).where(
                MovieReviewRecord.id == review_id,
                MovieReviewRecord.user_id == user_id,
            )
        )
        return result.rowcount or 0

    def delete_pairs(self, pairs: Iterable[tuple[int, int]]) -> int:
        """
        Delete many reviews in one statement, each matched on its own owner.

        SQL Generated:
            DELETE FROM movie_reviews
            WHERE (id = 1 AND user_id = 7) OR (id = 4 AND user_id = 9)
        """
        conditions = [
            and_(MovieReviewRecord.id == review_id, MovieReviewRecord.user_id == user_id)
            for review_id, user_id in pairs
        ]
        if not conditions:
            return 0
        result = self.execute_bulk(delete(MovieReviewRecord).where(or_(*conditions)))
        return result.rowcount or 0
