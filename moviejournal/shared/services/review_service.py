"""
Review Service

Business logic for the review ledger: CRUD, search, sort, favorites and
dashboard statistics over one Scope, plus change notifications.

SCOPE ARCHITECTURE:
- Scope.for_user(id): every read is filtered by that owner and every write
  is stamped with it, whatever user_id the passed-in review carries
- Scope.all_users(): the admin view; reads see every row and writes use
  each review's own user_id
- clear_all_reviews() ignores scope and empties the table

Boundary Rule:
==============
Store failures never escape. Each public method runs in its own session;
SQLAlchemyError, ConflictError and StorageError are logged and turned into
the method's default (False, None, 0, 0.0 or []). Listeners are notified
only after a mutation that actually changed rows has committed.

Usage:
======
    from moviejournal.shared.services import ReviewService, Scope

    service = ReviewService(Scope.for_user(user.id))
    service.add_listener(review_table)
    service.add_review(MovieReview("Inception", "Christopher Nolan", "Sci-Fi", 4.5, "12/15/2023"))
    service.get_sorted_reviews("Rating (High)")
"""

from datetime import date
from typing import Iterable, Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from moviejournal.config.settings import settings
from moviejournal.shared.core.exceptions import ConflictError, StorageError
from moviejournal.shared.core.logging import get_logger
from moviejournal.shared.db.session import Database, get_database
from moviejournal.shared.entities.movie_review import MovieReview
from moviejournal.shared.models.enums import SortOption
from moviejournal.shared.repositories.movie_review_repository import MovieReviewRepository
from moviejournal.shared.schemas.review import ReviewStatistics
from moviejournal.shared.services.events import ReviewChangeListener, ReviewEventBus
from moviejournal.shared.services.scope import Scope
from moviejournal.shared.services.sorting import sort_reviews


logger = get_logger("review_service")

STORE_ERRORS = (SQLAlchemyError, ConflictError, StorageError)

DEFAULT_TITLE = "Untitled"
DEFAULT_DIRECTOR = "Unknown"


# Fields that receive a placeholder when blank or missing
PLACEHOLDER_FIELDS = ("title", "director", "genre", "review", "date_watched")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _row_values(review: MovieReview) -> dict:
    """Column values for review, placeholders filled in; review is left as is."""
    return {
        "title": DEFAULT_TITLE if _blank(review.title) else review.title,
        "director": DEFAULT_DIRECTOR if _blank(review.director) else review.director,
        "genre": "" if review.genre is None else review.genre,
        "rating": review.rating,
        "review": "" if review.review is None else review.review,
        "date_watched": date.today() if review.date_watched is None else review.date_watched,
        "ticket_image_path": review.ticket_image_path,
        "is_favorite": review.is_favorite,
    }


def apply_placeholder_defaults(review: MovieReview, values: Optional[dict] = None) -> None:
    """Copy the placeholder-filled fields of values (or review's own) onto review."""
    values = values if values is not None else _row_values(review)
    for name in PLACEHOLDER_FIELDS:
        setattr(review, name, values[name])


class ReviewService:
    """
    Service for review ledger business logic.

    Handles:
    - Adding, updating and deleting reviews (singly and in bulk)
    - Listing, searching, sorting and favorite filtering
    - Aggregate statistics for the dashboard
    - Notifying registered ReviewChangeListeners

    Attributes:
        scope: Owner filter applied to every call
        database: Database whose sessions every call runs in
        events: Listener registry for this ledger
    """

    def __init__(
        self,
        scope: Optional[Scope] = None,
        database: Optional[Database] = None,
        seed_placeholder_owner: Optional[bool] = None,
    ) -> None:
        """
        Initialize ReviewService and make sure its tables exist.

        Args:
            scope: Owner filter; Scope.all_users() when omitted
            database: Injected Database; the process-wide one when omitted
            seed_placeholder_owner: Insert a placeholder users row when a
                user scope names an id with no account. Defaults to
                settings.SEED_PLACEHOLDER_USERS.
        """
        self.scope = scope or Scope.all_users()
        self.database = database or get_database()
        self.events = ReviewEventBus()

        if seed_placeholder_owner is None:
            seed_placeholder_owner = settings.SEED_PLACEHOLDER_USERS
        seed_user_id = self.scope.user_id if seed_placeholder_owner else None

        try:
            self.database.ensure_schema(seed_user_id=seed_user_id)
        except StorageError as e:
            logger.error("Error creating movie_reviews table", scope=str(self.scope), error=e.message)

    @property
    def user_id(self) -> Optional[int]:
        return self.scope.user_id

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTENERS
    # ═══════════════════════════════════════════════════════════════════════════

    def add_listener(self, listener: Optional[ReviewChangeListener]) -> None:
        self.events.subscribe(listener)

    def remove_listener(self, listener: Optional[ReviewChangeListener]) -> None:
        self.events.unsubscribe(listener)

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    def add_review(self, review: Optional[MovieReview]) -> bool:
        """
        Insert a review.

        Blank fields get placeholder defaults, a user scope overrides
        review.user_id, and the generated id is written back onto review.

        Returns:
            False for None, a review with no owner under the global scope,
            a duplicate (same owner, title and director) or a store
            failure; True once stored and listeners have been told
        """
        if review is None:
            return False

        apply_placeholder_defaults(review)
        review.user_id = self.scope.owner_for(review.user_id)
        if review.user_id is None:
            logger.warning("Review has no owner; not added", title=review.title)
            return False

        try:
            with self.database.session_scope() as session:
                record = MovieReviewRepository(session).create(user_id=review.user_id, **_row_values(review))
                review.id = record.id
        except ConflictError as e:
            logger.warning(
                "Review rejected by constraint",
                user_id=review.user_id,
                title=review.title,
                director=review.director,
                error=str(e.details.get("error", e.message)),
            )
            return False
        except STORE_ERRORS as e:
            logger.error("Error adding review", user_id=review.user_id, error=str(e))
            return False

        logger.info("Review added", review_id=review.id, user_id=review.user_id)
        self.events.review_added(review)
        return True

    def delete_review(self, review: Optional[MovieReview]) -> bool:
        """
        Delete one review matched on (id, owner).

        Under a user scope a review owned by someone else matches nothing
        and the call is a no-op.
        """
        if review is None or review.id is None:
            return False

        owner = self.scope.owner_for(review.user_id)
        if owner is None:
            return False

        try:
            with self.database.session_scope() as session:
                removed = MovieReviewRepository(session).delete_owned(review.id, owner)
        except STORE_ERRORS as e:
            logger.error("Error deleting review", review_id=review.id, error=str(e))
            return False

        if not removed:
            return False

        logger.info("Review deleted", review_id=review.id, user_id=owner)
        self.events.review_deleted(review.id)
        return True

    def delete_reviews(self, reviews: Optional[Iterable[Optional[MovieReview]]]) -> int:
        """
        Delete many reviews in one statement.

        Each review is matched on its own id and owner (the scoped owner
        under a user scope), so a global ledger can delete a selection that
        spans several users.

        Returns:
            Number of rows removed
        """
        if not reviews:
            return 0

        pairs = []
        for review in reviews:
            if review is None or review.id is None:
                continue
            owner = self.scope.owner_for(review.user_id)
            if owner is not None:
                pairs.append((review.id, owner))

        if not pairs:
            return 0

        try:
            with self.database.session_scope() as session:
                removed = MovieReviewRepository(session).delete_pairs(pairs)
        except STORE_ERRORS as e:
            logger.error("Error deleting reviews", requested=len(pairs), error=str(e))
            return 0

        if removed > 0:
            logger.info("Reviews deleted", count=removed, scope=str(self.scope))
            self.events.reviews_bulk_deleted(removed)
        return removed

    def update_review(self, original: Optional[MovieReview], updated: Optional[MovieReview]) -> bool:
        """
        Overwrite the row identified by original with updated's fields.

        Only once a row has changed does updated receive original's id,
        the effective owner and its placeholder defaults; a rejected
        update leaves both objects untouched.
        """
        if original is None or updated is None or original.id is None:
            return False

        owner = self.scope.owner_for(original.user_id)
        if owner is None:
            return False
        values = _row_values(updated)

        try:
            with self.database.session_scope() as session:
                changed = MovieReviewRepository(session).overwrite(original.id, owner, **values)
        except STORE_ERRORS as e:
            logger.error("Error updating review", review_id=original.id, error=str(e))
            return False

        if not changed:
            return False

        original.user_id = owner
        updated.id = original.id
        updated.user_id = owner
        apply_placeholder_defaults(updated, values)

        logger.info("Review updated", review_id=updated.id, user_id=owner)
        self.events.review_updated(updated)
        return True

    def set_favorite(self, review: Optional[MovieReview], favorite: bool) -> bool:
        """Flag or unflag a review; the in-memory review follows the store."""
        if review is None or review.id is None:
            return False

        owner = self.scope.owner_for(review.user_id)
        if owner is None:
            return False

        try:
            with self.database.session_scope() as session:
                changed = MovieReviewRepository(session).set_favorite(review.id, owner, favorite)
        except STORE_ERRORS as e:
            logger.error("Error updating favorite status", review_id=review.id, error=str(e))
            return False

        if not changed:
            return False

        review.user_id = owner
        review.is_favorite = favorite
        self.events.review_updated(review)
        return True

    def clear_all_reviews(self) -> None:
        """Delete every review of every user, regardless of scope."""
        try:
            with self.database.session_scope() as session:
                removed = MovieReviewRepository(session).delete_all()
        except STORE_ERRORS as e:
            logger.error("Error clearing reviews", error=str(e))
            return

        logger.info("Reviews cleared", count=removed)
        self.events.reviews_cleared()

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_all_reviews(self) -> list[MovieReview]:
        """Reviews in scope, most recently created first."""
        try:
            with self.database.session_scope() as session:
                records = MovieReviewRepository(session).list_reviews(self.user_id)
                return [MovieReview.from_record(record) for record in records]
        except STORE_ERRORS as e:
            logger.error("Error getting reviews", scope=str(self.scope), error=str(e))
            return []

    def get_review(self, review_id: Optional[int]) -> Optional[MovieReview]:
        """One review by id, or None if it does not exist in this scope."""
        if review_id is None:
            return None
        try:
            with self.database.session_scope() as session:
                record = MovieReviewRepository(session).get_owned(review_id, self.user_id)
                return MovieReview.from_record(record) if record else None
        except STORE_ERRORS as e:
            logger.error("Error getting review", review_id=review_id, error=str(e))
            return None

    def search_reviews(self, query: Optional[str]) -> list[MovieReview]:
        """Case-insensitive substring search over title, director and genre."""
        if query is None or not query.strip():
            return self.get_all_reviews()
        try:
            with self.database.session_scope() as session:
                records = MovieReviewRepository(session).search(self.user_id, query)
                return [MovieReview.from_record(record) for record in records]
        except STORE_ERRORS as e:
            logger.error("Error searching reviews", query=query, error=str(e))
            return []

    def get_sorted_reviews(self, sort_by: Union[SortOption, str, None]) -> list[MovieReview]:
        return sort_reviews(self.get_all_reviews(), sort_by)

    def get_favorites(self) -> list[MovieReview]:
        try:
            with self.database.session_scope() as session:
                records = MovieReviewRepository(session).list_favorites(self.user_id)
                return [MovieReview.from_record(record) for record in records]
        except STORE_ERRORS as e:
            logger.error("Error getting favorites", scope=str(self.scope), error=str(e))
            return []

    # ═══════════════════════════════════════════════════════════════════════════
    # STATISTICS
    # ═══════════════════════════════════════════════════════════════════════════

    def average_rating(self) -> float:
        """Mean rating in scope; 0.0 when there are no reviews."""
        try:
            with self.database.session_scope() as session:
                return MovieReviewRepository(session).average_rating(self.user_id)
        except STORE_ERRORS as e:
            logger.error("Error getting average rating", error=str(e))
            return 0.0

    def total_reviews(self) -> int:
        try:
            with self.database.session_scope() as session:
                return MovieReviewRepository(session).count_reviews(self.user_id)
        except STORE_ERRORS as e:
            logger.error("Error getting total reviews", error=str(e))
            return 0

    def theater_visit_count(self) -> int:
        """Reviews that carry a (non-blank) ticket image path."""
        try:
            with self.database.session_scope() as session:
                return MovieReviewRepository(session).count_with_ticket(self.user_id)
        except STORE_ERRORS as e:
            logger.error("Error getting theater visit count", error=str(e))
            return 0

    def get_statistics(self) -> ReviewStatistics:
        """All dashboard numbers from one session."""
        try:
            with self.database.session_scope() as session:
                repo = MovieReviewRepository(session)
                return ReviewStatistics(
                    total_reviews=repo.count_reviews(self.user_id),
                    average_rating=repo.average_rating(self.user_id),
                    theater_visits=repo.count_with_ticket(self.user_id),
                    favorites=repo.count_favorites(self.user_id),
                )
        except STORE_ERRORS as e:
            logger.error("Error getting review statistics", error=str(e))
            return ReviewStatistics()
