"""
Review Change Notifications

In-process observer registry owned by each ReviewService. Panels in the
desktop UI subclass ReviewChangeListener, override the callbacks they care
about and register with ReviewService.add_listener().

Delivery Rules:
===============
- Synchronous, on the thread that performed the mutation
- In registration order
- Each notification iterates a snapshot taken under the lock, so a
  listener may add or remove listeners while being notified
- A listener that raises is logged and skipped; the rest still run and
  the mutation's result is unaffected

Usage:
======
    class ReviewTable(ReviewChangeListener):
        def on_review_added(self, review):
            self.refresh()

    service.add_listener(ReviewTable())
"""

import threading
from typing import Callable, Optional

from moviejournal.shared.core.logging import get_logger
from moviejournal.shared.entities.movie_review import MovieReview


logger = get_logger("events")


class ReviewChangeListener:
    """Callbacks fired after a ledger mutation. All default to no-ops."""

    def on_review_added(self, review: MovieReview) -> None:
        pass

    def on_review_updated(self, review: MovieReview) -> None:
        pass

    def on_review_deleted(self, review_id: int) -> None:
        pass

    def on_reviews_bulk_deleted(self, count: int) -> None:
        pass

    def on_reviews_cleared(self) -> None:
        pass


class ReviewEventBus:
    """Thread-safe listener registry with snapshot-on-notify delivery."""

    def __init__(self) -> None:
        self._listeners: list[ReviewChangeListener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Optional[ReviewChangeListener]) -> None:
        """Register a listener; None and repeat registrations are ignored."""
        if listener is None:
            return
        with self._lock:
            if not any(existing is listener for existing in self._listeners):
                self._listeners.append(listener)

    def unsubscribe(self, listener: Optional[ReviewChangeListener]) -> None:
        if listener is None:
            return
        with self._lock:
            self._listeners = [existing for existing in self._listeners if existing is not listener]

    def listeners(self) -> list[ReviewChangeListener]:
        with self._lock:
            return list(self._listeners)

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    # ═══════════════════════════════════════════════════════════════════════════
    # PUBLISH
    # ═══════════════════════════════════════════════════════════════════════════

    def review_added(self, review: MovieReview) -> None:
        self._publish("on_review_added", lambda listener: listener.on_review_added(review))

    def review_updated(self, review: MovieReview) -> None:
        self._publish("on_review_updated", lambda listener: listener.on_review_updated(review))

    def review_deleted(self, review_id: int) -> None:
        self._publish("on_review_deleted", lambda listener: listener.on_review_deleted(review_id))

    def reviews_bulk_deleted(self, count: int) -> None:
        self._publish("on_reviews_bulk_deleted", lambda listener: listener.on_reviews_bulk_deleted(count))

    def reviews_cleared(self) -> None:
        self._publish("on_reviews_cleared", lambda listener: listener.on_reviews_cleared())

    def _publish(self, event_name: str, deliver: Callable[[ReviewChangeListener], None]) -> None:
        for listener in self.listeners():
            try:
                deliver(listener)
            except Exception as e:
                logger.warning(
                    "Review listener failed",
                    event_name=event_name,
                    listener=type(listener).__name__,
                    error=str(e),
                )
