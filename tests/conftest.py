import os
from pathlib import Path
from typing import Callable, Generator

# Settings are read once at import; keep bcrypt cheap for the whole run
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest

from moviejournal.shared.db.session import Database
from moviejournal.shared.entities import MovieReview, User
from moviejournal.shared.services import ReviewChangeListener, ReviewService, Scope, UserService


class RecordingListener(ReviewChangeListener):
    """Collects every notification as (callback name, payload)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def on_review_added(self, review):
        self.events.append(("added", review))

    def on_review_updated(self, review):
        self.events.append(("updated", review))

    def on_review_deleted(self, review_id):
        self.events.append(("deleted", review_id))

    def on_reviews_bulk_deleted(self, count):
        self.events.append(("bulk_deleted", count))

    def on_reviews_cleared(self):
        self.events.append(("cleared", None))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def database(tmp_path: Path) -> Generator[Database, None, None]:
    """A fresh SQLite database file per test."""
    db = Database(f"sqlite:///{tmp_path / 'moviejournal.db'}")
    db.ensure_schema()
    yield db
    db.dispose()


@pytest.fixture
def user_service(database: Database) -> UserService:
    return UserService(database)


@pytest.fixture
def john(user_service: UserService) -> User:
    user = User("john", "john@x.com", "password123")
    assert user_service.register(user)
    return user


@pytest.fixture
def ledger_for(database: Database) -> Callable[[int], ReviewService]:
    """Build a ledger scoped to one user id on the test database."""

    def _ledger(user_id: int) -> ReviewService:
        return ReviewService(Scope.for_user(user_id), database)

    return _ledger


@pytest.fixture
def admin_ledger(database: Database) -> ReviewService:
    return ReviewService(Scope.all_users(), database)


@pytest.fixture
def recorder() -> RecordingListener:
    return RecordingListener()


def make_review(
    title: str,
    director: str = "Someone",
    genre: str = "Drama",
    rating: float = 3.0,
    watched: str = "01/15/2024",
    **kwargs,
) -> MovieReview:
    return MovieReview(title, director, genre, rating, watched, **kwargs)
