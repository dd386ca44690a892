import pytest
from sqlalchemy import inspect, select, text

from moviejournal.shared.core.exceptions import StorageError
from moviejournal.shared.db import session as session_module
from moviejournal.shared.db.session import REVIEW_COLUMN_MIGRATIONS, Database, id_sequence_resync
from moviejournal.shared.entities import User
from moviejournal.shared.models import UserRecord
from moviejournal.shared.services import ReviewService, Scope, UserService

from tests.conftest import make_review


LEGACY_USERS_DDL = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username VARCHAR(50) NOT NULL UNIQUE,
    email VARCHAR(100) NOT NULL UNIQUE,
    password VARCHAR(255) NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    last_login DATETIME,
    is_active BOOLEAN DEFAULT 1
)
"""

LEGACY_REVIEWS_DDL = """
CREATE TABLE movie_reviews (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    title VARCHAR(255) NOT NULL,
    director VARCHAR(255) NOT NULL,
    genre VARCHAR(100) NOT NULL,
    rating NUMERIC(2, 1) NOT NULL,
    review TEXT,
    date_watched DATE NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    UNIQUE (user_id, title, director)
)
"""


def _review_columns(db: Database) -> set[str]:
    return {column["name"] for column in inspect(db.engine).get_columns("movie_reviews")}


def test_ensure_schema_creates_both_tables(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'fresh.db'}")
    db.ensure_schema()

    assert {"users", "movie_reviews"} <= set(inspect(db.engine).get_table_names())
    assert set(REVIEW_COLUMN_MIGRATIONS) <= _review_columns(db)
    db.dispose()


def test_ensure_schema_is_idempotent(database):
    database.ensure_schema()
    database.ensure_schema()

    assert set(REVIEW_COLUMN_MIGRATIONS) <= _review_columns(database)


def test_legacy_table_gets_missing_columns(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'legacy.db'}")
    with db.engine.begin() as conn:
        conn.execute(text(LEGACY_USERS_DDL))
        conn.execute(text(LEGACY_REVIEWS_DDL))
    assert not set(REVIEW_COLUMN_MIGRATIONS) & _review_columns(db)

    ledger = ReviewService(Scope.for_user(1), db)

    assert set(REVIEW_COLUMN_MIGRATIONS) <= _review_columns(db)
    review = make_review("Heat", ticket_image_path="tickets/heat.png")
    assert ledger.add_review(review)
    assert ledger.theater_visit_count() == 1
    assert ledger.set_favorite(review, True)
    assert ledger.get_favorites() == [review]
    db.dispose()


def test_seed_is_skipped_for_existing_user(database):
    database.ensure_schema(seed_user_id=3)
    database.ensure_schema(seed_user_id=3)

    with database.session_scope() as session:
        rows = session.scalars(select(UserRecord).where(UserRecord.id == 3)).all()
        assert len(rows) == 1


def test_registration_after_seed_gets_a_fresh_id(database):
    database.ensure_schema(seed_user_id=1)
    alice = User("alice", "alice@x.com", "password123")

    assert UserService(database).register(alice) is True
    assert alice.id is not None and alice.id != 1


@pytest.mark.parametrize("dialect_name", ["sqlite", "mysql", "mssql"])
def test_id_sequence_resync_not_needed_outside_postgresql(dialect_name):
    assert id_sequence_resync(dialect_name, "users") is None


def test_id_sequence_resync_on_postgresql():
    statement = id_sequence_resync("postgresql", "users")

    assert str(statement) == (
        "SELECT setval(pg_get_serial_sequence('users', 'id'), (SELECT MAX(id) FROM users))"
    )


def test_seed_executes_sequence_resync_after_insert(database, monkeypatch):
    calls = []

    def fake_resync(dialect_name, table):
        calls.append((dialect_name, table))
        return text("SELECT COUNT(*) FROM users WHERE id = 8")

    monkeypatch.setattr(session_module, "id_sequence_resync", fake_resync)
    database.ensure_schema(seed_user_id=8)
    database.ensure_schema(seed_user_id=8)

    assert calls == [("sqlite", "users")]


def test_check_connection(database):
    database.check_connection()


def test_check_connection_failure_raises_storage_error(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'missing' / 'journal.db'}")

    with pytest.raises(StorageError) as exc_info:
        db.check_connection()

    assert exc_info.value.to_dict()["error"]["code"] == "STORAGE_ERROR"


def test_ensure_schema_failure_raises_storage_error(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'missing' / 'journal.db'}")

    with pytest.raises(StorageError):
        db.ensure_schema()


def test_session_scope_rolls_back_on_error(database):
    with pytest.raises(RuntimeError):
        with database.session_scope() as session:
            session.add(UserRecord(username="ghost", email="ghost@x.com", password="x" * 60))
            session.flush()
            raise RuntimeError("abort")

    with database.session_scope() as session:
        assert session.scalar(select(UserRecord).where(UserRecord.username == "ghost")) is None
