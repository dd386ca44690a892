"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- exists(id)     → Check if record exists
- count()        → Count records with equality filters
- create()       → Insert a new record
- delete_all()   → Remove every row of the table
- execute_bulk() → Run an UPDATE/DELETE, returning rowcount

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[UserRecord]):
        pass

    repo = UserRepository(session)
    record = repo.get(7)  # Returns UserRecord, not Any!

flush() vs commit():
====================
- flush(): Sends SQL to the database but doesn't commit the transaction
- commit(): Permanently saves all changes. Called by
  Database.session_scope() when the service's block exits cleanly.
  Repository methods only flush so one service call is one transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import Executable
from sqlalchemy.sql.functions import count as sql_count

from moviejournal.shared.core.exceptions import ConflictError
from moviejournal.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The database session for the current unit of work
    """

    def __init__(self, model: Type[ModelType], session: Session) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (UserRecord, MovieReviewRecord)
            session: Session from Database.session_scope()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        SQL Generated:
            SELECT * FROM users WHERE id = 7
        """
        return self.session.get(self.model, record_id)

    def exists(self, record_id: int) -> bool:
        """
        Check if a record exists without loading it.

        SQL Generated:
            SELECT COUNT(*) FROM users WHERE id = 7
        """
        result = self.session.scalar(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result or 0) > 0

    def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filtering.

        SQL Generated:
            SELECT COUNT(*) FROM movie_reviews WHERE user_id = 7
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        return self.session.scalar(query) or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Flushes so the generated id and server defaults are available on
        the returned instance before the transaction commits.

        Raises:
            ConflictError: If a unique, foreign key or check constraint rejects the row

        SQL Generated:
            INSERT INTO users (username, email, password, ...)
            VALUES ('john', 'john@x.com', '$2b$...', ...)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        try:
            self.session.flush()
        except IntegrityError as e:
            raise ConflictError(
                f"{self.model.__tablename__} row violates an integrity constraint",
                details={"table": self.model.__tablename__, "error": str(e.orig)},
            ) from e

        self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def delete_all(self) -> int:
        """
        Delete every row of the table.

        Returns:
            Number of rows removed

        SQL Generated:
            DELETE FROM movie_reviews
        """
        result = self.execute_bulk(delete(self.model))
        return result.rowcount or 0

    def execute_bulk(self, statement: Executable) -> CursorResult:
        """
        Run an ORM-enabled UPDATE or DELETE and return its cursor result.

        Objects already loaded in the session are not synchronized; each
        service call uses a fresh session, and this keeps rowcount exact
        on backends where synchronization would add RETURNING.
        """
        return self.session.execute(statement, execution_options={"synchronize_session": False})
