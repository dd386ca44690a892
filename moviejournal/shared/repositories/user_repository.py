"""
User Repository

Database operations specific to the users table.
Extends BaseRepository with user-specific query methods.

Case Sensitivity:
=================
Usernames and emails are trimmed and compared with LOWER() on both sides, so " John"
and "john" are the same account on every backend regardless of the
column collation.

Common Operations:
==================
- get_by_username() / get_by_email()   → Find a user (optionally active only)
- username_exists() / email_exists()   → Availability checks for registration
- identity_taken_by_other()            → Profile-edit uniqueness check
- set_password() / set_last_login() / deactivate() / update_profile()
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql.functions import count as sql_count

from moviejournal.shared.models.user import UserRecord
from moviejournal.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for users table operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by username or email
    - Checking username/email availability
    - Updating login timestamp, password, profile and active flag
    """

    def __init__(self, session: Session) -> None:
        super().__init__(UserRecord, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_by_username(self, username: str, active_only: bool = False) -> Optional[UserRecord]:
        """
        Get user by username, case-insensitively.

        SQL Generated:
            SELECT * FROM users WHERE lower(username) = 'john' [AND is_active = true]
        """
        stmt = select(UserRecord).where(func.lower(UserRecord.username) == username.strip().lower())
        if active_only:
            stmt = stmt.where(UserRecord.is_active.is_(True))
        return self.session.scalars(stmt).first()

    def get_by_email(self, email: str, active_only: bool = False) -> Optional[UserRecord]:
        """
        Get user by email address, case-insensitively.

        SQL Generated:
            SELECT * FROM users WHERE lower(email) = 'john@x.com' [AND is_active = true]
        """
        stmt = select(UserRecord).where(func.lower(UserRecord.email) == email.strip().lower())
        if active_only:
            stmt = stmt.where(UserRecord.is_active.is_(True))
        return self.session.scalars(stmt).first()

    def username_exists(self, username: str) -> bool:
        """Check if a username is already registered (active or not)."""
        return self.get_by_username(username) is not None

    def email_exists(self, email: str) -> bool:
        """Check if an email is already registered (active or not)."""
        return self.get_by_email(email) is not None

    def identity_taken_by_other(self, user_id: int, username: str, email: str) -> bool:
        """
        Check whether another user already holds this username or email.

        SQL Generated:
            SELECT COUNT(*) FROM users
            WHERE (lower(username) = 'john' OR lower(email) = 'john@x.com') AND id != 7
        """
        stmt = (
            select(sql_count())
            .select_from(UserRecord)
            .where(
                or_(
                    func.lower(UserRecord.username) == username.strip().lower(),
                    func.lower(UserRecord.email) == email.strip().lower(),
                ),
                UserRecord.id != user_id,
            )
        )
        return (self.session.scalar(stmt) or 0) > 0

    def list_all(self) -> list[UserRecord]:
        """All users, newest account first."""
        stmt = select(UserRecord).order_by(UserRecord.created_at.desc(), UserRecord.id.desc())
        return list(self.session.scalars(stmt).all())

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def set_last_login(self, user_id: int, when: datetime) -> int:
        """Stamp last_login; returns rows affected."""
        result = self.execute_bulk(
            update(UserRecord).where(UserRecord.id == user_id).values(last_login=when)
        )
        return result.rowcount or 0

    def set_password(self, username: str, password_digest: str) -> int:
        """Replace the stored digest for a username; returns rows affected."""
        result = self.execute_bulk(
            update(UserRecord)
            .where(func.lower(UserRecord.username) == username.strip().lower())
            .values(password=password_digest)
        )
        return result.rowcount or 0

    def deactivate(self, username: str) -> int:
        """Soft-delete: clear is_active; returns rows affected."""
        result = self.execute_bulk(
            update(UserRecord)
            .where(func.lower(UserRecord.username) == username.strip().lower())
            .values(is_active=False)
        )
        return result.rowcount or 0

    def update_profile(self, user_id: int, username: str, email: str) -> int:
        """Overwrite username and email for one id; returns rows affected."""
        result = self.execute_bulk(
            update(UserRecord)
            .where(UserRecord.id == user_id)
            .values(username=username, email=email)
        )
        return result.rowcount or 0
