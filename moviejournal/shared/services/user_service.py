"""
User Service

Business logic for the user directory: registration, authentication,
profile and password changes, soft deactivation.

Boundary Rule:
==============
Nothing raised by the store escapes this service. Every method opens its
own session through Database.session_scope(), and any SQLAlchemyError,
ConflictError or StorageError is logged and turned into the method's
benign default (False, None, or an empty list). Rejected input is not an
error either: it is logged at debug level and yields the same default.

Case Sensitivity:
=================
Usernames and emails are matched case-insensitively everywhere, so
"John" cannot register next to "john" and either spelling logs in.

Usage:
======
    from moviejournal.shared.services import UserService

    service = UserService()
    user = User("john", "john@x.com", "password123")
    if service.register(user):
        signed_in = service.login("john", "password123")
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from moviejournal.shared.core.exceptions import ConflictError, StorageError
from moviejournal.shared.core.logging import get_logger
from moviejournal.shared.db.session import Database, get_database
from moviejournal.shared.entities.user import User
from moviejournal.shared.models.enums import LoginField
from moviejournal.shared.repositories.user_repository import UserRepository
from moviejournal.shared.utils.security import SecurityUtils


logger = get_logger("user_service")

# Store failures a public method converts into its default return value
STORE_ERRORS = (SQLAlchemyError, ConflictError, StorageError)


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _trim_identity(user: User) -> None:
    """Strip surrounding whitespace from username and email in place."""
    if user.username is not None:
        user.username = user.username.strip()
    if user.email is not None:
        user.email = user.email.strip()


class UserService:
    """
    Service for user directory business logic.

    Handles:
    - Registration with validation and uniqueness checks
    - Login by username or email (active accounts only)
    - Password change with re-authentication
    - Profile edits, deactivation, listing and wiping

    Attributes:
        database: Database whose sessions every call runs in
    """

    def __init__(self, database: Optional[Database] = None) -> None:
        """
        Initialize UserService and make sure the users table exists.

        Args:
            database: Injected Database; the process-wide one when omitted
        """
        self.database = database or get_database()
        try:
            self.database.ensure_schema()
        except StorageError as e:
            logger.error("Error creating users table", error=e.message)

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION & AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    def register(self, user: Optional[User]) -> bool:
        """
        Insert a new account.

        Username and email are stored trimmed, and the trimmed values are
        written back onto user. On success the generated id (and stored
        created_at) are written back as well.

        Returns:
            False if user is None, fails is_valid_user(), or its username
            or email is already registered; True once the row is stored
        """
        if user is None:
            return False
        _trim_identity(user)
        if not user.is_valid_user():
            logger.debug("Registration rejected: invalid user")
            return False

        try:
            with self.database.session_scope() as session:
                repo = UserRepository(session)
                if repo.username_exists(user.username) or repo.email_exists(user.email):
                    logger.debug("Registration rejected: username or email taken", username=user.username)
                    return False

                record = repo.create(
                    username=user.username,
                    email=user.email,
                    password=user.password,
                    is_active=user.is_active,
                )
                user.id = record.id
                user.created_at = record.created_at or user.created_at
        except STORE_ERRORS as e:
            logger.error("Error registering user", username=user.username, error=str(e))
            return False

        logger.info("User registered", user_id=user.id, username=user.username)
        return True

    def login(
        self,
        identifier: Optional[str],
        password: Optional[str],
        by: LoginField = LoginField.USERNAME,
    ) -> Optional[User]:
        """
        Authenticate an active account.

        Args:
            identifier: Username or email, depending on `by`
            password: Plain text password
            by: Which column identifier is matched against

        Returns:
            The signed-in User with last_login stamped, or None. Unknown
            account, deactivated account and wrong password all give None.
        """
        if _blank(identifier) or _blank(password):
            return None

        try:
            with self.database.session_scope() as session:
                repo = UserRepository(session)
                if by == LoginField.EMAIL:
                    record = repo.get_by_email(identifier, active_only=True)
                else:
                    record = repo.get_by_username(identifier, active_only=True)

                if record is None:
                    logger.debug("Login failed", by=by.value)
                    return None

                user = User.from_record(record)
                if not user.verify_password(password):
                    logger.debug("Login failed", by=by.value)
                    return None

                user.update_last_login()
                repo.set_last_login(user.id, user.last_login)
        except STORE_ERRORS as e:
            logger.error("Error during login", by=by.value, error=str(e))
            return None

        logger.info("User logged in", user_id=user.id)
        return user

    def login_by_email(self, email: Optional[str], password: Optional[str]) -> Optional[User]:
        return self.login(email, password, by=LoginField.EMAIL)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUPS
    # ═══════════════════════════════════════════════════════════════════════════

    def username_exists(self, username: Optional[str]) -> bool:
        if _blank(username):
            return False
        try:
            with self.database.session_scope() as session:
                return UserRepository(session).username_exists(username)
        except STORE_ERRORS as e:
            logger.error("Error checking username", error=str(e))
            return False

    def email_exists(self, email: Optional[str]) -> bool:
        if _blank(email):
            return False
        try:
            with self.database.session_scope() as session:
                return UserRepository(session).email_exists(email)
        except STORE_ERRORS as e:
            logger.error("Error checking email", error=str(e))
            return False

    def get_by_username(self, username: Optional[str]) -> Optional[User]:
        if _blank(username):
            return None
        try:
            with self.database.session_scope() as session:
                record = UserRepository(session).get_by_username(username)
                return User.from_record(record) if record else None
        except STORE_ERRORS as e:
            logger.error("Error getting user by username", error=str(e))
            return None

    def get_by_email(self, email: Optional[str]) -> Optional[User]:
        if _blank(email):
            return None
        try:
            with self.database.session_scope() as session:
                record = UserRepository(session).get_by_email(email)
                return User.from_record(record) if record else None
        except STORE_ERRORS as e:
            logger.error("Error getting user by email", error=str(e))
            return None

    def get_by_id(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        try:
            with self.database.session_scope() as session:
                record = UserRepository(session).get(user_id)
                return User.from_record(record) if record else None
        except STORE_ERRORS as e:
            logger.error("Error getting user by id", user_id=user_id, error=str(e))
            return None

    def list_all(self) -> list[User]:
        """Every account, active or not, newest first."""
        try:
            with self.database.session_scope() as session:
                return [User.from_record(record) for record in UserRepository(session).list_all()]
        except STORE_ERRORS as e:
            logger.error("Error listing users", error=str(e))
            return []

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATES
    # ═══════════════════════════════════════════════════════════════════════════

    def update_password(
        self,
        username: Optional[str],
        old_password: Optional[str],
        new_password: Optional[str],
    ) -> bool:
        """
        Change a password after re-authenticating with the old one.

        Returns:
            False if the old credentials do not log in, the new password is
            blank, or the store rejects the update
        """
        if _blank(new_password):
            return False
        if self.login(username, old_password) is None:
            return False

        try:
            digest = SecurityUtils.hash_password(new_password)
            with self.database.session_scope() as session:
                updated = UserRepository(session).set_password(username, digest)
        except STORE_ERRORS as e:
            logger.error("Error updating password", username=username, error=str(e))
            return False

        if updated:
            logger.info("Password updated", username=username)
        return updated > 0

    def deactivate(self, username: Optional[str]) -> bool:
        """Soft-delete: the row stays, login stops working."""
        if _blank(username):
            return False
        try:
            with self.database.session_scope() as session:
                updated = UserRepository(session).deactivate(username)
        except STORE_ERRORS as e:
            logger.error("Error deactivating user", username=username, error=str(e))
            return False

        if updated:
            logger.info("User deactivated", username=username)
        return updated > 0

    def update_profile(self, user: Optional[User]) -> bool:
        """
        Persist a new username and email for user.id.

        Both values are trimmed on user before they are checked and stored.

        Returns:
            False if user has no id, the new username/email fail validation,
            or another account already holds either of them. Keeping one's
            own username or email is allowed.
        """
        if user is None or user.id is None or user.id <= 0:
            return False
        _trim_identity(user)
        if not user.is_valid_username() or not user.is_valid_email():
            return False

        try:
            with self.database.session_scope() as session:
                repo = UserRepository(session)
                if repo.identity_taken_by_other(user.id, user.username, user.email):
                    logger.debug("Profile update rejected: username or email taken", user_id=user.id)
                    return False
                updated = repo.update_profile(user.id, user.username, user.email)
        except STORE_ERRORS as e:
            logger.error("Error updating user profile", user_id=user.id, error=str(e))
            return False

        if updated:
            logger.info("User profile updated", user_id=user.id)
        return updated > 0

    def clear(self) -> None:
        """Delete every account (and, by cascade, every review)."""
        try:
            with self.database.session_scope() as session:
                removed = UserRepository(session).delete_all()
        except STORE_ERRORS as e:
            logger.error("Error clearing users", error=str(e))
            return
        logger.info("Users cleared", count=removed)
