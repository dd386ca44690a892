"""
User Entity

In-memory representation of an account.

The password attribute only ever holds a bcrypt digest. Passing a
plaintext password to the constructor (or set_plain_text_password)
hashes it immediately; the plaintext length is remembered so
is_valid_password() can still apply the minimum-length rule.

Usage:
======
    user = User("john", "john@x.com", "password123")
    user.is_valid_user()               # True
    user.verify_password("password123")  # True
    user.password                      # "$2b$12$..."
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from moviejournal.shared.core.exceptions import InvalidInputError
from moviejournal.shared.utils.security import SecurityUtils

if TYPE_CHECKING:
    from moviejournal.shared.models.user import UserRecord


USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6


class User:
    """
    A registered (or about to be registered) account.

    Equality is on (username, email).
    """

    def __init__(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        *,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        last_login: Optional[datetime] = None,
        is_active: bool = True,
        password_is_hashed: bool = False,
    ) -> None:
        self.id = id
        self.username = username
        self.email = email
        self.password: Optional[str] = None
        self._plain_password_length: Optional[int] = None
        self.created_at = created_at or datetime.now(timezone.utc)
        self.last_login = last_login
        self.is_active = is_active

        if password is not None:
            if password_is_hashed:
                self.password = password
            else:
                self.set_plain_text_password(password)

    @classmethod
    def from_record(cls, record: "UserRecord") -> "User":
        """Hydrate from a users row (password column is already a digest)."""
        return cls(
            record.username,
            record.email,
            record.password,
            id=record.id,
            created_at=record.created_at,
            last_login=record.last_login,
            is_active=bool(record.is_active),
            password_is_hashed=True,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD
    # ═══════════════════════════════════════════════════════════════════════════

    def set_plain_text_password(self, plain_password: Optional[str]) -> None:
        """
        Hash and store a plaintext password.

        Raises:
            InvalidInputError: If plain_password is None, empty or whitespace-only
        """
        if plain_password is None or not plain_password.strip():
            raise InvalidInputError("Password cannot be null or empty", details={"field": "password"})
        self.password = SecurityUtils.hash_password(plain_password)
        self._plain_password_length = len(plain_password)

    def verify_password(self, plain_password: Optional[str]) -> bool:
        """Check a plaintext password against the stored digest."""
        if plain_password is None or self.password is None:
            return False
        return SecurityUtils.verify_password(plain_password, self.password)

    def is_password_hashed(self) -> bool:
        return SecurityUtils.looks_like_digest(self.password)

    # ═══════════════════════════════════════════════════════════════════════════
    # STATE
    # ═══════════════════════════════════════════════════════════════════════════

    def update_last_login(self) -> None:
        self.last_login = datetime.now(timezone.utc)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    def is_valid_username(self) -> bool:
        if self.username is None:
            return False
        return USERNAME_MIN_LENGTH <= len(self.username.strip()) <= USERNAME_MAX_LENGTH

    def is_valid_email(self) -> bool:
        """Exactly one "@", not at either end, followed somewhere by a "."."""
        email = self.email
        if email is None or email.count("@") != 1:
            return False
        if email.startswith("@") or email.endswith("@"):
            return False
        return email.index("@") < email.rfind(".")

    def is_valid_password(self) -> bool:
        if self._plain_password_length is not None:
            return self._plain_password_length >= PASSWORD_MIN_LENGTH
        return self.password is not None and len(self.password) >= PASSWORD_MIN_LENGTH

    def is_valid_user(self) -> bool:
        return self.is_valid_username() and self.is_valid_email() and self.is_valid_password()

    # ═══════════════════════════════════════════════════════════════════════════
    # DUNDER
    # ═══════════════════════════════════════════════════════════════════════════

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return (self.username, self.email) == (other.username, other.email)

    def __hash__(self) -> int:
        return hash((self.username, self.email))

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r}, email={self.email!r}, is_active={self.is_active})>"
