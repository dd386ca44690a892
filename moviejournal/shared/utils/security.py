"""
Security Utilities

Password hashing and verification.

Password Hashing:
=================
Uses bcrypt (through passlib) with a fresh random salt per hash and a
fixed work factor taken from settings.BCRYPT_ROUNDS. Hashing the same
password twice yields two different digests; both verify.

Usage:
======
    from moviejournal.shared.utils.security import SecurityUtils

    # Hash password
    hashed = SecurityUtils.hash_password("password123")

    # Verify password
    if SecurityUtils.verify_password("password123", hashed):
        print("Password matches!")

    # Recognise a stored digest
    SecurityUtils.looks_like_digest(hashed)  # True
"""

from typing import Optional

from passlib.context import CryptContext

from moviejournal.config.settings import settings
from moviejournal.shared.core.exceptions import InvalidInputError


# Prefixes produced by the bcrypt family; every digest is exactly 60 chars
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_DIGEST_LENGTH = 60

# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - Password verification that never raises on bad digests
    - Digest format recognition
    """

    @staticmethod
    def hash_password(password: Optional[str]) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt and work factor)

        Raises:
            InvalidInputError: If password is None, empty or whitespace-only
        """
        if password is None or not password.strip():
            raise InvalidInputError(
                "Password cannot be null or empty",
                details={"field": "password"},
            )
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: Optional[str], hashed_password: Optional[str]) -> bool:
        """
        Verify password against bcrypt hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches. False for a None plaintext or a
            digest passlib cannot parse.

        Raises:
            InvalidInputError: If hashed_password is None
        """
        if hashed_password is None:
            raise InvalidInputError(
                "Hashed password cannot be null",
                details={"field": "hashed_password"},
            )
        if plain_password is None:
            return False

        try:
            return pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False

    @staticmethod
    def looks_like_digest(value: Optional[str]) -> bool:
        """Check whether value has the shape of a bcrypt digest."""
        if value is None or len(value) != BCRYPT_DIGEST_LENGTH:
            return False
        return value.startswith(BCRYPT_PREFIXES)

    @staticmethod
    def work_factor() -> int:
        """bcrypt cost used for new hashes."""
        return settings.BCRYPT_ROUNDS
