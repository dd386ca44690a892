"""
Custom Exceptions

Application-specific exceptions with machine-readable error codes.

Exception Hierarchy:
====================
    MovieJournalError (base)
       │
       ├── ValidationError              ← Invalid input data
       │      └── InvalidInputError     ← Null/blank argument to a hashing or password call
       ├── ConflictError                ← Row rejected by a unique/foreign key/check constraint
       └── StorageError                 ← Database unreachable or schema bootstrap failed

Boundary Rule:
==============
Only InvalidInputError escapes the services (from SecurityUtils and
User.set_plain_text_password). Repositories raise ConflictError when an
insert violates a constraint and Database raises StorageError when it
cannot reach the store; UserService and ReviewService catch both, log
them, and return a benign value instead.

Usage:
======
    from moviejournal.shared.core.exceptions import InvalidInputError

    if not password or not password.strip():
        raise InvalidInputError("Password cannot be null or empty", details={"field": "password"})
"""

from typing import Any, Optional


class MovieJournalError(Exception):
    """
    Base exception for all Movie Journal errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for log payloads and UI dialogs.

        Returns:
            Dictionary with error details
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(MovieJournalError):
    """Raised when input data fails validation."""

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: str = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class InvalidInputError(ValidationError, ValueError):
    """
    A required argument was None, empty or whitespace-only.

    Also a ValueError so callers written against the standard
    library's conventions can catch it without importing this module.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code="INVALID_INPUT", details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(MovieJournalError):
    """
    Operation conflicts with existing data.

    Raised when an insert trips a unique constraint (duplicate username,
    email, or user+title+director review), a foreign key, or a check.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code="CONFLICT", details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# STORAGE ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class StorageError(MovieJournalError):
    """The relational store could not be reached or rejected a statement."""

    def __init__(
        self,
        message: str = "Storage unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code="STORAGE_ERROR", details=details)
