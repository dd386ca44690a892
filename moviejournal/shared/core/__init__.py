"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from moviejournal.shared.core.logging import logger, get_logger
    from moviejournal.shared.core.exceptions import MovieJournalError, InvalidInputError

    logger.info("Starting operation", user_id=user_id)
"""

from moviejournal.shared.core.logging import (
    logger,
    get_logger,
    signed_in_as,
    signed_out,
)
from moviejournal.shared.core.exceptions import (
    MovieJournalError,
    ValidationError,
    InvalidInputError,
    ConflictError,
    StorageError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "signed_in_as",
    "signed_out",
    # Exceptions
    "MovieJournalError",
    "ValidationError",
    "InvalidInputError",
    "ConflictError",
    "StorageError",
]
