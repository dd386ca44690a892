"""
Enums used across the application.
"""

from enum import Enum
from typing import Optional


class LoginField(str, Enum):
    """Which column a login identifier is matched against."""

    USERNAME = "username"
    EMAIL = "email"


class SortOption(str, Enum):
    """
    Review orderings offered by the sort drop-down.

    Values are the exact labels the desktop UI displays, so a combo box
    selection can be passed straight to SortOption.parse().
    """

    DATE_NEWEST = "Date (Newest)"
    DATE_OLDEST = "Date (Oldest)"
    RATING_HIGH = "Rating (High)"
    RATING_LOW = "Rating (Low)"
    TITLE_ASC = "Title (A-Z)"
    TITLE_DESC = "Title (Z-A)"

    @classmethod
    def parse(cls, key: Optional[object]) -> "SortOption":
        """Resolve a label or member; anything unrecognised means DATE_NEWEST."""
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except (ValueError, TypeError):
            return cls.DATE_NEWEST
