"""
Review Ledger Scope

Which owner's rows a ReviewService operates over.

    Scope.all_users()    → admin view, no owner filter on reads
    Scope.for_user(7)    → every read filtered by, every write stamped with, user 7

A user literally assigned id 0 is an ordinary user here; "no owner" is
its own variant rather than a sentinel id.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Scope:
    """Owner filter for a review ledger."""

    user_id: Optional[int] = None

    @classmethod
    def all_users(cls) -> "Scope":
        return cls(None)

    @classmethod
    def for_user(cls, user_id: int) -> "Scope":
        if user_id is None:
            raise ValueError("for_user() needs a user id; use Scope.all_users() for the admin view")
        return cls(user_id)

    @property
    def is_global(self) -> bool:
        return self.user_id is None

    def owner_for(self, user_id: Optional[int]) -> Optional[int]:
        """The owner id a write should use: the scoped id wins over the record's own."""
        return user_id if self.is_global else self.user_id

    def __str__(self) -> str:
        return "all users" if self.is_global else f"user {self.user_id}"
