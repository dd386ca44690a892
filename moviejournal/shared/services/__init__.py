"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules. The desktop UI talks only to this layer.

Service Pattern:
================
    UI panel → Service → Repository → Database
                 ↘ ReviewEventBus → ReviewChangeListener (UI panels)

Services should:
- Contain business logic and validation
- Open one session per call (Database.session_scope())
- Convert store failures into benign return values
- NOT render anything (that's for the UI)

Available Services:
===================
- UserService: Registration, login, profile and password management
- ReviewService: Review CRUD, search, sort, favorites and statistics over a Scope

Usage:
======
    from moviejournal.shared.services import ReviewService, Scope, UserService

    user = UserService().login("john", "password123")
    reviews = ReviewService(Scope.for_user(user.id)).get_all_reviews()
"""

from moviejournal.shared.services.events import ReviewChangeListener, ReviewEventBus
from moviejournal.shared.services.scope import Scope
from moviejournal.shared.services.sorting import select_strategy, sort_reviews
from moviejournal.shared.services.user_service import UserService
from moviejournal.shared.services.review_service import ReviewService

__all__ = [
    # Services
    "UserService",
    "ReviewService",
    # Scope and sorting
    "Scope",
    "select_strategy",
    "sort_reviews",
    # Notifications
    "ReviewChangeListener",
    "ReviewEventBus",
]
