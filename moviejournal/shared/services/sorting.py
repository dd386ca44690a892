"""
Review Sort Strategies

Pure functions that return a new, ordered list of reviews. The input list
is never mutated.

Orderings:
==========
    SortOption.DATE_NEWEST   date_watched desc, missing dates last   tie: id desc
    SortOption.DATE_OLDEST   date_watched asc, missing dates first   tie: id asc
    SortOption.RATING_HIGH   rating desc                             tie: title asc
    SortOption.RATING_LOW    rating asc                              tie: title asc
    SortOption.TITLE_ASC     title asc (case-insensitive), missing last   tie: director asc
    SortOption.TITLE_DESC    title desc (case-insensitive), missing last  tie: director desc

Each strategy sorts by the tie-break first and then by the primary key;
Python's sort is stable, so equal primary keys keep tie-break order.

Usage:
======
    from moviejournal.shared.services.sorting import sort_reviews

    ordered = sort_reviews(reviews, "Rating (High)")
"""

from typing import Callable, Iterable, Optional, Union

from moviejournal.shared.entities.movie_review import MovieReview
from moviejournal.shared.models.enums import SortOption


SortStrategy = Callable[[Iterable[MovieReview]], list[MovieReview]]


def _text(value: Optional[str]) -> str:
    return value if value is not None else ""


def _id(review: MovieReview) -> int:
    return review.id if review.id is not None else 0


def _missing_split(reviews: list[MovieReview], attr: str) -> tuple[list[MovieReview], list[MovieReview]]:
    present = [r for r in reviews if getattr(r, attr) is not None]
    missing = [r for r in reviews if getattr(r, attr) is None]
    return present, missing


# ═══════════════════════════════════════════════════════════════════════════════
# STRATEGIES
# ═══════════════════════════════════════════════════════════════════════════════


def by_date_newest(reviews: Iterable[MovieReview]) -> list[MovieReview]:
    ordered = sorted(reviews, key=_id, reverse=True)
    present, missing = _missing_split(ordered, "date_watched")
    present.sort(key=lambda r: r.date_watched, reverse=True)
    return present + missing


def by_date_oldest(reviews: Iterable[MovieReview]) -> list[MovieReview]:
    ordered = sorted(reviews, key=_id)
    present, missing = _missing_split(ordered, "date_watched")
    present.sort(key=lambda r: r.date_watched)
    return missing + present


def by_rating_high(reviews: Iterable[MovieReview]) -> list[MovieReview]:
    ordered = sorted(reviews, key=lambda r: _text(r.title))
    ordered.sort(key=lambda r: r.rating, reverse=True)
    return ordered


def by_rating_low(reviews: Iterable[MovieReview]) -> list[MovieReview]:
    ordered = sorted(reviews, key=lambda r: _text(r.title))
    ordered.sort(key=lambda r: r.rating)
    return ordered


def by_title_asc(reviews: Iterable[MovieReview]) -> list[MovieReview]:
    ordered = sorted(reviews, key=lambda r: _text(r.director))
    present, missing = _missing_split(ordered, "title")
    present.sort(key=lambda r: r.title.casefold())
    return present + missing


def by_title_desc(reviews: Iterable[MovieReview]) -> list[MovieReview]:
    ordered = sorted(reviews, key=lambda r: _text(r.director), reverse=True)
    present, missing = _missing_split(ordered, "title")
    present.sort(key=lambda r: r.title.casefold(), reverse=True)
    return present + missing


STRATEGIES: dict[SortOption, SortStrategy] = {
    SortOption.DATE_NEWEST: by_date_newest,
    SortOption.DATE_OLDEST: by_date_oldest,
    SortOption.RATING_HIGH: by_rating_high,
    SortOption.RATING_LOW: by_rating_low,
    SortOption.TITLE_ASC: by_title_asc,
    SortOption.TITLE_DESC: by_title_desc,
}


def select_strategy(key: Union[SortOption, str, None]) -> SortStrategy:
    """Strategy for a SortOption or its label; unknown keys get DATE_NEWEST."""
    return STRATEGIES[SortOption.parse(key)]


def sort_reviews(reviews: Iterable[MovieReview], key: Union[SortOption, str, None]) -> list[MovieReview]:
    return select_strategy(key)(reviews)
