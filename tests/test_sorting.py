from datetime import date

import pytest

from moviejournal.shared.entities import MovieReview
from moviejournal.shared.models.enums import SortOption
from moviejournal.shared.services.sorting import (
    by_date_newest,
    select_strategy,
    sort_reviews,
)


def _review(review_id, title, director="Director", rating=3.0, watched=date(2024, 1, 1)) -> MovieReview:
    return MovieReview(title, director, "Drama", rating, watched, id=review_id, user_id=1)


def _titles(reviews):
    return [r.title for r in reviews]


def _ids(reviews):
    return [r.id for r in reviews]


@pytest.fixture
def trio():
    return [
        _review(1, "B", rating=4.5),
        _review(2, "A", rating=4.8),
        _review(3, "C", rating=4.9),
    ]


def test_rating_high(trio):
    assert [r.rating for r in sort_reviews(trio, "Rating (High)")] == [4.9, 4.8, 4.5]


def test_title_a_to_z(trio):
    assert _titles(sort_reviews(trio, "Title (A-Z)")) == ["A", "B", "C"]


def test_input_list_is_not_mutated(trio):
    before = list(trio)
    result = sort_reviews(trio, SortOption.TITLE_DESC)

    assert trio == before
    assert result is not trio


def test_date_newest_puts_missing_dates_last_and_breaks_ties_by_id_desc():
    undated = _review(9, "Undated")
    undated.date_watched = None
    reviews = [
        _review(1, "Old", watched=date(2023, 1, 1)),
        undated,
        _review(2, "Tie low id", watched=date(2024, 5, 1)),
        _review(3, "Tie high id", watched=date(2024, 5, 1)),
    ]

    assert _ids(sort_reviews(reviews, SortOption.DATE_NEWEST)) == [3, 2, 1, 9]


def test_date_oldest_puts_missing_dates_first_and_breaks_ties_by_id_asc():
    undated = _review(9, "Undated")
    undated.date_watched = None
    reviews = [
        _review(3, "Tie high id", watched=date(2024, 5, 1)),
        _review(1, "Old", watched=date(2023, 1, 1)),
        undated,
        _review(2, "Tie low id", watched=date(2024, 5, 1)),
    ]

    assert _ids(sort_reviews(reviews, SortOption.DATE_OLDEST)) == [9, 1, 2, 3]


def test_rating_ties_break_on_title_ascending():
    reviews = [_review(1, "Zodiac", rating=4.0), _review(2, "Alien", rating=4.0), _review(3, "Heat", rating=2.0)]

    assert _titles(sort_reviews(reviews, SortOption.RATING_HIGH)) == ["Alien", "Zodiac", "Heat"]
    assert _titles(sort_reviews(reviews, SortOption.RATING_LOW)) == ["Heat", "Alien", "Zodiac"]


def test_title_sort_is_case_insensitive_with_missing_titles_last():
    untitled = _review(4, None)
    reviews = [_review(1, "b"), untitled, _review(2, "A"), _review(3, "C")]

    assert _titles(sort_reviews(reviews, SortOption.TITLE_ASC)) == ["A", "b", "C", None]
    assert _titles(sort_reviews(reviews, SortOption.TITLE_DESC)) == ["C", "b", "A", None]


def test_title_ties_break_on_director():
    reviews = [
        _review(1, "Solaris", director="Tarkovsky"),
        _review(2, "solaris", director="Soderbergh"),
    ]

    assert [r.director for r in sort_reviews(reviews, SortOption.TITLE_ASC)] == ["Soderbergh", "Tarkovsky"]
    assert [r.director for r in sort_reviews(reviews, SortOption.TITLE_DESC)] == ["Tarkovsky", "Soderbergh"]


@pytest.mark.parametrize("key", [None, "", "Popularity", 42])
def test_unknown_keys_default_to_newest_date(key):
    assert select_strategy(key) is by_date_newest


@pytest.mark.parametrize("option", list(SortOption))
def test_every_label_resolves_to_its_option(option):
    assert SortOption.parse(option.value) is option
    assert SortOption.parse(option) is option


def test_empty_list():
    assert sort_reviews([], SortOption.RATING_HIGH) == []
