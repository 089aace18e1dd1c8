"""
metadata.sorting
~~~~~~~~~~~~~~~~
Ordering rules for the movie list.

* episode numbers compare as numbers ("10" after "9")
* title / description use locale collation (``locale.strxfrm``)
* ``list.sort`` is stable in both directions, ties keep their order
"""
from __future__ import annotations

import locale
import math
from typing import Callable, List, Tuple

from movieList.metadata.core.models import Movie, SortField, SortOrder, SortDescriptor

SortKey = Callable[[Movie], object]


def _episode_key(movie: Movie) -> Tuple[int, float]:
    # unparsable numbers go after every real one when ascending
    try:
        value = float(movie.episode_number.strip())
    except ValueError:
        return (1, 0.0)
    if math.isnan(value):
        return (1, 0.0)
    return (0, value)


def _text_key(field: SortField) -> SortKey:
    def key(movie: Movie) -> str:
        # strxfrm rejects embedded NULs, which JSON strings may carry
        return locale.strxfrm(getattr(movie, field.value).replace("\x00", ""))
    return key


def sort_key(field: SortField) -> SortKey:
    """Return the comparison key for *field*."""
    if field is SortField.EPISODE:
        return _episode_key
    return _text_key(field)


def next_order(previous: SortDescriptor | None) -> SortOrder:
    """
    Toggle rule used when the caller gives no explicit direction.

    No descriptor yet, or the last sort went ascending  → descending.
    Otherwise → ascending.  The field of *previous* is not consulted.
    """
    if previous is None:
        return SortOrder.DESC
    return previous.order.flipped()


def sort_movies(movies: List[Movie], field: SortField, order: SortOrder) -> None:
    """Reorder *movies* in place."""
    movies.sort(key=sort_key(field), reverse=order is SortOrder.DESC)
