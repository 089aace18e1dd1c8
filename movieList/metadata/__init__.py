"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses (Movie, ListState, sort descriptors)
* api_clients – the movies.json client singleton
* sorting     – ordering + toggle rules
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieList.metadata.core.models import (
    Movie, SortField, SortOrder, SortDescriptor, ListState,
)

# ── shared API client ─────────────────────────────────────────────────────
from movieList.metadata.api_clients.movies_client import (
    client as movies_client,
    MovieFetchError,
)

# ── ordering ──────────────────────────────────────────────────────────────
from movieList.metadata.sorting import sort_movies, next_order

__all__ = [
    "Movie",
    "SortField",
    "SortOrder",
    "SortDescriptor",
    "ListState",
    "movies_client",
    "MovieFetchError",
    "sort_movies",
    "next_order",
]
