"""
metadata.core
~~~~~~~~~~~~~
Domain layer – pure dataclasses, no Qt and no network.
"""

from .models import Movie, SortField, SortOrder, SortDescriptor, ListState

__all__ = ["Movie", "SortField", "SortOrder", "SortDescriptor", "ListState"]
