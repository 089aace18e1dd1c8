# Movie dataclass + sort / list-state DTOs
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

_REQUIRED = ("title", "episode_number", "description", "poster")


@dataclass(frozen=True, slots=True)
class Movie:
    title: str
    episode_number: str          # doubles as the row key, no id in the payload
    description: str
    poster: str                  # relative image path

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> Movie:
        """
        Build a record from one entry of the ``movies`` array.

        Extra keys are ignored. A missing key or a non-string value raises
        ``ValueError``; an integer episode number is accepted as text.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"movie entry must be an object, got {type(raw).__name__}")

        missing = [k for k in _REQUIRED if k not in raw]
        if missing:
            raise ValueError(f"movie entry missing {', '.join(missing)}")

        fields: dict[str, str] = {}
        for key in _REQUIRED:
            value = raw[key]
            if key == "episode_number" and isinstance(value, int) and not isinstance(value, bool):
                value = str(value)
            if not isinstance(value, str):
                raise ValueError(f"movie field {key!r} must be a string")
            fields[key] = value
        return cls(**fields)


class SortField(str, Enum):
    EPISODE     = "episode_number"
    TITLE       = "title"
    DESCRIPTION = "description"


class SortOrder(Enum):
    ASC  = "asc"
    DESC = "desc"

    def flipped(self) -> SortOrder:
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC


@dataclass(frozen=True, slots=True)
class SortDescriptor:
    field: SortField
    order: SortOrder             # direction last applied


@dataclass(frozen=True, slots=True)
class ListState:
    """Read-only snapshot handed to the widgets."""
    movies: tuple[Movie, ...] = ()
    loading: bool = False
    sort: SortDescriptor | None = None

    @property
    def keys(self) -> list[str]:
        return [m.episode_number for m in self.movies]
