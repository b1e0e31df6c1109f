"""
Request-side types for the listing engine.

Each entity scope (videos, comments) is described by a static ScopeSpec:
which collection to read, which field carries the searchable text, which
fields may be sorted on, and which fields are returned to clients.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Optional, Tuple


class EntityScope(str, Enum):
    VIDEO = "video"
    COMMENT = "comment"

    @property
    def spec(self) -> "ScopeSpec":
        return SCOPE_SPECS[self]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Any) -> "SortDirection":
        """
        Parse a transport-level sort direction.

        -1 / "-1" / "desc" / "descending" mean descending; any other value
        (including junk) is treated as ascending.
        """
        if value is None:
            return cls.ASC
        text = str(value).strip().lower()
        if text in ("-1", "desc", "descending"):
            return cls.DESC
        return cls.ASC

    def as_store_value(self) -> int:
        return -1 if self is SortDirection.DESC else 1


@dataclass(frozen=True)
class ScopeSpec:
    collection: str
    text_field: str
    owner_field: str
    parent_field: Optional[str]
    requires_published: bool
    sortable_fields: FrozenSet[str]
    projection: Tuple[str, ...]


SCOPE_SPECS = {
    EntityScope.VIDEO: ScopeSpec(
        collection="videos",
        text_field="title",
        owner_field="owner",
        parent_field=None,
        requires_published=True,
        sortable_fields=frozenset(["createdAt", "updatedAt", "title", "views", "duration"]),
        projection=("id", "videoFile", "thumbnail", "title", "description", "duration", "views", "createdAt"),
    ),
    EntityScope.COMMENT: ScopeSpec(
        collection="comments",
        text_field="content",
        owner_field="owner",
        parent_field="video",
        requires_published=False,
        sortable_fields=frozenset(["createdAt", "updatedAt"]),
        projection=("id", "content", "video", "createdAt", "updatedAt"),
    ),
}


@dataclass(frozen=True)
class ListingRequest:
    """
    One listing query, built by the caller from transport parameters.

    page and limit are expected to be positive integers already; the
    engine re-checks them and raises InvalidArgument otherwise.
    """
    scope: EntityScope
    free_text: Optional[str] = None
    sort_key: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
    owner_filter: Optional[str] = None
    parent_filter: Optional[str] = None
    page: int = 1
    limit: int = 10
    requester_id: Optional[str] = None
