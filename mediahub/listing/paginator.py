"""
Offset paginator producing the listing metadata clients bind to.

Formulas:
    totalPages    = ceil(totalDocs / limit)            (0 for an empty listing)
    pagingCounter = (page - 1) * limit + 1             (None for an empty listing)
    hasPrevPage   = page > 1
    hasNextPage   = page < totalPages

A page past the end is not an error: it comes back with no items.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total_docs: int = 0
    limit: int = 10
    page: int = 1
    total_pages: int = 0
    paging_counter: Optional[int] = None
    has_prev_page: bool = False
    has_next_page: bool = False
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    def with_items(self, items: List[Any]) -> "Page":
        """Same metadata, different items (e.g. after the author join)"""
        return replace(self, items=items)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation; the key names are a stable client contract."""
        return {
            "items": list(self.items),
            "totalDocs": self.total_docs,
            "limit": self.limit,
            "page": self.page,
            "totalPages": self.total_pages,
            "pagingCounter": self.paging_counter,
            "hasPrevPage": self.has_prev_page,
            "hasNextPage": self.has_next_page,
            "prevPage": self.prev_page,
            "nextPage": self.next_page,
        }


def paginate(rows: Sequence[T], page: int, limit: int) -> Page[T]:
    """
    Slice fully filtered and sorted rows into one page.

    Args:
        rows: Complete result set (post-filter, pre-slice)
        page: 1-based page number
        limit: Page size (no upper bound enforced here)

    Example:
        >>> p = paginate(list(range(12)), page=1, limit=10)
        >>> len(p.items), p.total_pages, p.has_next_page, p.has_prev_page
        (10, 2, True, False)
    """
    total_docs = len(rows)
    total_pages = math.ceil(total_docs / limit)
    start = (page - 1) * limit

    has_prev_page = page > 1
    has_next_page = page < total_pages

    return Page(
        items=list(rows[start:start + limit]),
        total_docs=total_docs,
        limit=limit,
        page=page,
        total_pages=total_pages,
        paging_counter=start + 1 if total_docs > 0 else None,
        has_prev_page=has_prev_page,
        has_next_page=has_next_page,
        prev_page=page - 1 if has_prev_page else None,
        next_page=page + 1 if has_next_page else None,
    )
