"""
Sort resolution for listing results.

Priority chain (most significant first):
1. matchScore descending (only when the request has free-text terms)
2. caller-requested field in the requested direction, or createdAt descending
3. id ascending (tie-breaker, keeps pagination stable across calls)

Sorting is done with successive stable sorts, least significant key first.
Missing values sort before present ones in ascending order (after them in
descending order), the same rule the document store applies.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Sequence

from .errors import InvalidArgument
from .scorer import ScoredCandidate
from .types import ListingRequest, SortDirection

MATCH_SCORE_KEY = "matchScore"
DEFAULT_SORT_KEY = "createdAt"
TIE_BREAK_KEY = "id"


@dataclass(frozen=True)
class SortKey:
    field: str
    direction: SortDirection = SortDirection.ASC

    def as_store_value(self) -> int:
        return self.direction.as_store_value()


def resolve_sort(request: ListingRequest, has_free_text: bool) -> List[SortKey]:
    """
    Resolve the ordered sort chain for a request.

    Raises:
        InvalidArgument: sort_key is not sortable for the request's scope
    """
    keys: List[SortKey] = []

    if has_free_text:
        keys.append(SortKey(MATCH_SCORE_KEY, SortDirection.DESC))

    if request.sort_key:
        allowed = request.scope.spec.sortable_fields
        if request.sort_key not in allowed:
            raise InvalidArgument(
                f"Cannot sort {request.scope.value} listings by '{request.sort_key}'. "
                f"Sortable fields: {', '.join(sorted(allowed))}"
            )
        keys.append(SortKey(request.sort_key, request.sort_direction))
    else:
        keys.append(SortKey(DEFAULT_SORT_KEY, SortDirection.DESC))

    keys.append(SortKey(TIE_BREAK_KEY, SortDirection.ASC))
    return keys


def _type_rank(value: Any) -> int:
    if isinstance(value, bool):
        return 3
    if isinstance(value, (int, float)):
        return 1
    if isinstance(value, str):
        return 2
    if isinstance(value, datetime):
        return 4
    return 5


def _sort_value(row: ScoredCandidate, field: str):
    if field == MATCH_SCORE_KEY:
        value = row.match_score
    else:
        value = row.candidate.get(field)

    if value is None:
        return (0, 0, 0)
    rank = _type_rank(value)
    if rank == 5:
        value = str(value)
    return (1, rank, value)


def sort_scored(rows: Sequence[ScoredCandidate], keys: Sequence[SortKey]) -> List[ScoredCandidate]:
    """Order scored rows by the resolved sort chain."""
    ordered = list(rows)
    for key in reversed(keys):
        ordered.sort(
            key=lambda row, f=key.field: _sort_value(row, f),
            reverse=key.direction is SortDirection.DESC,
        )
    return ordered
