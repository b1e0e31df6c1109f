"""
Structural predicate builder.

Translates the non-text parts of a ListingRequest (publication state, owner,
parent document) into equality clauses that a document store can push down.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ..utils import is_valid_object_id
from .types import EntityScope, ListingRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuralPredicate:
    """Conjunction of field equality clauses"""
    equals: Mapping[str, Any] = field(default_factory=dict)

    def matches(self, doc: Mapping[str, Any]) -> bool:
        return all(doc.get(key) == value for key, value in self.equals.items())

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.equals)


def build_predicate(request: ListingRequest) -> StructuralPredicate:
    """
    Build the structural predicate for a listing request.

    - Videos: only published documents are listable
    - Owner filter: applied only when it looks like a valid id, otherwise ignored
    - Comments: restricted to the parent video (validated by the engine beforehand)

    Example:
        >>> build_predicate(ListingRequest(scope=EntityScope.VIDEO)).to_dict()
        {'isPublished': True}
    """
    spec = request.scope.spec
    clauses: Dict[str, Any] = {}

    if spec.requires_published:
        clauses["isPublished"] = True

    if request.owner_filter is not None:
        if is_valid_object_id(request.owner_filter):
            clauses[spec.owner_field] = request.owner_filter
        else:
            logger.debug(f"Ignoring malformed owner filter: {request.owner_filter!r}")

    if spec.parent_field and request.parent_filter is not None:
        clauses[spec.parent_field] = request.parent_filter

    return StructuralPredicate(equals=clauses)
