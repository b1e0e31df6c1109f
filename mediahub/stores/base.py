"""
Abstract interfaces for the listing engine's collaborators.

All stores must implement these interfaces to be swappable.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Sequence

if TYPE_CHECKING:
    from ..listing.filters import StructuralPredicate
    from ..listing.sorting import SortKey


class DocumentStore(ABC):
    """
    Abstract document store.

    Executes a structural predicate (equality clauses) plus a sort
    specification and returns raw documents as plain dicts.
    """

    async def connect(self):
        """Optional setup (open pools, load seed data, etc.)"""
        pass

    async def disconnect(self):
        """Optional cleanup (close pools, etc.)"""
        pass

    @abstractmethod
    async def find(
        self,
        collection: str,
        predicate: "StructuralPredicate",
        sort: Optional[Sequence["SortKey"]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch every document in a collection matching the predicate.

        Args:
            collection: Collection name ("videos", "comments")
            predicate: Equality clauses to push down
            sort: Sort keys, most significant first (stores may ignore
                keys they do not hold, such as matchScore)

        Returns:
            List of documents (fresh dicts, safe for the caller to keep)
        """
        pass

    @abstractmethod
    async def count(self, collection: str, predicate: "StructuralPredicate") -> int:
        """Number of documents matching the predicate."""
        pass


class UserLookup(ABC):
    """Resolves owner ids to user records."""

    @abstractmethod
    async def lookup(self, ids: Iterable[Any]) -> Dict[Any, Dict[str, Any]]:
        """
        Resolve user ids in one batch.

        Returns:
            Mapping id -> user record; ids that do not resolve are absent
        """
        pass
