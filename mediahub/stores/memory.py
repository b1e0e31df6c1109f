"""
In-memory document store.

Backs local development (optionally seeded from a JSON file) and unit tests.
Seed file format:

    {
        "users":    [{"id": "...", "fullName": "...", "username": "...", "avatar": "..."}],
        "videos":   [{"id": "...", "owner": "...", "title": "...", "isPublished": true, ...}],
        "comments": [{"id": "...", "owner": "...", "video": "...", "content": "...", ...}]
    }
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..listing.filters import StructuralPredicate
from ..listing.scorer import ScoredCandidate
from ..listing.sorting import MATCH_SCORE_KEY, SortKey, sort_scored
from .base import DocumentStore, UserLookup

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class InMemoryDocumentStore(DocumentStore, UserLookup):
    """Dict-backed store implementing both DocumentStore and UserLookup"""

    def __init__(
        self,
        collections: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        seed_file: Optional[Union[str, Path]] = None,
    ):
        self.collections: Dict[str, List[Dict[str, Any]]] = {
            name: [dict(doc) for doc in docs] for name, docs in (collections or {}).items()
        }
        self.seed_file = Path(seed_file) if seed_file else None

    async def connect(self):
        if self.seed_file is None:
            return
        with open(self.seed_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        for name, docs in data.items():
            self.collections.setdefault(name, []).extend(docs)
        logger.info(
            f"Loaded seed data from {self.seed_file}: "
            + ", ".join(f"{name}={len(docs)}" for name, docs in self.collections.items())
        )

    def insert(self, collection: str, *docs: Dict[str, Any]):
        self.collections.setdefault(collection, []).extend(dict(d) for d in docs)

    async def find(
        self,
        collection: str,
        predicate: StructuralPredicate,
        sort: Optional[Sequence[SortKey]] = None,
    ) -> List[Dict[str, Any]]:
        matched = [
            copy.deepcopy(doc)
            for doc in self.collections.get(collection, [])
            if predicate.matches(doc)
        ]
        if not sort:
            return matched

        keys = [key for key in sort if key.field != MATCH_SCORE_KEY]
        rows = sort_scored([ScoredCandidate(candidate=doc) for doc in matched], keys)
        return [row.candidate for row in rows]

    async def count(self, collection: str, predicate: StructuralPredicate) -> int:
        return sum(1 for doc in self.collections.get(collection, []) if predicate.matches(doc))

    async def lookup(self, ids: Iterable[Any]) -> Dict[Any, Dict[str, Any]]:
        wanted = set(ids)
        return {
            user["id"]: copy.deepcopy(user)
            for user in self.collections.get(USERS_COLLECTION, [])
            if user.get("id") in wanted
        }
