"""
Author join: attaches a minimal owner projection to each result row.

Only the owners of the rows on the current page are looked up, in one
batched call. Rows whose owner no longer exists keep their place with a
"Deleted user" placeholder instead of being dropped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..stores.base import UserLookup
from .types import ScopeSpec

logger = logging.getLogger(__name__)

DELETED_USER_NAME = "Deleted user"


@dataclass(frozen=True)
class AuthorSummary:
    id: Any
    display_name: Optional[str]
    username: Optional[str]
    avatar_url: Optional[str]

    @classmethod
    def from_user(cls, user: Mapping[str, Any]) -> "AuthorSummary":
        return cls(
            id=user.get("id"),
            display_name=user.get("fullName"),
            username=user.get("username"),
            avatar_url=user.get("avatar"),
        )

    @classmethod
    def placeholder(cls, owner_id: Any) -> "AuthorSummary":
        return cls(id=owner_id, display_name=DELETED_USER_NAME, username=None, avatar_url=None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "username": self.username,
            "avatarUrl": self.avatar_url,
        }


class AuthorJoiner:
    """Denormalizes owner data onto a page of candidate documents."""

    def __init__(self, user_lookup: UserLookup):
        self.user_lookup = user_lookup

    async def attach(
        self,
        candidates: Sequence[Mapping[str, Any]],
        scope: ScopeSpec,
        requester_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Project each candidate and attach its AuthorSummary.

        Args:
            candidates: Documents on the page being returned
            scope: Scope spec (owner field + projection)
            requester_id: Authenticated user, used for the isOwner flag

        Returns:
            New row dicts: projected fields + "owner" summary + "isOwner"
        """
        if not candidates:
            return []

        owner_ids = {c.get(scope.owner_field) for c in candidates}
        owner_ids.discard(None)

        users = await self.user_lookup.lookup(owner_ids) if owner_ids else {}

        missing = owner_ids - set(users)
        if missing:
            logger.warning(f"Author lookup: {len(missing)} owner(s) not found, using placeholders")

        rows = []
        for candidate in candidates:
            owner_id = candidate.get(scope.owner_field)
            user = users.get(owner_id)
            summary = AuthorSummary.from_user(user) if user else AuthorSummary.placeholder(owner_id)

            row = {name: candidate.get(name) for name in scope.projection if name in candidate}
            row["owner"] = summary.to_dict()
            row["isOwner"] = requester_id is not None and owner_id == requester_id
            rows.append(row)

        return rows
