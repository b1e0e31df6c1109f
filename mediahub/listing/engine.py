"""
Listing engine: turns a ListingRequest into a Page.

Pipeline (one request, no shared mutable state):
1. Validate request (page/limit, comment parent id, sort key allow-list)
2. Build structural predicate, tokenize free text, resolve sort chain
3. Fetch candidates from the document store (predicate + sort pushed down)
4. Score against query terms (drop non-matching rows when terms exist)
5. Sort in memory (authoritative order, id tie-break)
6. Paginate the full scored set
7. Join author summaries for the returned page only

The whole filtered set is materialized before slicing: relevance scoring
needs every candidate, so this is the scalability ceiling of the design.
"""

import logging
from typing import Optional

from ..stores.base import DocumentStore, UserLookup
from ..utils import is_valid_object_id
from .authors import AuthorJoiner
from .errors import InvalidArgument, UpstreamFailure
from .filters import build_predicate
from .paginator import Page, paginate
from .scorer import RelevanceScorer
from .sorting import resolve_sort, sort_scored
from .tokenizer import Tokenizer
from .types import EntityScope, ListingRequest, SortDirection

logger = logging.getLogger(__name__)


class ListingEngine:
    """
    Filtered, relevance-ranked, paginated listings for videos and comments.

    Stateless across requests: one instance can serve concurrent requests.
    """

    def __init__(
        self,
        store: DocumentStore,
        user_lookup: UserLookup,
        tokenizer: Optional[Tokenizer] = None,
    ):
        self.store = store
        self.tokenizer = tokenizer or Tokenizer()
        self.author_joiner = AuthorJoiner(user_lookup)

    def validate(self, request: ListingRequest):
        """
        Reject caller-fixable requests before touching the store.

        Raises:
            InvalidArgument: non-positive page/limit, bad comment parent id,
                or a sort key the scope does not allow
        """
        if not isinstance(request.page, int) or request.page < 1:
            raise InvalidArgument(f"page must be a positive integer, got {request.page!r}")
        if not isinstance(request.limit, int) or request.limit < 1:
            raise InvalidArgument(f"limit must be a positive integer, got {request.limit!r}")

        spec = request.scope.spec
        if spec.parent_field and not is_valid_object_id(request.parent_filter):
            raise InvalidArgument(f"Invalid {spec.parent_field} id: {request.parent_filter!r}")

        # Raises InvalidArgument for unknown sort keys
        resolve_sort(request, has_free_text=False)

    async def list(self, request: ListingRequest) -> Page:
        """
        Produce one page of results.

        Returns:
            Page whose items are projected documents with an "owner"
            AuthorSummary. An empty result is a valid Page, not an error.

        Raises:
            InvalidArgument: see validate()
            UpstreamFailure: store or user lookup failed (operation named)
        """
        self.validate(request)

        spec = request.scope.spec
        predicate = build_predicate(request)
        terms = self.tokenizer.tokenize(request.free_text)
        sort_keys = resolve_sort(request, has_free_text=bool(terms))

        logger.info(
            f"Listing {spec.collection}: filter={predicate.to_dict()}, terms={terms}, "
            f"sort={[(k.field, k.as_store_value()) for k in sort_keys]}, "
            f"page={request.page}, limit={request.limit}"
        )

        try:
            candidates = await self.store.find(spec.collection, predicate, sort_keys)
        except Exception as e:
            logger.error(f"Listing {spec.collection}: fetch_candidates failed: {e}")
            raise UpstreamFailure("fetch_candidates") from e

        scored = RelevanceScorer(spec.text_field).score(candidates, terms)
        ordered = sort_scored(scored, sort_keys)
        logger.debug(f"Listing {spec.collection}: {len(candidates)} candidates, {len(scored)} after scoring")

        page = paginate(ordered, request.page, request.limit)

        try:
            items = await self.author_joiner.attach(
                [row.candidate for row in page.items],
                spec,
                requester_id=request.requester_id,
            )
        except Exception as e:
            logger.error(f"Listing {spec.collection}: lookup_authors failed: {e}")
            raise UpstreamFailure("lookup_authors") from e

        return page.with_items(items)

    async def list_videos(
        self,
        page: int = 1,
        limit: int = 10,
        query: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_type=1,
        user_id: Optional[str] = None,
        requester_id: Optional[str] = None,
    ) -> Page:
        """List published videos, optionally filtered by owner and free text."""
        return await self.list(ListingRequest(
            scope=EntityScope.VIDEO,
            free_text=query,
            sort_key=sort_by,
            sort_direction=SortDirection.parse(sort_type),
            owner_filter=user_id,
            page=page,
            limit=limit,
            requester_id=requester_id,
        ))

    async def list_comments(
        self,
        video_id: str,
        page: int = 1,
        limit: int = 10,
        query: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_type=1,
        requester_id: Optional[str] = None,
    ) -> Page:
        """List the comments of one video."""
        return await self.list(ListingRequest(
            scope=EntityScope.COMMENT,
            free_text=query,
            sort_key=sort_by,
            sort_direction=SortDirection.parse(sort_type),
            parent_filter=video_id,
            page=page,
            limit=limit,
            requester_id=requester_id,
        ))
