"""
Listing & relevance search engine for videos and comments.

Components:
- tokenizer: Free-text query → significant terms (stopwords removed)
- filters: Structural predicate (publication state, owner, parent video)
- scorer: Match-count relevance score per document
- sorting: Relevance / caller / default sort chain with id tie-break
- authors: Batched owner lookup and denormalization
- paginator: Page slicing and pagination metadata
- engine: The pipeline tying the stages together

Key simplification: no index, no IDF
- Relevance is the number of distinct query terms found in the text field
- Every filtered candidate is scored in memory before pagination
"""

from .errors import ErrorKind, ListingError, InvalidArgument, UpstreamFailure
from .types import EntityScope, SortDirection, ListingRequest
from .tokenizer import Tokenizer, tokenize, DEFAULT_STOPWORDS
from .filters import StructuralPredicate, build_predicate
from .scorer import RelevanceScorer, ScoredCandidate
from .sorting import SortKey, resolve_sort, sort_scored
from .authors import AuthorSummary, AuthorJoiner
from .paginator import Page, paginate
from .engine import ListingEngine

__all__ = [
    "ErrorKind",
    "ListingError",
    "InvalidArgument",
    "UpstreamFailure",
    "EntityScope",
    "SortDirection",
    "ListingRequest",
    "Tokenizer",
    "tokenize",
    "DEFAULT_STOPWORDS",
    "StructuralPredicate",
    "build_predicate",
    "RelevanceScorer",
    "ScoredCandidate",
    "SortKey",
    "resolve_sort",
    "sort_scored",
    "AuthorSummary",
    "AuthorJoiner",
    "Page",
    "paginate",
    "ListingEngine",
]
