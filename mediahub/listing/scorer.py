"""
Match-count relevance scorer.

A document's score is the number of distinct query terms that occur
anywhere in its primary text field (title for videos, content for comments):

    score(doc) = |{ term in terms : term ⊆ lower(doc[text_field]) }|

Substring semantics are deliberate: "fox" matches "Foxes".
When the query has terms, documents matching none of them are dropped.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate document annotated with its match score"""
    candidate: Mapping[str, Any]
    match_score: int = 0

    @property
    def id(self) -> Any:
        return self.candidate.get("id")


class RelevanceScorer:
    """Counts distinct query terms found in a document's text field."""

    def __init__(self, text_field: str):
        self.text_field = text_field

    def score_one(self, candidate: Mapping[str, Any], terms: Sequence[str]) -> int:
        text = candidate.get(self.text_field)
        if not text:
            return 0
        text = str(text).lower()
        return sum(1 for term in dict.fromkeys(t.lower() for t in terms) if term in text)

    def score(
        self,
        candidates: Iterable[Mapping[str, Any]],
        terms: Sequence[str],
    ) -> List[ScoredCandidate]:
        """
        Score candidates against query terms.

        Args:
            candidates: Documents that already passed the structural predicate
            terms: Tokenized query (may be empty)

        Returns:
            ScoredCandidate list in input order. With no terms every candidate
            is kept with score 0; otherwise zero-score candidates are excluded.

        Example:
            >>> scorer = RelevanceScorer("title")
            >>> rows = scorer.score([{"title": "A Quick Fox Story"}, {"title": "Unrelated"}], ["quick", "fox"])
            >>> [r.match_score for r in rows]
            [2]
        """
        if not terms:
            return [ScoredCandidate(candidate=c, match_score=0) for c in candidates]

        scored = []
        for candidate in candidates:
            match_score = self.score_one(candidate, terms)
            if match_score > 0:
                scored.append(ScoredCandidate(candidate=candidate, match_score=match_score))
        return scored
