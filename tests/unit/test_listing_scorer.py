"""
Unit tests for the match-count relevance scorer.
"""

import pytest
from mediahub.listing.scorer import RelevanceScorer, ScoredCandidate


class TestRelevanceScorer:
    """Test match-count scoring and zero-score exclusion"""

    def test_spec_scenario(self):
        """Test 'quick' and 'fox' both match the first title; the second is excluded"""
        scorer = RelevanceScorer("title")
        docs = [{"id": "1", "title": "A Quick Fox Story"}, {"id": "2", "title": "Unrelated"}]

        scored = scorer.score(docs, ["quick", "fox"])

        assert len(scored) == 1
        assert scored[0].id == "1"
        assert scored[0].match_score == 2

    def test_no_terms_keeps_everything(self):
        """Test empty term list scores everything 0 and excludes nothing"""
        scorer = RelevanceScorer("title")
        docs = [{"id": str(i), "title": f"t{i}"} for i in range(5)]

        scored = scorer.score(docs, [])

        assert [s.id for s in scored] == ["0", "1", "2", "3", "4"]
        assert all(s.match_score == 0 for s in scored)

    def test_substring_match(self):
        """Test terms match inside longer words"""
        scorer = RelevanceScorer("title")
        assert scorer.score_one({"title": "Foxes and hounds"}, ["fox"]) == 1

    def test_case_insensitive(self):
        """Test document text case does not matter"""
        scorer = RelevanceScorer("title")
        assert scorer.score_one({"title": "QUICK BROWN"}, ["quick", "Brown"]) == 2

    def test_distinct_terms_counted_once(self):
        """Test duplicate terms in the query count once"""
        scorer = RelevanceScorer("title")
        assert scorer.score_one({"title": "fox fox fox"}, ["fox", "fox"]) == 1

    def test_missing_text_field(self):
        """Test documents without text never match"""
        scorer = RelevanceScorer("title")
        assert scorer.score([{"id": "1"}, {"id": "2", "title": None}], ["fox"]) == []

    def test_comment_text_field(self):
        """Test the scorer reads the configured field (content for comments)"""
        scorer = RelevanceScorer("content")
        scored = scorer.score([{"id": "c", "title": "fox", "content": "great video"}], ["great"])
        assert scored[0].match_score == 1
        assert scorer.score([{"id": "c", "title": "fox", "content": "nope"}], ["fox"]) == []

    def test_input_order_preserved(self):
        """Test scoring does not reorder (sorting is a separate stage)"""
        scorer = RelevanceScorer("title")
        docs = [{"id": "a", "title": "fox"}, {"id": "b", "title": "quick fox"}]
        assert [s.id for s in scorer.score(docs, ["quick", "fox"])] == ["a", "b"]

    def test_candidates_not_mutated(self):
        """Test the scorer never writes to candidate documents"""
        doc = {"id": "1", "title": "quick fox"}
        RelevanceScorer("title").score([doc], ["fox"])
        assert doc == {"id": "1", "title": "quick fox"}

    def test_scored_candidate_defaults(self):
        assert ScoredCandidate(candidate={"id": "x"}).match_score == 0
