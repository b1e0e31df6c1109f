"""
Tokenizer for free-text listing queries.

Tokenization pipeline:
1. Split on whitespace
2. Drop empty tokens
3. Lowercase conversion
4. Filter stopwords (articles, conjunctions, common prepositions)
5. De-duplicate (first occurrence wins)

No stemming: matching is a plain case-insensitive substring test against the
document text, so terms are kept as typed.
"""

from typing import FrozenSet, Iterable, List, Optional

# English stopwords (the list the upload/search frontend has always used)
DEFAULT_STOPWORDS: FrozenSet[str] = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'from', 'has', 'he', 'if', 'in', 'into', 'is', 'it', 'its',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'were', 'will', 'with', 'would'
])


class Tokenizer:
    """
    Splits a free-text query into significant terms.

    The stopword list is fixed at construction time so tests (or a
    different locale) can inject their own.
    """

    def __init__(self, stopwords: Iterable[str] = DEFAULT_STOPWORDS):
        self.stopwords: FrozenSet[str] = frozenset(w.lower() for w in stopwords)

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize a free-text query.

        Args:
            text: Raw query string (may be None or blank)

        Returns:
            Lowercase terms without stopwords, in first-seen order

        Examples:
            >>> Tokenizer().tokenize("the quick fox")
            ['quick', 'fox']

            >>> Tokenizer().tokenize("   ")
            []
        """
        if not text:
            return []

        terms: List[str] = []
        for token in text.split():
            term = token.lower()
            if term in self.stopwords or term in terms:
                continue
            terms.append(term)

        return terms


_default_tokenizer = Tokenizer()


def tokenize(text: Optional[str]) -> List[str]:
    """Tokenize with the default stopword list."""
    return _default_tokenizer.tokenize(text)
