"""Fuzzy headword matching used to re-rank index candidates."""

from typing import List, NamedTuple, Optional, Sequence

from rapidfuzz import fuzz

from ..models.entry import Entry
from .normalizer import TextNormalizer


class FuzzyMatch(NamedTuple):
    """A candidate entry accepted by the fuzzy pass."""

    entry: Entry
    score: float


class FuzzyMatcher:
    """Scores headwords against a query and re-ranks index candidates."""

    def __init__(self, threshold: float = 0.4) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            threshold: Minimum score (0-1) for a candidate to count as a match
        """
        self.threshold = threshold
        self.normalizer = TextNormalizer()

    def score(self, query: str, word: str) -> float:
        """
        Score how closely a headword resembles the query.

        The score is the mean of the whole-string ratio and the best
        partial alignment, so ``"app"`` scores higher against ``"apple"``
        than against ``"application"`` while both still match.

        Args:
            query: Raw user query
            word: Candidate headword

        Returns:
            Similarity between 0 and 1 (1.0 for an exact headword)
        """
        normalized_query = self.normalizer.normalize(query)
        normalized_word = self.normalizer.normalize(word)

        if not normalized_query or not normalized_word:
            return 0.0
        if normalized_query == normalized_word:
            return 1.0

        ratio = fuzz.ratio(normalized_query, normalized_word)
        partial_ratio = fuzz.partial_ratio(normalized_query, normalized_word)

        return (ratio + partial_ratio) / 200.0

    def find_all_matches(
        self,
        query: str,
        candidates: Sequence[Entry],
        threshold: Optional[float] = None
    ) -> List[FuzzyMatch]:
        """
        Score every candidate and return the accepted ones, best first.

        Candidates with equal scores keep their original relative order.

        Args:
            query: Raw user query
            candidates: Entries to score, in index order
            threshold: Custom threshold (uses instance threshold if None)

        Returns:
            List of FuzzyMatch sorted by descending score
        """
        if not query or not candidates:
            return []

        if threshold is None:
            threshold = self.threshold

        matches = []
        for entry in candidates:
            score = self.score(query, entry.word)
            if score >= threshold:
                matches.append(FuzzyMatch(entry, score))

        # sorted() is stable, ties stay in candidate order
        return sorted(matches, key=lambda match: match.score, reverse=True)

    def rerank(
        self,
        query: str,
        candidates: Sequence[Entry],
        threshold: Optional[float] = None
    ) -> List[Entry]:
        """
        Fuzzy-matched candidates first, then the rest in index order.

        Args:
            query: Raw user query (not the prefix expression)
            candidates: Index candidates in relevance order
            threshold: Custom threshold (uses instance threshold if None)

        Returns:
            Every candidate exactly once, re-ordered
        """
        matches = self.find_all_matches(query, candidates, threshold)

        ranked = []
        seen = set()
        for match in matches:
            if match.entry.id not in seen:
                seen.add(match.entry.id)
                ranked.append(match.entry)

        for entry in candidates:
            if entry.id not in seen:
                seen.add(entry.id)
                ranked.append(entry)

        return ranked
