"""Dictionary search engine: prefix lookup followed by fuzzy re-ranking."""

import asyncio
import time
from pathlib import Path
from typing import Dict, List, Optional, Union

import structlog

from ..models.entry import Entry
from ..models.response import SearchResponse
from .errors import DataUnavailable, EngineNotReady
from .fuzzy_matcher import FuzzyMatcher
from .index import DEFAULT_CANDIDATE_LIMIT, DatasetProvider, DictionaryIndex, lookup_candidates
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Main search engine over a read-only dictionary dataset."""

    def __init__(
        self,
        fuzzy_threshold: float = 0.4,
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT
    ) -> None:
        """
        Initialize the search engine.

        Args:
            fuzzy_threshold: Minimum fuzzy score for the re-rank pass
            candidate_limit: Maximum number of index candidates per query
        """
        self.fuzzy_threshold = fuzzy_threshold
        self.candidate_limit = candidate_limit
        self.fuzzy_matcher = FuzzyMatcher(fuzzy_threshold)
        self.normalizer = TextNormalizer()
        self.provider: Optional[DatasetProvider] = None
        self.load_error: Optional[str] = None

        # Performance tracking
        self._stats = self._empty_stats()

    @property
    def ready(self) -> bool:
        """Whether a dataset is loaded and queries can run."""
        return self.provider is not None

    async def load(self, database_path: Union[str, Path]) -> bool:
        """
        Open the dictionary database without blocking the event loop.

        A failure is recorded in ``load_error`` and leaves the engine
        not ready; it is not retried.

        Args:
            database_path: Path to the SQLite dictionary

        Returns:
            True if the dataset is ready
        """
        try:
            index = await asyncio.to_thread(DictionaryIndex.open, database_path)
            total_entries = await asyncio.to_thread(_count_entries, index)
        except DataUnavailable as e:
            self.provider = None
            self.load_error = str(e)
            logger.error("Dictionary failed to load", path=str(database_path), error=str(e))
            return False

        self.attach(index)
        logger.info("Dictionary loaded", path=str(database_path), total_entries=total_entries)
        return True

    def attach(self, provider: DatasetProvider) -> None:
        """Use an already opened dataset provider."""
        self.provider = provider
        self.load_error = None

    def lookup(self, query: str) -> List[Entry]:
        """
        Index Query Engine: candidates for a query in index relevance order.

        Args:
            query: Raw user query

        Returns:
            At most ``candidate_limit`` entries
        """
        return lookup_candidates(self._require_provider(), query, self.candidate_limit)

    def search(self, query: str, fuzzy_threshold: Optional[float] = None) -> SearchResponse:
        """
        Search the dictionary for a query.

        Empty or whitespace-only queries return an empty result without
        touching the dataset.

        Args:
            query: Raw user query
            fuzzy_threshold: Custom fuzzy matching threshold

        Returns:
            SearchResponse with the ranked entries

        Raises:
            DataUnavailable: if no dataset is loaded or the lookup fails
        """
        start_time = time.time()

        if self.normalizer.is_blank(query):
            self._stats["empty_queries"] += 1
            return self._create_response(query or "", [], start_time)

        candidates = self.lookup(query)
        results = self.fuzzy_matcher.rerank(query, candidates, fuzzy_threshold)

        self._stats["total_queries"] += 1
        if not results:
            self._stats["no_matches"] += 1

        response = self._create_response(query, results, start_time)
        self._stats["total_execution_time"] += response.execution_time_ms
        return response

    def random_entry(self) -> Optional[Entry]:
        """
        Pick a placeholder entry to show before the first query.

        Returns:
            A uniformly random entry, or None for an empty dataset
        """
        return self._require_provider().random_entry()

    def get_stats(self) -> Dict[str, any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["ready"] = self.ready
        stats["load_error"] = self.load_error
        return stats

    def close(self) -> None:
        """Release the dataset and reset statistics."""
        if isinstance(self.provider, DictionaryIndex):
            self.provider.close()
        self.provider = None
        self._stats = self._empty_stats()

    def _require_provider(self) -> DatasetProvider:
        if self.provider is None:
            raise EngineNotReady(self.load_error or "dictionary is not loaded")
        return self.provider

    def _create_response(
        self,
        query: str,
        results: List[Entry],
        start_time: float
    ) -> SearchResponse:
        execution_time = (time.time() - start_time) * 1000

        return SearchResponse(
            query=query,
            execution_time_ms=execution_time,
            total_results=len(results),
            results=results
        )

    @staticmethod
    def _empty_stats() -> Dict[str, any]:
        return {
            "total_queries": 0,
            "empty_queries": 0,
            "no_matches": 0,
            "total_execution_time": 0.0
        }


def _count_entries(index: DictionaryIndex) -> int:
    """Count entries, closing the index if its pages cannot be read."""
    try:
        return index.count()
    except DataUnavailable:
        index.close()
        raise
