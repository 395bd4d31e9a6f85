"""Core search engine functionality."""

from .engine import SearchEngine
from .errors import DataUnavailable, EngineNotReady
from .fuzzy_matcher import FuzzyMatch, FuzzyMatcher
from .index import DatasetProvider, DictionaryIndex, build_prefix_query, lookup_candidates
from .normalizer import TextNormalizer

__all__ = [
    "SearchEngine",
    "DataUnavailable",
    "EngineNotReady",
    "FuzzyMatch",
    "FuzzyMatcher",
    "DatasetProvider",
    "DictionaryIndex",
    "build_prefix_query",
    "lookup_candidates",
    "TextNormalizer",
]
