"""
enski - English dictionary lookup service.

Looks up dictionary entries by prefix through an SQLite full-text index and
re-ranks the candidates with fuzzy headword matching, so close and
mistyped headwords surface first.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.entry import Entry
from .models.response import SearchResponse

__all__ = [
    "SearchEngine",
    "Entry",
    "SearchResponse",
]
