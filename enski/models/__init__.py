"""Data models for the dictionary lookup service."""

from .entry import Entry
from .response import (
    SearchResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest

__all__ = [
    "Entry",
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
]
