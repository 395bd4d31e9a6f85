"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Path

from ..core.errors import DataUnavailable
from ..models.entry import Entry
from ..models.request import SearchRequest
from ..models.response import SearchResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _run_search(query: str, fuzzy_threshold: Optional[float] = None) -> SearchResponse:
    """Validate the query length and run the search pipeline."""
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return search_engine.search(query, fuzzy_threshold=fuzzy_threshold)
    except DataUnavailable as e:
        raise HTTPException(
            status_code=503,
            detail=f"Dictionary unavailable: {str(e)}"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search the dictionary",
    description="Prefix search with fuzzy re-ranking; an empty query returns no results"
)
async def search_query(
    q: str = Query("", description="The word or prefix to look up"),
    fuzzy_threshold: Optional[float] = Query(
        None,
        ge=0.0,
        le=1.0,
        description="Custom fuzzy matching threshold (0.0-1.0)"
    )
) -> SearchResponse:
    """
    Search for dictionary entries matching a query.

    Entries whose headword closely resembles the query come first,
    followed by the remaining prefix matches in index order.
    """
    return _run_search(q, fuzzy_threshold)


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search the dictionary by path",
    description="Same as /search with the query in the path"
)
async def search_word(
    query: str = Path(..., description="The word or prefix to look up", min_length=1),
    fuzzy_threshold: Optional[float] = Query(
        None,
        ge=0.0,
        le=1.0,
        description="Custom fuzzy matching threshold (0.0-1.0)"
    )
) -> SearchResponse:
    """Search for dictionary entries with the query in the URL path."""
    return _run_search(query, fuzzy_threshold)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search the dictionary using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search for dictionary entries using a JSON request body."""
    return _run_search(request.query, request.fuzzy_threshold)


@router.get(
    "/random",
    response_model=Entry,
    summary="Random entry",
    description="A random dictionary entry to show before the first query"
)
async def random_entry() -> Entry:
    """
    Get a random dictionary entry.

    Used to seed the search box with a placeholder word; never part of
    a search result.
    """
    try:
        entry = search_engine.random_entry()
    except DataUnavailable as e:
        raise HTTPException(
            status_code=503,
            detail=f"Dictionary unavailable: {str(e)}"
        )

    if entry is None:
        raise HTTPException(status_code=404, detail="Dictionary is empty")

    return entry
