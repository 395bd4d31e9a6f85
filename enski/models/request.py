"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field("", description="Search query, empty returns no results")
    fuzzy_threshold: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Custom fuzzy matching threshold"
    )
