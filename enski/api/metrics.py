"""Metrics API endpoints."""

import os

import psutil
from fastapi import APIRouter

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Query counters and process memory usage"
)
async def get_metrics() -> MetricsResponse:
    """Get search statistics and memory usage of the service process."""
    stats = search_engine.get_stats()

    memory_info = psutil.Process(os.getpid()).memory_info()
    memory_usage_mb = memory_info.rss / (1024 * 1024)  # Convert to MB

    return MetricsResponse(
        total_queries=stats["total_queries"],
        empty_queries=stats["empty_queries"],
        average_response_time_ms=stats["average_execution_time_ms"],
        no_match_rate=stats["no_match_rate"],
        memory_usage_mb=memory_usage_mb
    )
