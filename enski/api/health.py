"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..core.errors import DataUnavailable
from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the dictionary service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the dictionary service.

    The service stays up when the dictionary failed to load; it is then
    reported as unhealthy.
    """
    uptime = time.time() - app_start_time

    dependencies = {
        "dictionary": "healthy",
        "search_engine": "healthy"
    }

    if not search_engine.ready:
        dependencies["dictionary"] = "unhealthy"
        dependencies["search_engine"] = "unhealthy"
    else:
        try:
            search_engine.lookup("a")
        except DataUnavailable:
            dependencies["search_engine"] = "degraded"

    # Determine overall status
    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    elif any(status == "unhealthy" for status in dependencies.values()):
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=uptime,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the dictionary is loaded and searches can run"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept searches.

    Clients show a loading state while this returns 503.
    """
    if not search_engine.ready:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": search_engine.load_error,
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat()
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
