"""Health check and monitoring API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine

# Track application start time
app_start_time = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    The tokenizer is exercised directly and the index through a read-only
    term lookup, so the check never touches query statistics.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "tokenizer": "healthy",
            "index": "healthy"
        }

        try:
            if search_engine.normalizer.tokenize("Health, check!") != ["health", "check"]:
                dependencies["tokenizer"] = "degraded"
        except Exception:
            dependencies["tokenizer"] = "unhealthy"

        try:
            search_engine.get_term_info("health")
        except Exception:
            dependencies["index"] = "unhealthy"

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

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Check if the service is ready to accept requests."""
    try:
        corpus_stats = search_engine.get_corpus_stats()

        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": _now(),
                "corpus_stats": corpus_stats
            }
        )

    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": _now()
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
            "timestamp": _now(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """Get configuration and statistics of the running service."""
    try:
        stats = search_engine.get_stats()

        config_info = {
            "max_results": settings.max_results,
            "max_query_length": settings.max_query_length,
            "match_mode": settings.match_mode.value,
            "documents_dir": settings.documents_dir,
            "debug": settings.debug
        }

        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time, timezone.utc).isoformat()
                },
                "configuration": config_info,
                "statistics": stats,
                "timestamp": _now()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )
