"""Metrics and monitoring API endpoints."""

import os
from datetime import datetime, timezone

import psutil
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["metrics"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _process_memory_mb() -> float:
    return psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query counters, corpus size and process memory usage"
)
async def get_metrics() -> MetricsResponse:
    """Get performance metrics for the search engine."""
    try:
        stats = search_engine.get_stats()
        corpus_stats = stats["corpus_stats"]

        return MetricsResponse(
            total_queries=stats["total_queries"],
            matched_queries=stats["matched_queries"],
            no_match_queries=stats["no_match_queries"],
            invalid_queries=stats["invalid_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            total_documents=corpus_stats["total_documents"],
            vocabulary_size=corpus_stats["vocabulary_size"],
            memory_usage_mb=_process_memory_mb()
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.get(
    "/metrics/detailed",
    summary="Get detailed metrics",
    description="Get query, index and system metrics"
)
async def get_detailed_metrics() -> JSONResponse:
    """
    Get detailed metrics including index and system resource usage.
    """
    try:
        stats = search_engine.get_stats()
        corpus_stats = stats["corpus_stats"]
        index_stats = stats["index_stats"]
        memory_info = psutil.virtual_memory()

        return JSONResponse(
            status_code=200,
            content={
                "query_metrics": {
                    "total_queries": stats["total_queries"],
                    "matched_queries": stats["matched_queries"],
                    "no_match_queries": stats["no_match_queries"],
                    "invalid_queries": stats["invalid_queries"],
                    "match_rate": stats["match_rate"],
                    "no_match_rate": stats["no_match_rate"],
                    "average_response_time_ms": stats["average_execution_time_ms"],
                    "total_execution_time_ms": stats["total_execution_time"]
                },
                "index_metrics": {
                    "total_documents": corpus_stats["total_documents"],
                    "vocabulary_size": corpus_stats["vocabulary_size"],
                    "total_words": corpus_stats["total_words"],
                    "total_postings": index_stats["total_postings"],
                    "documents_added": stats["documents_added"],
                    "documents_skipped": stats["documents_skipped"]
                },
                "system_metrics": {
                    "process_memory_mb": _process_memory_mb(),
                    "memory_usage_percent": memory_info.percent,
                    "available_memory_mb": memory_info.available / (1024 * 1024)
                },
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get detailed metrics: {str(e)}"
        )
