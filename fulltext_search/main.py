"""Main FastAPI application for the full-text search service."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    documents_router,
    index_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .engine_instance import search_engine
from .loader import load_directory
from .logging_config import configure_logging
from .models.response import ErrorResponse
from .samples import SAMPLE_DOCUMENTS

settings = get_settings()

# Configure structured logging
configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting full-text search service", version=settings.app_version)

    if settings.documents_dir:
        documents = load_directory(
            search_engine, settings.documents_dir, settings.documents_pattern
        )
        logger.info("Documents loaded", directory=settings.documents_dir, total_documents=len(documents))
    elif settings.load_sample_documents:
        added = search_engine.load_documents(SAMPLE_DOCUMENTS)
        logger.info("Sample documents loaded", total_documents=added)

    yield

    # Shutdown
    logger.info("Shutting down full-text search service")
    search_engine.clear()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="In-memory TF-IDF full-text search over plain-text documents",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(documents_router)
app.include_router(index_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "In-memory TF-IDF full-text search over plain-text documents",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search?q=terms",
            "documents": "/api/v1/documents",
            "document": "/api/v1/documents/{document_id}",
            "term": "/api/v1/terms/{term}",
            "vocabulary": "/api/v1/vocabulary",
            "stats": "/api/v1/stats",
            "health": "/api/v1/health",
            "metrics": "/api/v1/metrics"
        },
        "features": [
            "Case-insensitive tokenization with punctuation splitting",
            "Append-only inverted index",
            "Log-scaled TF-IDF ranking",
            "Union (any) and intersection (all) candidate selection",
            "Content snippets around the first matching term"
        ],
        "limits": {
            "max_query_length": settings.max_query_length,
            "max_results": settings.max_results
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fulltext_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1,  # the index lives in process memory
        log_level=settings.log_level.lower()
    )
