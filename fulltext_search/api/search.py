"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..core.index import MatchMode
from ..models.response import SearchResponse
from ..models.request import SearchRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search documents",
    description="Rank indexed documents against a free-text query using TF-IDF"
)
async def search_documents(
    q: str = Query(..., description="Free-text query"),
    max_results: Optional[int] = Query(
        None,
        ge=0,
        le=100,
        description="Maximum number of results to return"
    ),
    mode: Optional[MatchMode] = Query(
        None,
        description="Candidate selection: 'any' term (union) or 'all' terms (intersection)"
    )
) -> SearchResponse:
    """
    Search indexed documents.

    Queries that normalize to no terms, or match no document, still return
    200 with an empty result list; the ``outcome`` field tells them apart.
    """
    _check_query_length(q)

    try:
        return search_engine.search(
            query=q,
            max_results=settings.max_results if max_results is None else max_results,
            match_mode=mode
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search documents using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search indexed documents using a JSON request body."""
    _check_query_length(request.query)

    try:
        return search_engine.search(
            query=request.query,
            max_results=settings.max_results if request.max_results is None else request.max_results,
            match_mode=request.match_mode
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )
