"""Index inspection API endpoints."""

from fastapi import APIRouter, HTTPException, Path

from ..models.response import CorpusStatsResponse, TermInfoResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["index"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/terms/{term}",
    response_model=TermInfoResponse,
    summary="Look up a term",
    description="Get the posting list, document frequency and IDF of a term"
)
async def term_lookup(
    term: str = Path(..., description="Term to look up; normalized like a query")
) -> TermInfoResponse:
    """
    Look up a single term in the inverted index.

    Unknown terms are not an error: they report a document frequency of 0
    and an empty posting list.
    """
    try:
        return search_engine.get_term_info(term)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Term lookup failed: {str(e)}"
        )


@router.get(
    "/vocabulary",
    response_model=list[str],
    summary="Get all indexed tokens",
    description="Get a sorted list of every token currently indexed"
)
async def get_vocabulary() -> list[str]:
    """
    Get all tokens currently indexed.

    Useful for debugging and for client-side autocomplete.
    """
    return sorted(search_engine.corpus.index.get_vocabulary())


@router.get(
    "/stats",
    response_model=CorpusStatsResponse,
    summary="Corpus statistics",
    description="Get document count, vocabulary size and word counts"
)
async def corpus_stats() -> CorpusStatsResponse:
    """Get corpus statistics."""
    return CorpusStatsResponse(**search_engine.get_corpus_stats())
