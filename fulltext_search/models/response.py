"""Response models for the engine and API endpoints."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchOutcome(str, Enum):
    """Why a search returned what it returned."""

    MATCHED = "matched"
    NO_VALID_TERMS = "no_valid_terms"
    NO_MATCHES = "no_matches"


class SearchResult(BaseModel):
    """Individual ranked document."""

    document_id: int = Field(..., ge=0, description="Sequential document identifier")
    filename: str = Field(..., description="Original filename of the document")
    score: float = Field(..., ge=0.0, description="Summed TF-IDF score")
    snippet: str = Field(..., description="Excerpt of the normalized content")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    query_terms: List[str] = Field(..., description="Tokens the query normalized to")
    outcome: SearchOutcome = Field(..., description="Search outcome")
    match_mode: str = Field(..., description="Candidate selection mode (any/all)")
    total_candidates: int = Field(..., description="Documents matching at least the selection mode")
    total_results: int = Field(..., description="Number of results returned")
    results: List[SearchResult] = Field(..., description="Ranked results")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class DocumentResponse(BaseModel):
    """Summary of an ingested document."""

    document_id: int = Field(..., ge=0, description="Sequential document identifier")
    filename: str = Field(..., description="Original filename")
    total_words: int = Field(..., description="Counted tokens in the document")
    unique_words: int = Field(..., description="Distinct tokens in the document")
    content: Optional[str] = Field(None, description="Normalized content")


class IngestResponse(BaseModel):
    """Response for document ingestion."""

    added: List[DocumentResponse] = Field(..., description="Documents that were indexed")
    skipped: List[str] = Field(..., description="Filenames skipped because their text was empty")
    total_documents: int = Field(..., description="Corpus size after ingestion")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class TermInfoResponse(BaseModel):
    """Index lookup for a single term."""

    term: str = Field(..., description="Term as requested")
    token: Optional[str] = Field(None, description="Normalized token, None if the term normalizes to nothing")
    document_frequency: int = Field(..., description="Number of documents containing the token")
    inverse_document_frequency: float = Field(..., description="IDF of the token")
    document_ids: List[int] = Field(..., description="Posting list, ascending")


class CorpusStatsResponse(BaseModel):
    """Corpus statistics."""

    total_documents: int = Field(..., description="Number of indexed documents")
    vocabulary_size: int = Field(..., description="Number of distinct tokens")
    total_words: int = Field(..., description="Counted tokens across all documents")
    average_words_per_document: float = Field(..., description="Mean counted tokens per document")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    matched_queries: int = Field(..., description="Queries that produced candidates")
    no_match_queries: int = Field(..., description="Queries without candidates")
    invalid_queries: int = Field(..., description="Queries without valid terms")
    average_response_time_ms: float = Field(..., description="Average search time")
    total_documents: int = Field(..., description="Indexed documents")
    vocabulary_size: int = Field(..., description="Distinct indexed tokens")
    memory_usage_mb: float = Field(..., description="Resident memory of the process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
