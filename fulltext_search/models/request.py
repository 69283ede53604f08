"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.index import MatchMode


class SearchRequest(BaseModel):
    """
    Request model for search queries.

    Blank queries are accepted and answered with the ``no_valid_terms``
    outcome; the length limit is enforced by the route from settings.
    """

    query: str = Field(..., description="Free-text query")
    max_results: Optional[int] = Field(
        None, ge=0, le=100, description="Maximum number of results to return"
    )
    match_mode: Optional[MatchMode] = Field(
        None, description="Candidate selection: 'any' (union) or 'all' (intersection)"
    )


class DocumentRequest(BaseModel):
    """Request model for adding a single document."""

    filename: str = Field(..., min_length=1, max_length=255, description="Document name")
    text: str = Field(..., description="Raw document text")

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Validate and normalize the filename."""
        if not v.strip():
            raise ValueError("Filename cannot be empty")
        return v.strip()


class BatchDocumentRequest(BaseModel):
    """Request model for adding several documents."""

    documents: List[DocumentRequest] = Field(
        ..., min_length=1, max_length=1000, description="Documents to add, in ingestion order"
    )
