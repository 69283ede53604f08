"""Data models for the full-text search engine."""

from .response import (
    SearchOutcome,
    SearchResult,
    SearchResponse,
    DocumentResponse,
    IngestResponse,
    TermInfoResponse,
    CorpusStatsResponse,
    ErrorResponse,
)
from .request import SearchRequest, DocumentRequest, BatchDocumentRequest

__all__ = [
    "SearchOutcome",
    "SearchResult",
    "SearchResponse",
    "DocumentResponse",
    "IngestResponse",
    "TermInfoResponse",
    "CorpusStatsResponse",
    "ErrorResponse",
    "SearchRequest",
    "DocumentRequest",
    "BatchDocumentRequest",
]
