"""
Full Text Search - in-memory TF-IDF retrieval over plain-text documents.

This package tokenizes documents into a canonical token stream, builds an
append-only inverted index with per-document statistics, and answers free-text
queries ranked by log-scaled TF-IDF with short content snippets.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.index import MatchMode
from .models.response import SearchOutcome, SearchResult, SearchResponse

__all__ = [
    "SearchEngine",
    "MatchMode",
    "SearchOutcome",
    "SearchResult",
    "SearchResponse",
]
