"""Main search engine implementation."""

import threading
import time
from typing import Any, Dict, List, Mapping, Optional

import structlog

from ..models.response import (
    SearchOutcome,
    SearchResult,
    SearchResponse,
    TermInfoResponse,
)
from .corpus import Corpus
from .document import Document
from .index import MatchMode
from .ranker import Ranker
from .tokenizer import TextNormalizer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Full-text search over an in-memory, append-only corpus."""

    def __init__(
        self,
        max_results: int = 10,
        match_mode: MatchMode = MatchMode.ANY
    ) -> None:
        """
        Initialize the search engine.

        Args:
            max_results: Default maximum number of results per query
            match_mode: Default candidate selection mode
        """
        self.max_results = max_results
        self.match_mode = MatchMode(match_mode)
        self.normalizer = TextNormalizer()
        self.corpus = Corpus(self.normalizer)
        self.ranker = Ranker(self.corpus)

        # Single exclusive lock for ingestion and search
        self._lock = threading.RLock()

        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "matched_queries": 0,
            "no_match_queries": 0,
            "invalid_queries": 0,
            "total_execution_time": 0.0,
            "documents_added": 0,
            "documents_skipped": 0
        }

    def add_document(self, filename: str, text: str) -> Optional[Document]:
        """
        Ingest a document.

        Args:
            filename: Original filename
            text: Raw document text

        Returns:
            The indexed Document, or None if the text was empty and skipped
        """
        if not text or not text.strip():
            with self._lock:
                self._stats["documents_skipped"] += 1
            logger.warning("Empty document skipped", filename=filename)
            return None

        with self._lock:
            doc = self.corpus.add(filename, text)
            self._stats["documents_added"] += 1

        logger.info(
            "Document added",
            filename=filename,
            document_id=doc.id,
            total_words=doc.total_words,
            unique_words=doc.unique_word_count
        )
        return doc

    def load_documents(self, documents: Mapping[str, str]) -> int:
        """
        Ingest several documents in mapping order.

        Args:
            documents: Mapping of filename to raw text

        Returns:
            Number of documents actually indexed
        """
        added = 0
        for filename, text in documents.items():
            if self.add_document(filename, text) is not None:
                added += 1
        return added

    def search(
        self,
        query: str,
        max_results: Optional[int] = None,
        match_mode: Optional[MatchMode] = None
    ) -> SearchResponse:
        """
        Search the corpus for a free-text query.

        Args:
            query: Search query
            max_results: Maximum number of results (engine default if None)
            match_mode: Candidate selection mode (engine default if None)

        Returns:
            SearchResponse with ranked results and the search outcome
        """
        start_time = time.time()
        max_results = self.max_results if max_results is None else max_results
        mode = self.match_mode if match_mode is None else MatchMode(match_mode)

        query_terms = self.normalizer.tokenize(query or "")

        with self._lock:
            self._stats["total_queries"] += 1

            if not query_terms:
                self._stats["invalid_queries"] += 1
                return self._finish(
                    query, query_terms, SearchOutcome.NO_VALID_TERMS, mode, 0, [], start_time
                )

            candidates = self.corpus.index.find_candidates(query_terms, mode)
            if not candidates:
                self._stats["no_match_queries"] += 1
                return self._finish(
                    query, query_terms, SearchOutcome.NO_MATCHES, mode, 0, [], start_time
                )

            results = []
            for doc_id, score in self.ranker.rank(query_terms, candidates, max_results):
                doc = self.corpus[doc_id]
                results.append(SearchResult(
                    document_id=doc_id,
                    filename=doc.filename,
                    score=score,
                    snippet=self.ranker.generate_snippet(doc, query_terms)
                ))

            self._stats["matched_queries"] += 1
            return self._finish(
                query, query_terms, SearchOutcome.MATCHED, mode,
                len(candidates), results, start_time
            )

    def _finish(
        self,
        query: str,
        query_terms: List[str],
        outcome: SearchOutcome,
        mode: MatchMode,
        total_candidates: int,
        results: List[SearchResult],
        start_time: float
    ) -> SearchResponse:
        """Record timing, log the outcome and build the response."""
        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        logger.info(
            "Search completed",
            query=query,
            query_terms=query_terms,
            outcome=outcome.value,
            match_mode=mode.value,
            candidates=total_candidates,
            results=len(results),
            execution_time_ms=round(execution_time, 3)
        )

        return SearchResponse(
            query=query or "",
            query_terms=query_terms,
            outcome=outcome,
            match_mode=mode.value,
            total_candidates=total_candidates,
            total_results=len(results),
            results=results,
            execution_time_ms=execution_time
        )

    def get_document(self, doc_id: int) -> Optional[Document]:
        """Get an indexed document by id."""
        return self.corpus.get(doc_id)

    def get_term_info(self, term: str) -> TermInfoResponse:
        """
        Look up a term in the index.

        The term goes through the same normalization as queries; only the
        first resulting token is looked up.

        Args:
            term: Raw term

        Returns:
            TermInfoResponse (zero frequency for unknown terms)
        """
        tokens = self.normalizer.tokenize(term)
        if not tokens:
            return TermInfoResponse(
                term=term,
                token=None,
                document_frequency=0,
                inverse_document_frequency=0.0,
                document_ids=[]
            )

        token = tokens[0]
        with self._lock:
            index = self.corpus.index
            return TermInfoResponse(
                term=term,
                token=token,
                document_frequency=index.document_frequency(token),
                inverse_document_frequency=self.ranker.inverse_document_frequency(token),
                document_ids=sorted(index.get_postings(token))
            )

    def get_corpus_stats(self) -> Dict[str, Any]:
        """Get corpus statistics (documents, vocabulary, word counts)."""
        with self._lock:
            return self.corpus.get_stats()

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        with self._lock:
            stats = self._stats.copy()
            stats["corpus_stats"] = self.corpus.get_stats()
            stats["index_stats"] = self.corpus.index.get_stats()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["match_rate"] = stats["matched_queries"] / stats["total_queries"]
            stats["no_match_rate"] = stats["no_match_queries"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["match_rate"] = 0.0
            stats["no_match_rate"] = 0.0

        return stats

    def clear(self) -> None:
        """Clear all documents and reset statistics."""
        with self._lock:
            self.corpus.clear()
            self._stats = self._empty_stats()
        logger.info("Search engine cleared")
