"""Inverted index mapping tokens to the documents that contain them."""

import time
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Set

from .document import Document


class MatchMode(str, Enum):
    """How posting lists of several query tokens are combined."""

    ANY = "any"  # union, a document needs at least one token
    ALL = "all"  # intersection, a document needs every token


class DocumentIdError(ValueError):
    """Raised when a document does not carry the next sequential id."""


class InvertedIndex:
    """Append-only inverted index with per-token document frequencies.

    Only document ids are stored; the documents themselves are owned by the
    corpus. ``document_frequency(token)`` always equals the size of the
    token's posting list.
    """

    def __init__(self) -> None:
        """Initialize the inverted index."""
        self._postings: Dict[str, Set[int]] = {}
        self._document_frequency: Dict[str, int] = {}
        self._document_count = 0
        self._stats = {
            "total_postings": 0,
            "last_updated": None
        }

    @property
    def document_count(self) -> int:
        """Number of documents folded into the index."""
        return self._document_count

    @property
    def vocabulary_size(self) -> int:
        return len(self._postings)

    def add_document(self, doc: Document) -> None:
        """
        Fold a document's unique tokens into the index.

        The document's tokens are collected before any posting list is
        touched, so a failure while reading them leaves the index untouched.
        Each commit costs time proportional to the document's unique tokens.

        Args:
            doc: Document to index; its id must be the next sequential id

        Raises:
            DocumentIdError: If the id is not equal to document_count
        """
        if doc.id != self._document_count:
            raise DocumentIdError(
                f"Expected document id {self._document_count}, got {doc.id}"
            )

        # Stage: only the token list, since reading it is the step that can fail
        words = list(doc.get_unique_words())

        # Commit
        for word in words:
            postings = self._postings.setdefault(word, set())
            postings.add(doc.id)
            self._document_frequency[word] = len(postings)
        self._document_count += 1

        self._stats["total_postings"] += len(words)
        self._stats["last_updated"] = time.time()

    def find_candidates(
        self,
        query_tokens: Iterable[str],
        mode: MatchMode = MatchMode.ANY
    ) -> Set[int]:
        """
        Find documents eligible for scoring.

        Args:
            query_tokens: Tokenized query
            mode: ANY for the union of posting lists, ALL for the intersection

        Returns:
            Set of document ids (empty for an empty query)
        """
        tokens = list(dict.fromkeys(query_tokens))
        if not tokens:
            return set()

        if MatchMode(mode) is MatchMode.ALL:
            candidates = None
            for token in tokens:
                postings = self._postings.get(token)
                if not postings:
                    return set()
                candidates = set(postings) if candidates is None else candidates & postings
            return candidates

        # Tokens absent from the index contribute nothing
        candidates = set()
        for token in tokens:
            candidates.update(self._postings.get(token, ()))
        return candidates

    def get_postings(self, token: str) -> FrozenSet[int]:
        """Document ids containing the token (empty when unknown)."""
        return frozenset(self._postings.get(token, ()))

    def document_frequency(self, token: str) -> int:
        """Number of documents containing the token, 0 when unknown."""
        return self._document_frequency.get(token, 0)

    def contains(self, token: str) -> bool:
        return token in self._postings

    def get_vocabulary(self) -> List[str]:
        """Get all indexed tokens."""
        return list(self._postings.keys())

    def clear(self) -> None:
        """Drop every posting list."""
        self._postings.clear()
        self._document_frequency.clear()
        self._document_count = 0
        self._stats = {
            "total_postings": 0,
            "last_updated": None
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        stats = self._stats.copy()
        stats["total_documents"] = self._document_count
        stats["vocabulary_size"] = len(self._postings)
        return stats
