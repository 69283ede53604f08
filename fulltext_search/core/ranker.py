"""TF-IDF scoring, result ordering and snippet extraction."""

import math
from typing import Iterable, List, Sequence, Tuple

from .corpus import Corpus
from .document import Document

SNIPPET_LENGTH = 100
SNIPPET_CONTEXT = 50
ELLIPSIS = "..."


class Ranker:
    """Scores candidate documents of a corpus against a tokenized query."""

    def __init__(self, corpus: Corpus) -> None:
        """
        Initialize the ranker.

        Args:
            corpus: Corpus whose documents and index are read
        """
        self.corpus = corpus

    def term_frequency(self, word: str, doc: Document) -> float:
        """
        Log-scaled term frequency.

        Args:
            word: Token
            doc: Document

        Returns:
            1 + ln(count), or 0.0 if the token does not occur
        """
        if doc.total_words == 0:
            return 0.0

        count = doc.get_word_frequency(word)
        return 1.0 + math.log(count) if count > 0 else 0.0

    def inverse_document_frequency(self, word: str) -> float:
        """
        Inverse document frequency.

        Args:
            word: Token

        Returns:
            ln(N / df), or 0.0 if no document contains the token
        """
        docs_with_word = self.corpus.index.document_frequency(word)
        if docs_with_word == 0:
            return 0.0

        total_docs = self.corpus.index.document_count
        return math.log(total_docs / docs_with_word)

    def tf_idf(self, word: str, doc: Document) -> float:
        return self.term_frequency(word, doc) * self.inverse_document_frequency(word)

    def score_document(self, query_tokens: Sequence[str], doc: Document) -> float:
        """Sum of TF-IDF over the query tokens, repeated tokens included."""
        return sum(self.tf_idf(token, doc) for token in query_tokens)

    def rank(
        self,
        query_tokens: Sequence[str],
        candidates: Iterable[int],
        max_results: int = 10
    ) -> List[Tuple[int, float]]:
        """
        Score and order candidate documents.

        Args:
            query_tokens: Tokenized query
            candidates: Document ids to score
            max_results: Maximum number of results to return

        Returns:
            (document id, score) pairs by descending score, ties by ascending id
        """
        if max_results <= 0:
            return []

        scored = [
            (doc_id, self.score_document(query_tokens, self.corpus[doc_id]))
            for doc_id in candidates
        ]
        scored.sort(key=lambda item: (-item[1], item[0]))
        return scored[:max_results]

    def generate_snippet(self, doc: Document, query_tokens: Sequence[str]) -> str:
        """
        Extract a short excerpt around the earliest query token.

        Args:
            doc: Document to excerpt
            query_tokens: Tokenized query

        Returns:
            The whole content if short enough, otherwise a window of
            SNIPPET_LENGTH characters followed by an ellipsis
        """
        content = doc.content
        if len(content) <= SNIPPET_LENGTH:
            return content

        positions = [content.find(token) for token in query_tokens]
        positions = [pos for pos in positions if pos >= 0]

        # No substring hit: fall back to the leading characters
        start = max(min(positions) - SNIPPET_CONTEXT, 0) if positions else 0
        end = min(start + SNIPPET_LENGTH, len(content))

        return content[start:end] + ELLIPSIS
