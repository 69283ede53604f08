"""Corpus aggregate owning documents and their inverted index."""

from typing import Any, Dict, Iterator, List, Optional

from .document import Document
from .index import InvertedIndex
from .tokenizer import TextNormalizer


class Corpus:
    """Documents plus the index built over them.

    Document ids are assigned sequentially from 0 and are always a dense
    prefix of the non-negative integers matching ``len(corpus)``.
    """

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()
        self.index = InvertedIndex()
        self._documents: List[Document] = []

    def add(self, filename: str, text: str) -> Document:
        """
        Create a document from raw text and index it.

        Args:
            filename: Original filename
            text: Raw document text

        Returns:
            The stored Document
        """
        doc = Document(len(self._documents), filename, text, self.normalizer)
        self.index.add_document(doc)
        self._documents.append(doc)
        return doc

    def get(self, doc_id: int) -> Optional[Document]:
        """Get a document by id, or None if it does not exist."""
        if 0 <= doc_id < len(self._documents):
            return self._documents[doc_id]
        return None

    def __getitem__(self, doc_id: int) -> Document:
        if doc_id < 0:
            raise IndexError(doc_id)
        return self._documents[doc_id]

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    @property
    def total_words(self) -> int:
        return sum(doc.total_words for doc in self._documents)

    def clear(self) -> None:
        """Remove all documents and reset id assignment."""
        self._documents.clear()
        self.index.clear()

    def get_stats(self) -> Dict[str, Any]:
        """Corpus-wide statistics."""
        total_documents = len(self._documents)
        total_words = self.total_words
        return {
            "total_documents": total_documents,
            "vocabulary_size": self.index.vocabulary_size,
            "total_words": total_words,
            "average_words_per_document": (
                total_words / total_documents if total_documents else 0.0
            ),
        }
