"""Per-document statistics built once at ingestion time."""

from collections import Counter
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

from .tokenizer import TextNormalizer


class Document:
    """An ingested document with its token frequency table.

    The content kept here is the normalized text (case-folded, punctuation
    replaced by spaces), not the raw input. Instances are not modified after
    construction.
    """

    __slots__ = ("_id", "_filename", "_content", "_frequencies", "_total_words")

    def __init__(
        self,
        doc_id: int,
        filename: str,
        text: str,
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        """
        Build document statistics.

        Args:
            doc_id: Non-negative sequential identifier
            filename: Original filename
            text: Raw document text
            normalizer: Normalizer to use (a default one if None)

        Raises:
            ValueError: If doc_id is negative
        """
        if doc_id < 0:
            raise ValueError(f"Document id must be non-negative, got {doc_id}")

        normalizer = normalizer or TextNormalizer()

        self._id = doc_id
        self._filename = filename
        self._content = normalizer.normalize(text)

        tokens = normalizer.split(self._content)
        self._frequencies: Mapping[str, int] = MappingProxyType(dict(Counter(tokens)))
        self._total_words = len(tokens)

    @property
    def id(self) -> int:
        return self._id

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def content(self) -> str:
        return self._content

    @property
    def total_words(self) -> int:
        """Number of tokens that survived the length filter."""
        return self._total_words

    @property
    def word_frequencies(self) -> Mapping[str, int]:
        """Read-only token -> occurrence count mapping."""
        return self._frequencies

    @property
    def unique_word_count(self) -> int:
        return len(self._frequencies)

    def get_word_frequency(self, word: str) -> int:
        """Occurrence count of a token, 0 when absent."""
        return self._frequencies.get(word, 0)

    def get_unique_words(self) -> FrozenSet[str]:
        """Distinct tokens of this document. Callers must not rely on order."""
        return frozenset(self._frequencies)

    def __repr__(self) -> str:
        return (
            f"Document(id={self._id}, filename={self._filename!r}, "
            f"total_words={self._total_words})"
        )
