"""Core search engine functionality."""

from .engine import SearchEngine
from .corpus import Corpus
from .document import Document
from .index import InvertedIndex, MatchMode, DocumentIdError
from .ranker import Ranker
from .tokenizer import TextNormalizer, tokenize

__all__ = [
    "SearchEngine",
    "Corpus",
    "Document",
    "InvertedIndex",
    "MatchMode",
    "DocumentIdError",
    "Ranker",
    "TextNormalizer",
    "tokenize",
]
