"""Text normalization and tokenization shared by ingestion and querying."""

import re
from typing import List

# Tokens shorter than this are dropped entirely
MIN_TOKEN_LENGTH = 3


class TextNormalizer:
    """Turns raw text into a canonical, ordered token stream.

    Classification is ASCII only: ``[A-Za-z0-9]`` counts as alphanumeric and
    ``[ \\t\\n\\r\\f\\v]`` as whitespace. Every other character, including any
    non-ASCII character, is replaced by a single space. No Unicode folding is
    performed.
    """

    def __init__(self, min_token_length: int = MIN_TOKEN_LENGTH) -> None:
        """
        Initialize the normalizer.

        Args:
            min_token_length: Shortest fragment kept as a token
        """
        self.min_token_length = min_token_length

        # Compile regex patterns for performance
        self.separator_regex = re.compile(r'[^A-Za-z0-9\s]', re.ASCII)

    def normalize(self, text: str) -> str:
        """
        Case-fold text and replace punctuation with spaces.

        The result keeps the original length and word positions, so it can
        be stored as document content and searched for snippets.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if not text:
            return ""

        # "cat,dog" must become "cat dog", not "catdog"
        normalized = self.separator_regex.sub(' ', text)

        return normalized.lower()

    def split(self, normalized: str) -> List[str]:
        """
        Split already-normalized text into tokens.

        Args:
            normalized: Output of normalize()

        Returns:
            Tokens in input order, duplicates preserved
        """
        return [
            fragment for fragment in normalized.split()
            if len(fragment) >= self.min_token_length
        ]

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into normalized words.

        Args:
            text: Input text

        Returns:
            List of tokens
        """
        if not text:
            return []

        return self.split(self.normalize(text))


_default_normalizer = TextNormalizer()


def tokenize(text: str) -> List[str]:
    """Tokenize text with the default normalizer."""
    return _default_normalizer.tokenize(text)
