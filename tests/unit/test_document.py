"""Unit tests for per-document statistics."""

import pytest
from fulltext_search.core.document import Document
from fulltext_search.core.tokenizer import TextNormalizer


class TestDocument:
    """Test cases for the Document class."""

    @pytest.fixture
    def document(self):
        """Create a document for testing."""
        return Document(3, "notes.txt", "The cat sat. The CAT ran, a cat hid!")

    def test_initialization(self, document):
        """Test basic attributes."""
        assert document.id == 3
        assert document.filename == "notes.txt"
        assert document.total_words == 8
        assert document.unique_word_count == 5

    def test_content_is_normalized(self, document):
        """Test that stored content is case-folded with punctuation replaced."""
        assert document.content == "the cat sat  the cat ran  a cat hid "

    def test_word_frequency(self, document):
        """Test frequency lookups."""
        assert document.get_word_frequency("cat") == 3
        assert document.get_word_frequency("the") == 2
        assert document.get_word_frequency("sat") == 1

    def test_word_frequency_absent_is_zero(self, document):
        """Test that lookups are total over all strings."""
        assert document.get_word_frequency("dog") == 0
        assert document.get_word_frequency("a") == 0
        assert document.get_word_frequency("") == 0
        assert document.get_word_frequency("CAT") == 0

    def test_unique_words(self, document):
        """Test the distinct token set."""
        assert document.get_unique_words() == {"the", "cat", "sat", "ran", "hid"}

    def test_frequency_table_matches_tokenizer(self):
        """Test that counted tokens are exactly the tokenizer output."""
        text = "Alpha beta, ALPHA gamma; beta alpha x y"
        doc = Document(0, "a.txt", text)
        tokens = TextNormalizer().tokenize(text)

        assert doc.total_words == len(tokens)
        assert sum(doc.word_frequencies.values()) == len(tokens)
        for token in set(tokens):
            assert doc.get_word_frequency(token) == tokens.count(token)

    def test_short_words_only(self):
        """Test a document with no token surviving the length filter."""
        doc = Document(0, "short.txt", "a an to of")

        assert doc.total_words == 0
        assert doc.get_unique_words() == frozenset()
        assert doc.content == "a an to of"

    def test_frequencies_are_read_only(self, document):
        """Test that the frequency table cannot be modified."""
        with pytest.raises(TypeError):
            document.word_frequencies["cat"] = 10

    def test_negative_id_rejected(self):
        """Test that negative ids are rejected."""
        with pytest.raises(ValueError):
            Document(-1, "bad.txt", "some text")

    def test_custom_normalizer(self):
        """Test that the supplied normalizer is used."""
        doc = Document(0, "a.txt", "tiny words here", TextNormalizer(min_token_length=5))
        assert doc.get_unique_words() == {"words"}
