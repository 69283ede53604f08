"""Unit tests for reading documents from disk."""

import pytest
from fulltext_search.core.engine import SearchEngine
from fulltext_search.loader import read_text_file, load_file, load_files, load_directory


class TestLoader:
    """Test cases for the file loader."""

    @pytest.fixture
    def engine(self):
        return SearchEngine()

    @pytest.fixture
    def docs_dir(self, tmp_path):
        """Directory with a few text files and one non-matching file."""
        (tmp_path / "b.txt").write_text("second file\nabout search", encoding="utf-8")
        (tmp_path / "a.txt").write_text("first file\nabout foxes", encoding="utf-8")
        (tmp_path / "empty.txt").write_text("", encoding="utf-8")
        (tmp_path / "notes.md").write_text("markdown is ignored", encoding="utf-8")
        return tmp_path

    def test_read_joins_lines_with_space(self, tmp_path):
        """Test that words on adjacent lines stay separate."""
        path = tmp_path / "lines.txt"
        path.write_text("hello\nworld\r\nagain", encoding="utf-8")

        filename, text = read_text_file(path)

        assert filename == str(path)
        assert text == "hello world again "

    def test_load_file(self, engine, docs_dir):
        """Test loading a single file."""
        doc = load_file(engine, docs_dir / "a.txt")

        assert doc.id == 0
        assert doc.get_word_frequency("foxes") == 1
        assert doc.get_word_frequency("filefoxes") == 0

    def test_load_missing_file(self, engine, tmp_path):
        """Test that an unreadable file is skipped."""
        assert load_file(engine, tmp_path / "missing.txt") is None
        assert len(engine.corpus) == 0

    def test_load_empty_file(self, engine, docs_dir):
        """Test that an empty file is skipped."""
        assert load_file(engine, docs_dir / "empty.txt") is None
        assert engine._stats["documents_skipped"] == 1

    def test_load_files_keeps_order(self, engine, docs_dir, tmp_path):
        """Test that ids follow the given order, skipping failures."""
        docs = load_files(engine, [docs_dir / "b.txt", tmp_path / "nope.txt", docs_dir / "a.txt"])

        assert [d.id for d in docs] == [0, 1]
        assert docs[0].filename.endswith("b.txt")
        assert docs[1].filename.endswith("a.txt")

    def test_load_directory(self, engine, docs_dir):
        """Test loading every matching file in sorted order."""
        docs = load_directory(engine, docs_dir)

        assert [d.filename.rsplit("/", 1)[-1] for d in docs] == ["a.txt", "b.txt"]
        assert engine.search("markdown").results == []

    def test_load_directory_pattern(self, engine, docs_dir):
        """Test a custom glob pattern."""
        docs = load_directory(engine, docs_dir, "*.md")

        assert len(docs) == 1
        assert engine.search("markdown").total_results == 1

    def test_load_missing_directory(self, engine, tmp_path):
        """Test that a missing directory loads nothing."""
        assert load_directory(engine, tmp_path / "nowhere") == []
