"""Unit tests for the search engine core functionality."""

import math

import pytest
from fulltext_search.core.engine import SearchEngine
from fulltext_search.core.index import MatchMode
from fulltext_search.models.response import SearchOutcome, SearchResult


class TestSearchEngine:
    """Test cases for the SearchEngine class."""

    @pytest.fixture
    def engine(self):
        """Create a search engine instance for testing."""
        return SearchEngine(max_results=10)

    @pytest.fixture
    def sample_documents(self):
        """Sample documents for testing, in ingestion order."""
        return {
            "doc0.txt": "the quick brown fox",
            "doc1.txt": "quick algorithms for search",
        }

    @pytest.fixture
    def loaded_engine(self, engine, sample_documents):
        engine.load_documents(sample_documents)
        return engine

    def test_engine_initialization(self, engine):
        """Test search engine initialization."""
        assert engine.max_results == 10
        assert engine.match_mode is MatchMode.ANY
        assert len(engine.corpus) == 0
        assert engine._stats["total_queries"] == 0
        assert engine._stats["documents_added"] == 0

    def test_add_document_assigns_sequential_ids(self, engine):
        """Test that ids follow ingestion order."""
        first = engine.add_document("a.txt", "first document")
        second = engine.add_document("b.txt", "second document")

        assert first.id == 0
        assert second.id == 1
        assert engine.get_document(1) is second
        assert engine._stats["documents_added"] == 2

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_add_empty_document_skipped(self, engine, text):
        """Test that empty text is skipped without consuming an id."""
        assert engine.add_document("empty.txt", text) is None
        assert len(engine.corpus) == 0
        assert engine._stats["documents_skipped"] == 1

        doc = engine.add_document("real.txt", "real content")
        assert doc.id == 0

    def test_load_documents(self, engine, sample_documents):
        """Test bulk loading."""
        added = engine.load_documents({**sample_documents, "empty.txt": ""})

        assert added == 2
        assert engine.get_document(0).filename == "doc0.txt"
        assert engine.get_document(1).filename == "doc1.txt"
        assert engine.get_document(2) is None

    def test_search_term_in_both_documents(self, loaded_engine):
        """Test a query matching every document."""
        result = loaded_engine.search("quick")

        assert result.outcome is SearchOutcome.MATCHED
        assert result.total_candidates == 2
        assert [r.document_id for r in result.results] == [0, 1]
        # Present everywhere: no discriminating weight
        assert all(r.score == 0.0 for r in result.results)

    def test_search_term_in_one_document(self, loaded_engine):
        """Test a query matching a single document."""
        result = loaded_engine.search("fox")

        assert result.outcome is SearchOutcome.MATCHED
        assert result.total_results == 1
        assert result.results[0].document_id == 0
        assert result.results[0].filename == "doc0.txt"
        assert result.results[0].score == pytest.approx(math.log(2))
        assert result.results[0].snippet == "the quick brown fox"

    def test_search_no_matches(self, loaded_engine):
        """Test a query matching nothing."""
        result = loaded_engine.search("zzzznotfound")

        assert result.outcome is SearchOutcome.NO_MATCHES
        assert result.results == []
        assert result.query_terms == ["zzzznotfound"]
        assert loaded_engine._stats["no_match_queries"] == 1

    @pytest.mark.parametrize("query", ["", "   ", "a an of", "?!,.", None])
    def test_search_no_valid_terms(self, loaded_engine, query):
        """Test queries that normalize to nothing."""
        result = loaded_engine.search(query)

        assert result.outcome is SearchOutcome.NO_VALID_TERMS
        assert result.results == []
        assert result.query_terms == []
        assert loaded_engine._stats["invalid_queries"] == 1

    def test_search_empty_corpus(self, engine):
        """Test searching before any document was added."""
        result = engine.search("anything at all")

        assert result.outcome is SearchOutcome.NO_MATCHES
        assert result.results == []

    def test_query_normalized_like_documents(self, loaded_engine):
        """Test that query text goes through the same tokenizer."""
        result = loaded_engine.search("FOX!!!")

        assert result.query_terms == ["fox"]
        assert result.results[0].document_id == 0

    def test_search_union_versus_intersection(self, loaded_engine):
        """Test both candidate selection modes."""
        any_result = loaded_engine.search("fox search")
        all_result = loaded_engine.search("fox search", match_mode=MatchMode.ALL)
        narrow_result = loaded_engine.search("quick fox", match_mode="all")

        assert {r.document_id for r in any_result.results} == {0, 1}
        assert all_result.outcome is SearchOutcome.NO_MATCHES
        assert [r.document_id for r in narrow_result.results] == [0]
        assert narrow_result.match_mode == "all"

    def test_engine_default_match_mode(self, sample_documents):
        """Test an engine configured for intersection."""
        engine = SearchEngine(match_mode=MatchMode.ALL)
        engine.load_documents(sample_documents)

        assert engine.search("fox search").outcome is SearchOutcome.NO_MATCHES

    def test_max_results(self, engine):
        """Test truncation to the requested count."""
        for i in range(15):
            engine.add_document(f"doc{i}.txt", f"shared token{i}")
        engine.add_document("other.txt", "unrelated words")

        default = engine.search("shared")
        limited = engine.search("shared", max_results=3)

        assert default.total_results == 10
        assert default.total_candidates == 15
        assert limited.total_results == 3
        assert [r.document_id for r in limited.results] == [0, 1, 2]

    @pytest.mark.parametrize("max_results", [0, -5])
    def test_non_positive_max_results(self, loaded_engine, max_results):
        """Test that a non-positive limit returns no results without failing."""
        result = loaded_engine.search("fox", max_results=max_results)

        assert result.results == []
        assert result.outcome is SearchOutcome.MATCHED
        assert result.total_candidates == 1

    def test_results_sorted_by_score(self, engine):
        """Test non-increasing score order."""
        engine.load_documents({
            "a.txt": "search search search engine",
            "b.txt": "search engine",
            "c.txt": "engine engine",
            "d.txt": "unrelated text",
        })

        result = engine.search("search engine")
        scores = [r.score for r in result.results]

        assert result.results[0].document_id == 0
        assert scores == sorted(scores, reverse=True)
        assert all(isinstance(r, SearchResult) for r in result.results)

    def test_get_term_info(self, loaded_engine):
        """Test term lookups."""
        info = loaded_engine.get_term_info("Quick")

        assert info.token == "quick"
        assert info.document_frequency == 2
        assert info.document_ids == [0, 1]
        assert info.inverse_document_frequency == 0.0

    def test_get_term_info_unknown_and_invalid(self, loaded_engine):
        """Test lookups that match nothing."""
        unknown = loaded_engine.get_term_info("zebra")
        invalid = loaded_engine.get_term_info("a!")

        assert unknown.document_frequency == 0
        assert unknown.document_ids == []
        assert invalid.token is None

    def test_get_corpus_stats(self, loaded_engine):
        """Test corpus statistics."""
        stats = loaded_engine.get_corpus_stats()

        assert stats["total_documents"] == 2
        assert stats["vocabulary_size"] == 7
        assert stats["total_words"] == 8
        assert stats["average_words_per_document"] == 4.0

    def test_get_stats(self, loaded_engine):
        """Test query statistics."""
        loaded_engine.search("fox")
        loaded_engine.search("zzzznotfound")
        loaded_engine.search("")

        stats = loaded_engine.get_stats()

        assert stats["total_queries"] == 3
        assert stats["matched_queries"] == 1
        assert stats["no_match_queries"] == 1
        assert stats["invalid_queries"] == 1
        assert stats["match_rate"] == pytest.approx(1 / 3)
        assert stats["average_execution_time_ms"] >= 0.0
        assert stats["corpus_stats"]["total_documents"] == 2

    def test_get_stats_no_queries(self, engine):
        """Test averages before any query."""
        stats = engine.get_stats()

        assert stats["average_execution_time_ms"] == 0.0
        assert stats["match_rate"] == 0.0

    def test_engine_usable_after_rejected_input(self, loaded_engine):
        """Test that rejected input never breaks later operations."""
        loaded_engine.search("")
        loaded_engine.add_document("empty.txt", "")
        loaded_engine.search("\x00\xff☃")

        assert loaded_engine.search("fox").total_results == 1
        assert loaded_engine.add_document("doc2.txt", "more foxes").id == 2

    def test_clear(self, loaded_engine):
        """Test clearing all data."""
        loaded_engine.search("fox")
        loaded_engine.clear()

        assert len(loaded_engine.corpus) == 0
        assert loaded_engine._stats["total_queries"] == 0
        assert loaded_engine.search("fox").outcome is SearchOutcome.NO_MATCHES
        assert loaded_engine.add_document("new.txt", "fresh start").id == 0
