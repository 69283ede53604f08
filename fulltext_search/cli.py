"""
Command-line front end: load text files, print corpus statistics and run
queries, either once (--query) or interactively.

Usage:
    fulltext-search docs/*.txt
    fulltext-search docs/*.txt --query "quick brown" --max-results 5
    fulltext-search --dir docs --mode all
    fulltext-search                # bundled demo corpus and queries
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .config import get_settings
from .core.engine import SearchEngine
from .core.index import MatchMode
from .loader import load_directory, load_files
from .logging_config import configure_logging
from .models.response import SearchOutcome, SearchResponse
from .samples import DEMO_QUERIES, SAMPLE_DOCUMENTS

QUIT_COMMANDS = {"quit", "exit"}


def print_statistics(engine: SearchEngine, out: Optional[TextIO] = None) -> None:
    """Print corpus statistics."""
    out = out or sys.stdout
    stats = engine.get_corpus_stats()
    print("\n=== Search Engine Statistics ===", file=out)
    print(f"Total Documents: {stats['total_documents']}", file=out)
    print(f"Vocabulary Size: {stats['vocabulary_size']}", file=out)
    if stats["total_documents"]:
        print(f"Total Words: {stats['total_words']}", file=out)
        print(
            f"Average Words per Document: {stats['average_words_per_document']:.2f}",
            file=out
        )


def print_response(response: SearchResponse, out: Optional[TextIO] = None) -> None:
    """Print a search response the way a terminal user expects to read it."""
    out = out or sys.stdout
    print(f'\n=== Searching for: "{response.query}" ===', file=out)

    if response.outcome is SearchOutcome.NO_VALID_TERMS:
        print("No valid search terms found!", file=out)
        return

    print("Query terms: " + " ".join(f"'{t}'" for t in response.query_terms), file=out)

    if response.outcome is SearchOutcome.NO_MATCHES:
        print("No documents found containing the search terms.", file=out)
        return

    print(f"Found {response.total_candidates} candidate document(s)", file=out)
    print("\n--- Search Results ---", file=out)
    for rank, result in enumerate(response.results, 1):
        print(f"{rank}. {result.filename} (Score: {result.score:.4f})", file=out)
        print(f"   {result.snippet}\n", file=out)


def interactive_loop(
    engine: SearchEngine,
    max_results: int,
    mode: MatchMode,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None
) -> None:
    """Read queries until quit/exit or end of input."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print("\n--- Interactive Search ---", file=out)
    print("Enter search queries (type 'quit' to exit):", file=out)

    while True:
        print("\nSearch> ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break

        query = line.strip()
        if query.lower() in QUIT_COMMANDS:
            break
        if query:
            print_response(engine.search(query, max_results, mode), out)

    print("Thank you for using the Search Engine!", file=out)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="fulltext-search",
        description="TF-IDF full-text search over plain-text files."
    )
    parser.add_argument("files", nargs="*", help="Text files to index, in order")
    parser.add_argument("--dir", dest="directory", help="Index every matching file in a directory")
    parser.add_argument(
        "--pattern", default=settings.documents_pattern,
        help="Glob pattern used with --dir (default: %(default)s)"
    )
    parser.add_argument("-q", "--query", action="append", help="Run a query and exit (repeatable)")
    parser.add_argument(
        "-n", "--max-results", type=int, default=settings.max_results,
        help="Maximum results per query (default: %(default)s)"
    )
    parser.add_argument(
        "--mode", choices=[m.value for m in MatchMode], default=settings.match_mode.value,
        help="Candidate selection: any term (union) or all terms (default: %(default)s)"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, "console")

    mode = MatchMode(args.mode)
    engine = SearchEngine(max_results=args.max_results, match_mode=mode)
    demo = not args.files and not args.directory

    if demo:
        print("=== Simple Search Engine Demo ===")

    print("--- Loading Documents ---")
    if demo:
        documents = [
            engine.add_document(filename, text) for filename, text in SAMPLE_DOCUMENTS.items()
        ]
    else:
        documents = load_files(engine, args.files)
        if args.directory:
            documents += load_directory(engine, args.directory, args.pattern)
    for doc in documents:
        if doc is not None:
            print(f"Added document: {doc.filename} (ID: {doc.id})")

    print_statistics(engine)

    if args.query:
        for query in args.query:
            print_response(engine.search(query, args.max_results, mode))
        return 0

    if demo:
        for query in DEMO_QUERIES:
            print_response(engine.search(query, args.max_results, mode))

    interactive_loop(engine, args.max_results, mode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
