"""Read plain-text documents from disk and feed them to the engine."""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import structlog

from .core.document import Document
from .core.engine import SearchEngine

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def read_text_file(path: PathLike) -> Tuple[str, str]:
    """
    Read a text file as a single line of text.

    Lines are joined with a single space so words on adjacent lines never
    merge.

    Args:
        path: File to read

    Returns:
        (filename, text) pair

    Raises:
        OSError: If the file cannot be opened or read
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        text = "".join(line.rstrip("\r\n") + " " for line in f)
    return str(path), text


def load_file(engine: SearchEngine, path: PathLike) -> Optional[Document]:
    """
    Add one file to the engine.

    Unreadable and empty files are logged and skipped.

    Returns:
        The indexed Document, or None if the file was skipped
    """
    try:
        filename, text = read_text_file(path)
    except OSError as e:
        logger.error("Cannot open file", path=str(path), error=str(e))
        return None

    return engine.add_document(filename, text)


def load_files(engine: SearchEngine, paths: Iterable[PathLike]) -> List[Document]:
    """Add files in order, returning the documents that were indexed."""
    documents = []
    for path in paths:
        doc = load_file(engine, path)
        if doc is not None:
            documents.append(doc)
    return documents


def load_directory(
    engine: SearchEngine,
    directory: PathLike,
    pattern: str = "*.txt"
) -> List[Document]:
    """
    Add every file in a directory matching a glob pattern.

    Files are loaded in sorted path order so ids are reproducible.

    Args:
        engine: Target engine
        directory: Directory to scan
        pattern: Glob pattern relative to the directory

    Returns:
        Documents that were indexed
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.error("Documents directory not found", directory=str(directory))
        return []

    paths = sorted(p for p in directory.glob(pattern) if p.is_file())
    documents = load_files(engine, paths)
    logger.info(
        "Documents directory loaded",
        directory=str(directory),
        files=len(paths),
        indexed=len(documents)
    )
    return documents
