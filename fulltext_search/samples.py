"""Bundled demo corpus and queries used when no documents are supplied."""

SAMPLE_DOCUMENTS = {
    "sample_docs/doc1.txt": (
        "The quick brown fox jumps over the lazy dog. "
        "Foxes are quick and clever animals that live in the forest."
    ),
    "sample_docs/doc2.txt": (
        "Search algorithms find information in large collections. "
        "A quick search algorithm uses an inverted index."
    ),
    "sample_docs/doc3.txt": (
        "Forest animals include deer, bears, foxes and owls. "
        "The forest is home to many animals."
    ),
    "sample_docs/doc4.txt": (
        "Information retrieval ranks documents by relevance. "
        "TF-IDF weighs rare terms above common ones."
    ),
    "sample_docs/doc5.txt": (
        "Sorting algorithms like quicksort and mergesort organize data. "
        "Algorithm analysis measures running time."
    ),
}

DEMO_QUERIES = [
    "quick brown",
    "algorithm",
    "forest animals",
    "information",
]
