# wordgraph/indexer.py
"""
Document indexing helpers.

An indexed document keeps its original text (returned to the caller on a
hit) together with its vocabulary as a DepthMap where every word sits at
depth 0. Documents are never expanded through the word graph; only queries
are.

Record shape:
    {"text": "Cats, dogs & birds", "words": {"cats": 0, "dogs": 0, "": 0, "birds": 0}}

Notes:
 - The vocabulary is a set: repeated words collapse to one entry and term
   frequency is not modeled.
 - Building an index always produces a fresh list; there is no incremental
   update of an existing one.
"""

from typing import Any, Dict, List, Sequence

from .utils import tokenize

IndexedDocument = Dict[str, Any]


def build_document(text: str) -> IndexedDocument:
    """
    Build the indexed record for a single document.

    Args:
        text: original document text.

    Returns:
        dict with keys "text" (unchanged input) and "words" (word -> 0).
    """
    return {"text": text, "words": {word: 0 for word in tokenize(text)}}


def build_documents(docs: Sequence[str]) -> List[IndexedDocument]:
    """
    Build indexed records for a batch of documents, preserving input order.

    Args:
        docs: original document texts.

    Returns:
        List[IndexedDocument]: one record per input text.
    """
    return [build_document(doc) for doc in docs]
