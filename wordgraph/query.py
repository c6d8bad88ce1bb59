# wordgraph/query.py
"""
Search pipeline for the word-graph search engine.

Pipeline steps:
  1. Normalize and tokenize the query
  2. Seed every query word at depth 0
  3. Expand each query word through the word graph (BFS, bounded depth)
  4. Score every indexed document with depth-weighted Jaccard similarity
  5. Sort by score (descending) and keep the top-k

Returned structure (search_with_scores):
[
  {"doc": "original document text", "score": 0.83},
  ...
]
search() returns only the "doc" values.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from .expand import DepthMap, WordGraph, expand_query
from .indexer import IndexedDocument, build_documents
from .scoring import weighted_jaccard_similarity
from .utils import tokenize

# Module-level logger
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

DEFAULT_MAX_DEPTH = 3

# Default top-k if caller doesn't provide one
DEFAULT_TOP_K = 5


class SearchIndex:
    """
    In-memory document index searched through a word-association graph.

    The graph is only read, never modified, so one graph can back several
    indexes. Documents are replaced wholesale by index_documents().
    """

    def __init__(
        self,
        word_graph: WordGraph,
        max_depth: int = DEFAULT_MAX_DEPTH,
        documents: Optional[List[IndexedDocument]] = None,
    ):
        """
        Args:
            word_graph: word -> ordered neighbor list
            max_depth: maximum number of graph hops followed per query word
            documents: pre-built IndexedDocument records (default: empty)
        """
        self.word_graph = word_graph
        self.max_depth = max_depth
        self.documents: List[IndexedDocument] = list(documents) if documents else []

    def index_documents(self, docs: Sequence[str]) -> None:
        """
        Replace the current index with the given documents.

        The new list is built completely before it is swapped in.

        Args:
            docs: document texts, kept in this order
        """
        documents = build_documents(docs)
        self.documents = documents
        logger.debug("Indexed %d documents", len(documents))

    def expand(self, query: str) -> DepthMap:
        """
        Build the extended query: query words at depth 0 plus their graph
        neighbors within max_depth, each at its minimum depth.
        """
        words = tokenize(query)
        extended = expand_query(self.word_graph, words, self.max_depth)
        logger.debug("Expanded %d query words to %d terms", len(words), len(extended))
        return extended

    def search_with_scores(self, query: str, top_k: int = DEFAULT_TOP_K) -> List[Dict[str, Any]]:
        """
        Score every indexed document against the query.

        Args:
            query: the user's input query string
            top_k: number of results to return (<= 0 returns nothing)

        Returns:
            List of {"doc", "score"} dicts, best first.
        """
        documents = self.documents
        if not documents or top_k <= 0:
            return []

        extended = self.expand(query)
        scores = np.array(
            [weighted_jaccard_similarity(extended, doc["words"]) for doc in documents],
            dtype=float,
        )

        # stable: equal scores keep indexing order
        order = np.argsort(-scores, kind="stable")[:top_k]
        logger.debug("Scored %d documents, returning %d", len(documents), len(order))

        return [{"doc": documents[i]["text"], "score": float(scores[i])} for i in order]

    def search(self, query: str, top_k: int = DEFAULT_TOP_K) -> List[str]:
        """
        Return the texts of the best matching documents, best first.

        Args:
            query: the user's input query string
            top_k: number of results to return

        Returns:
            At most top_k document texts.
        """
        return [r["doc"] for r in self.search_with_scores(query, top_k)]
