# wordgraph/loader.py
"""
Word-graph loading helpers.

The word graph ships as a gzip-compressed JSON payload that stores every
word once in a string table and refers to words by position:

    {
      "strings": ["cat", "dog", "pet"],
      "graph": {"0": [1, 2], "1": [2]}
    }

decodes to {"cat": ["dog", "pet"], "dog": ["pet"]}.

This module provides helpers to:
 - download the payload over HTTP (URL argument or WORD_GRAPH_URL env var)
 - read the payload from a local file
 - decode the string-table format into a plain word -> neighbors dict
 - wrap the decoded graph into a ready-to-use SearchIndex
"""

import gzip
import json
import logging
import os
import zlib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from .query import DEFAULT_MAX_DEPTH, SearchIndex

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Environment variable consulted when load() gets no URL
GRAPH_URL_ENV = "WORD_GRAPH_URL"

# Seconds to wait for the server (connect and per-read)
REQUEST_TIMEOUT = 30


def _download(url: str) -> bytes:
    """Stream the payload at `url` into memory."""
    logger.info("Downloading word graph from %s", url)
    resp = requests.get(url, stream=True, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    chunks = []
    for chunk in resp.iter_content(chunk_size=8192):
        if chunk:
            chunks.append(chunk)
    return b"".join(chunks)


def _parse_payload(raw: bytes) -> Dict[str, Any]:
    """Decompress and parse a gzip JSON payload."""
    try:
        return json.loads(gzip.decompress(raw).decode("utf-8"))
    except (OSError, EOFError, zlib.error) as e:
        raise ValueError(f"Word graph payload is not valid gzip data: {e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Word graph payload is not valid JSON: {e}") from e


def decode_graph(payload: Dict[str, Any]) -> Dict[str, List[str]]:
    """
    Decode a string-table encoded graph into word -> neighbor list.

    Args:
        payload: dict with "strings" (list of words) and "graph"
            (string-table index -> list of string-table indices).

    Returns:
        Dict[str, List[str]]: neighbor lists in their original order.

    Raises:
        ValueError: if the payload does not have the expected shape or
            refers to a string-table position that does not exist.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    strings = payload.get("strings")
    graph = payload.get("graph")
    if not isinstance(strings, list) or not isinstance(graph, dict):
        raise ValueError("Word graph payload needs a 'strings' list and a 'graph' object")

    def _word(idx: Any) -> str:
        try:
            pos = int(idx)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid string-table index: {idx!r}") from e
        if not 0 <= pos < len(strings):
            raise ValueError(f"String-table index {pos} out of range (table size {len(strings)})")
        return strings[pos]

    decoded: Dict[str, List[str]] = {}
    for key, neighbor_ids in graph.items():
        if not isinstance(neighbor_ids, list):
            raise ValueError(f"Neighbors of {key!r} must be a list, got {type(neighbor_ids).__name__}")
        decoded[_word(key)] = [_word(i) for i in neighbor_ids]
    return decoded


def load(url: Optional[str] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> SearchIndex:
    """
    Download and decode a word graph, returning an empty SearchIndex over it.

    Args:
        url: location of the gzip payload; falls back to $WORD_GRAPH_URL.
        max_depth: expansion depth for the returned index.

    Returns:
        SearchIndex with no documents indexed yet.

    Raises:
        RuntimeError: if no URL is given and WORD_GRAPH_URL is not set.
        requests.HTTPError: on a non-2xx response.
        ValueError: if the payload cannot be decoded.
    """
    url = url or os.environ.get(GRAPH_URL_ENV)
    if not url:
        raise RuntimeError(f"No word graph URL given and {GRAPH_URL_ENV} not set.")

    word_graph = decode_graph(_parse_payload(_download(url)))
    logger.info("Loaded word graph with %d entries", len(word_graph))
    return SearchIndex(word_graph, max_depth=max_depth)


def load_file(path: Union[str, Path], max_depth: int = DEFAULT_MAX_DEPTH) -> SearchIndex:
    """
    Read and decode a word graph from a local gzip file.

    Args:
        path: location of the gzip payload on disk.
        max_depth: expansion depth for the returned index.

    Returns:
        SearchIndex with no documents indexed yet.
    """
    word_graph = decode_graph(_parse_payload(Path(path).read_bytes()))
    logger.info("Loaded word graph with %d entries from %s", len(word_graph), path)
    return SearchIndex(word_graph, max_depth=max_depth)
