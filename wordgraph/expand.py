# wordgraph/expand.py
"""
Query expansion over a word-association graph.

This module enriches the words of a query with the words reachable from
them in a directed word graph, improving recall for short queries. Each
reachable word is tagged with its depth (number of hops from the seed), so
the scorer can give exact words more weight than associated ones.

Functions:
    get_extended_neighbors: Depth-bounded BFS from a single word.
    expand_query: Merge the expansions of several seed words.
"""

from collections import deque
from typing import Deque, Dict, Iterable, Mapping, Sequence, Tuple

WordGraph = Mapping[str, Sequence[str]]
DepthMap = Dict[str, int]


def get_extended_neighbors(word_graph: WordGraph, word: str, max_depth: int) -> DepthMap:
    """
    Breadth-first walk from `word`, recording each word's minimum depth.

    Neighbors are queued unconditionally; a word is recorded (and its own
    neighbors queued) only on its first dequeue within `max_depth`. Since the
    queue is FIFO and every step adds exactly one hop, the first dequeue of a
    word always carries its shortest distance from the seed.

    Args:
        word_graph: word -> ordered neighbor list
        word: seed word (need not be present in the graph)
        max_depth: maximum number of hops to follow

    Returns:
        DepthMap with the seed at depth 0 (empty if max_depth < 0).
    """
    neighbors: DepthMap = {}
    queue: Deque[Tuple[str, int]] = deque([(word, 0)])

    while queue:
        current, depth = queue.popleft()
        if depth > max_depth or current in neighbors:
            continue

        neighbors[current] = depth
        for nb in word_graph.get(current) or ():
            queue.append((nb, depth + 1))

    return neighbors


def expand_query(word_graph: WordGraph, words: Iterable[str], max_depth: int) -> DepthMap:
    """
    Expand every seed word and merge the results into one DepthMap.

    Seed words start at depth 0. An expanded word replaces an existing
    entry only when it was reached in strictly fewer hops.

    Args:
        word_graph: word -> ordered neighbor list
        words: seed words (tokens of the normalized query)
        max_depth: maximum number of hops per seed

    Returns:
        DepthMap covering the seeds and everything reachable from them.
    """
    extended: DepthMap = {w: 0 for w in words}

    for seed in list(extended):
        for nb, depth in get_extended_neighbors(word_graph, seed, max_depth).items():
            if nb not in extended or extended[nb] > depth:
                extended[nb] = depth

    return extended
