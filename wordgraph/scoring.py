# wordgraph/scoring.py
"""
Depth-weighted Jaccard similarity between two word -> depth maps.

Every word contributes a weight instead of a flat 1: exact words (depth 0)
count fully, words reached through the graph count 0.4.

Note: the intersection is weighted by the depth in the *first* map only.
Search passes the expanded query first and a document (all depths 0)
second, so a document word matched through the graph counts 0.4 even though
the document contains it verbatim. Swapping the arguments changes scores.
"""

from typing import Mapping

EXACT_MATCH_WEIGHT = 1.0
EXPANDED_MATCH_WEIGHT = 0.4


def depth_weight(depth: int) -> float:
    """Weight of a word found at `depth` hops from the query."""
    return EXACT_MATCH_WEIGHT if depth == 0 else EXPANDED_MATCH_WEIGHT


def weighted_jaccard_similarity(primary: Mapping[str, int], secondary: Mapping[str, int]) -> float:
    """
    Weighted intersection over weighted union of two DepthMaps.

    Args:
        primary: DepthMap whose depths weight the intersection (the query)
        secondary: DepthMap compared against it (a document)

    Returns:
        Similarity in [0.0, 1.0]; 0.0 when both maps are empty.
    """
    intersection_weight = 0.0
    union_weight = 0.0

    for word, depth in primary.items():
        weight = depth_weight(depth)
        union_weight += weight
        if word in secondary:
            intersection_weight += weight

    for word, depth in secondary.items():
        if word not in primary:
            union_weight += depth_weight(depth)

    if union_weight == 0.0:
        return 0.0
    return intersection_weight / union_weight
