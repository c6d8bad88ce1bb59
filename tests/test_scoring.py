import pytest

from wordgraph.scoring import depth_weight, weighted_jaccard_similarity


def test_depth_weight():
    assert depth_weight(0) == 1.0
    assert depth_weight(1) == 0.4
    assert depth_weight(3) == 0.4


def test_identical_maps_score_one():
    a = {"cat": 0, "dog": 1, "bird": 2}
    assert weighted_jaccard_similarity(a, a) == pytest.approx(1.0)


def test_disjoint_maps_score_zero():
    assert weighted_jaccard_similarity({"cat": 0}, {"dog": 0}) == 0.0


def test_both_empty_scores_zero():
    assert weighted_jaccard_similarity({}, {}) == 0.0


def test_one_side_empty():
    assert weighted_jaccard_similarity({}, {"dog": 0}) == 0.0
    assert weighted_jaccard_similarity({"dog": 1}, {}) == 0.0


def test_query_against_documents():
    query = {"cat": 0, "dog": 1}
    assert weighted_jaccard_similarity(query, {"cat": 0, "dog": 0}) == pytest.approx(1.0)
    # 0.4 / (1.0 + 0.4 + 1.0)
    assert weighted_jaccard_similarity(query, {"dog": 0, "bird": 0}) == pytest.approx(0.4 / 2.4)


def test_intersection_weighted_by_first_map_only():
    primary = {"cat": 0, "dog": 2}
    secondary = {"dog": 0}
    # intersection uses dog@2 from primary: 0.4 / (1.4)
    assert weighted_jaccard_similarity(primary, secondary) == pytest.approx(0.4 / 1.4)
    # swapped: dog@0 from the new primary counts fully: 1.0 / (1.0 + 1.0)
    assert weighted_jaccard_similarity(secondary, primary) == pytest.approx(0.5)


def test_all_depth_zero_is_plain_jaccard():
    a = {"a": 0, "b": 0, "c": 0}
    b = {"b": 0, "c": 0, "d": 0, "e": 0}
    assert weighted_jaccard_similarity(a, b) == pytest.approx(2 / 5)


def test_range():
    maps = [
        {"a": 0},
        {"a": 1, "b": 0},
        {"b": 2, "c": 3, "d": 0},
        {"x": 0, "a": 0, "c": 1},
    ]
    for a in maps:
        for b in maps:
            assert 0.0 <= weighted_jaccard_similarity(a, b) <= 1.0
