# backend/tests/test_ranker.py
import pytest

from trigrams.counting import rank_trigrams


def _pairs(ranked):
    return [(row.trigram, row.count) for row in ranked]


def test_ranked_by_count_then_alphabetically():
    table = {"b b b": 2, "a a a": 2, "c c c": 5, "d d d": 1}
    assert _pairs(rank_trigrams(table, top_k=3)) == [("c c c", 5), ("a a a", 2), ("b b b", 2)]


def test_small_tables_are_returned_whole():
    table = {"x y z": 1, "a b c": 1}
    assert _pairs(rank_trigrams(table, top_k=100)) == [("a b c", 1), ("x y z", 1)]


def test_empty_table_gives_empty_ranking():
    assert rank_trigrams({}) == []


def test_default_limit_is_one_hundred():
    table = {f"w{i:03d} x y": i % 7 + 1 for i in range(150)}
    ranked = rank_trigrams(table)
    assert len(ranked) == 100
    keys = [(-row.count, row.trigram) for row in ranked]
    assert keys == sorted(keys)
    # every dropped entry ranks below the last kept one
    kept = {row.trigram for row in ranked}
    last = keys[-1]
    assert all((-count, key) > last for key, count in table.items() if key not in kept)


@pytest.mark.parametrize("top_k", [0, -5])
def test_non_positive_limit_is_rejected(top_k):
    with pytest.raises(ValueError):
        rank_trigrams({"a b c": 1}, top_k=top_k)
