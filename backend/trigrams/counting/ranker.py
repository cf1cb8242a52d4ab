# File: trigrams/counting/ranker.py
import heapq
from typing import List, Mapping, Tuple

from trigrams.schemas.trigram import RankedTrigram


def _rank_key(item: Tuple[str, int]) -> Tuple[int, str]:
    trigram, count = item
    return -count, trigram


def rank_trigrams(table: Mapping[str, int], top_k: int = 100) -> List[RankedTrigram]:
    """
    Return the ``top_k`` most frequent trigrams.

    Ordered by count descending, then trigram ascending. Distinct keys never
    tie, so the result is fully determined by the table. Tables with ``top_k``
    or fewer entries are returned whole.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be a positive integer, got {top_k}")
    best = heapq.nsmallest(top_k, table.items(), key=_rank_key)
    return [RankedTrigram(trigram=trigram, count=count) for trigram, count in best]
