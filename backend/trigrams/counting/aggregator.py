# File: trigrams/counting/aggregator.py
"""
Sliding-window trigram counting.

The default window policy stops one window early and never counts the final
trigram of a source, so N tokens give N-3 trigrams. Pass
``include_final_trigram=True`` to count every window (N-2).
"""

from collections import Counter
from typing import Iterable, Iterator, Mapping, Sequence

from trigrams.preprocessing.tokenizer import tokenize
from trigrams.settings import TokenizerConfig


def window_count(n_tokens: int, include_final_trigram: bool = False) -> int:
    """Number of windows the aggregator visits for ``n_tokens`` tokens."""
    size = TokenizerConfig.WINDOW_SIZE
    if n_tokens < size:
        return 0
    windows = n_tokens - size + 1
    return windows if include_final_trigram else windows - 1


def trigram_keys(tokens: Sequence[str], include_final_trigram: bool = False) -> Iterator[str]:
    size = TokenizerConfig.WINDOW_SIZE
    for i in range(window_count(len(tokens), include_final_trigram)):
        yield TokenizerConfig.KEY_SEPARATOR.join(tokens[i:i + size])


def count_trigrams(tokens: Iterable[str], include_final_trigram: bool = False) -> Counter:
    """Build the frequency table for one ordered token sequence."""
    return Counter(trigram_keys(list(tokens), include_final_trigram))


def count_text(text: str, include_final_trigram: bool = False) -> Counter:
    return count_trigrams(tokenize(text), include_final_trigram)


def merge_tables(tables: Iterable[Mapping[str, int]]) -> Counter:
    """Sum frequency tables key-wise; windows never span two tables."""
    merged: Counter = Counter()
    for table in tables:
        merged.update(table)
    return merged
