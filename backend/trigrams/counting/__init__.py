# File: trigrams/counting/__init__.py
from .aggregator import count_trigrams, count_text, merge_tables, trigram_keys, window_count
from .ranker import rank_trigrams
