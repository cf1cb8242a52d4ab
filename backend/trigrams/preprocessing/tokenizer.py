# File: trigrams/preprocessing/tokenizer.py

import re
from typing import Iterable, Iterator

from trigrams.settings import TokenizerConfig

WORD_PATTERN = re.compile(TokenizerConfig.WORD_PATTERN)


def join_lines(lines: Iterable[str]) -> str:
    """
    Reassemble lines into one continuous text.

    Each line keeps its content and ends with exactly one separator, so a word
    at the end of a line never merges with the first word of the next one.
    """
    return "".join(line.rstrip("\r\n") + TokenizerConfig.LINE_SEPARATOR for line in lines)


def tokenize(text: str) -> Iterator[str]:
    """
    Yield lowercased tokens from raw text.

    A token is a run of word characters that may carry one internal apostrophe
    ("don't") or one internal hyphen ("well-known"). Everything else, including
    punctuation and line breaks, separates tokens and is dropped. Calling the
    function again restarts the sequence.
    """
    if not text:
        return
    for match in WORD_PATTERN.finditer(text):
        yield match.group().lower()
