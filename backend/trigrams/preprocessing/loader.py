# File: trigrams/preprocessing/loader.py
import os
from typing import Dict, Iterable, List

from trigrams.core.exceptions import SourceUnreadableError
from trigrams.preprocessing.tokenizer import join_lines
from trigrams.settings import APIConfig


class TextSourceLoader:
    """Reads text files from disk, one source per path."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load_text(self, source: str) -> str:
        path = os.fspath(source)
        try:
            with open(path, "r", encoding=self.encoding) as f:
                return join_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadableError(path, e) from e


class InlineTextLoader:
    """Serves texts that are already in memory under generated source labels."""

    def __init__(self, texts: Iterable[str]):
        self._texts: Dict[str, str] = {
            f"{APIConfig.INLINE_SOURCE_PREFIX}{i}": text
            for i, text in enumerate(texts, start=1)
        }

    @property
    def sources(self) -> List[str]:
        return list(self._texts)

    def load_text(self, source: str) -> str:
        try:
            text = self._texts[source]
        except KeyError as e:
            raise SourceUnreadableError(source, e) from e
        return join_lines(text.splitlines())


def read_source_paths(stream: Iterable[str]) -> List[str]:
    """Collect whitespace-delimited paths from a line stream until it is exhausted."""
    paths: List[str] = []
    for line in stream:
        paths.extend(line.split())
    return paths
