# File: trigrams/settings.py

class TokenizerConfig:
    # apostrophe words first, then hyphenated words, then plain runs
    WORD_PATTERN = r"((\w+'\w+)|(\w+-?\w+)|(\w+))"
    LINE_SEPARATOR = "\n"
    KEY_SEPARATOR = " "
    WINDOW_SIZE = 3

class ReportConfig:
    HEADER_SEQUENCE = "Top Three Word Sequence"
    HEADER_COUNT = "Count"
    COLUMN_WIDTH = 30
    COMBINED_SOURCE = "combined"
    EMPTY_MESSAGE = "Empty file found.. nothing to process"
    PATHS_PROMPT = "Enter file/s path for processing:"
    EXPORT_FORMATS = (".csv", ".json")

class APIConfig:
    TITLE = "Trigram Counter API"
    DESCRIPTION = "Counts three word sequences in posted texts and ranks the most frequent ones"
    VERSION = "1.0.0"
    MAX_TOP_K = 10_000
    INLINE_SOURCE_PREFIX = "text-"
