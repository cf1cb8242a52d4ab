# File: trigrams/core/exceptions.py


class TrigramError(Exception):
    """Base class for trigram counter failures."""


class SourceUnreadableError(TrigramError):
    """A text source could not be opened or decoded."""

    def __init__(self, source, reason: Exception):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Cannot read source '{self.source}': {reason}")


class ExportError(TrigramError, ValueError):
    pass
