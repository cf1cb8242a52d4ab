# trigrams/schemas/__init__.py
from .trigram import (
    ProcessingMode,
    RankedTrigram,
    TrigramReport,
    CountRequest,
    CountResponse,
    TokenizeRequest,
    TokenizeResponse,
)
