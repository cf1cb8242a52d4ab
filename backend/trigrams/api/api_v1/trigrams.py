# trigrams/api/api_v1/trigrams.py
"""
FastAPI routes for counting trigrams in posted texts.
"""

from fastapi import APIRouter, Depends, HTTPException

from trigrams.core.config import Settings, settings
from trigrams.preprocessing.loader import InlineTextLoader
from trigrams.preprocessing.tokenizer import join_lines, tokenize
from trigrams.processor import TrigramProcessor
from trigrams.schemas import CountRequest, CountResponse, TokenizeRequest, TokenizeResponse

router = APIRouter()


def get_settings() -> Settings:
    """Settings dependency."""
    return settings


@router.post("/trigrams", response_model=CountResponse)
def count_trigrams(request: CountRequest, current: Settings = Depends(get_settings)):
    """Count and rank trigrams; every entry of ``texts`` is one source."""
    overrides = {
        "TOP_K": request.top_k,
        "PROCESS_INDIVIDUALLY": request.individual,
        "INCLUDE_FINAL_TRIGRAM": request.include_final_trigram,
    }
    effective = current.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    loader = InlineTextLoader(request.texts)
    summary = TrigramProcessor(loader, effective).process_sources(loader.sources)

    if summary.nothing_to_process:
        raise HTTPException(status_code=422, detail="Nothing to process")

    return CountResponse(mode=summary.mode, reports=summary.reports)


@router.post("/tokens", response_model=TokenizeResponse)
def tokenize_text(request: TokenizeRequest):
    """Show how a text is split into tokens."""
    tokens = list(tokenize(join_lines(request.text.splitlines())))
    return TokenizeResponse(tokens=tokens, count=len(tokens))
