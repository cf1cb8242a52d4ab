# trigrams/schemas/trigram.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from trigrams.settings import APIConfig

ProcessingMode = Literal["combined", "individual"]


class RankedTrigram(BaseModel):
    trigram: str
    count: int = Field(..., ge=0)


class TrigramReport(BaseModel):
    """Ranked trigrams for one source, or for all sources in combined mode."""
    source: str
    total_trigrams: int = Field(..., ge=0, description="Sum of all counts in the frequency table")
    distinct_trigrams: int = Field(..., ge=0)
    trigrams: List[RankedTrigram]


class CountRequest(BaseModel):
    texts: List[str] = Field(..., min_length=1, description="One entry per source")
    top_k: Optional[int] = Field(None, ge=1, le=APIConfig.MAX_TOP_K)
    individual: Optional[bool] = None
    include_final_trigram: Optional[bool] = None


class CountResponse(BaseModel):
    mode: ProcessingMode
    reports: List[TrigramReport]


class TokenizeRequest(BaseModel):
    text: str


class TokenizeResponse(BaseModel):
    tokens: List[str]
    count: int
