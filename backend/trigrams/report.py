# File: trigrams/report.py
import sys
from typing import List, Optional, Sequence, TextIO

from trigrams.schemas import RankedTrigram, TrigramReport
from trigrams.settings import ReportConfig


def format_ranking(ranked: Sequence[RankedTrigram], width: int = ReportConfig.COLUMN_WIDTH) -> List[str]:
    """Two-column layout: left-justified trigram column, then the count."""
    lines = [f"{ReportConfig.HEADER_SEQUENCE:<{width}} : {ReportConfig.HEADER_COUNT}"]
    lines.extend(f"{row.trigram:<{width}} : {row.count}" for row in ranked)
    return lines


def print_report(report: TrigramReport, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in format_ranking(report.trigrams):
        print(line, file=out)
