# File: trigrams/processor.py
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Mapping, Optional, Protocol

from trigrams.core.config import Settings
from trigrams.core.exceptions import SourceUnreadableError
from trigrams.counting import count_text, rank_trigrams
from trigrams.schemas import TrigramReport
from trigrams.settings import ReportConfig

logger = logging.getLogger("trigrams")


class SourceLoader(Protocol):
    def load_text(self, source: str) -> str: ...


@dataclass
class ProcessingSummary:
    mode: str
    processed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    reports: List[TrigramReport] = field(default_factory=list)
    nothing_to_process: bool = False


class TrigramProcessor:
    """
    Runs the tokenize -> count -> rank pipeline over a list of sources.

    Combined mode sums the per-source tables and ranks once at the end.
    Individual mode ranks and reports every source as soon as it is counted.
    A source that fails is logged and skipped; the run always continues.
    """

    def __init__(
        self,
        loader: SourceLoader,
        settings: Settings,
        on_report: Optional[Callable[[TrigramReport], None]] = None,
    ):
        self.loader = loader
        self.settings = settings
        self.on_report = on_report

    def process_sources(self, sources: Iterable[str]) -> ProcessingSummary:
        summary = ProcessingSummary(mode=self.settings.mode)
        combined: Counter = Counter()

        for source in sources:
            try:
                table = self.process_source(source)
            except SourceUnreadableError as e:
                logger.error(f"❌ File not found or unreadable: {e}")
                summary.failed.append(source)
                continue
            except Exception as e:
                logger.exception(f"❌ Unexpected error while processing '{source}': {e}")
                summary.failed.append(source)
                continue

            summary.processed.append(source)
            if self.settings.PROCESS_INDIVIDUALLY:
                self._publish(summary, self.build_report(source, table))
            else:
                combined.update(table)

        if not self.settings.PROCESS_INDIVIDUALLY:
            if not combined:
                logger.warning(f"⚠️ {ReportConfig.EMPTY_MESSAGE}")
                summary.nothing_to_process = True
            else:
                self._publish(summary, self.build_report(ReportConfig.COMBINED_SOURCE, combined))

        logger.info(
            f"🏁 {summary.mode.capitalize()} run finished: "
            f"{len(summary.processed)} processed, {len(summary.failed)} skipped"
        )
        return summary

    def process_source(self, source: str) -> Counter:
        logger.info(f"📄 Processing source: {source}")
        text = self.loader.load_text(source)
        table = count_text(text, include_final_trigram=self.settings.INCLUDE_FINAL_TRIGRAM)
        logger.info(f"   - {sum(table.values()):,} trigrams, {len(table):,} distinct")
        return table

    def build_report(self, source: str, table: Mapping[str, int]) -> TrigramReport:
        return TrigramReport(
            source=source,
            total_trigrams=sum(table.values()),
            distinct_trigrams=len(table),
            trigrams=rank_trigrams(table, self.settings.TOP_K),
        )

    def _publish(self, summary: ProcessingSummary, report: TrigramReport) -> None:
        summary.reports.append(report)
        if self.on_report is not None:
            self.on_report(report)
