# File: trigrams/export.py
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from trigrams.core.exceptions import ExportError
from trigrams.schemas import TrigramReport
from trigrams.settings import ReportConfig

logger = logging.getLogger("trigrams")

EXPORT_COLUMNS = ["source", "rank", "trigram", "count"]


def reports_to_frame(reports: Sequence[TrigramReport]) -> pd.DataFrame:
    rows = [
        {"source": report.source, "rank": rank, "trigram": row.trigram, "count": row.count}
        for report in reports
        for rank, row in enumerate(report.trigrams, start=1)
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_reports(reports: Sequence[TrigramReport], path) -> Path:
    """Write ranked reports to a .csv or .json file, picked by extension."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in ReportConfig.EXPORT_FORMATS:
        raise ExportError(
            f"Unsupported export format '{suffix or path.name}', expected one of {ReportConfig.EXPORT_FORMATS}"
        )

    df = reports_to_frame(reports)
    if suffix == ".csv":
        df.to_csv(path, index=False, encoding="utf-8")
    else:
        df.to_json(path, orient="records", indent=2, force_ascii=False)

    logger.info(f"💾 Exported {len(df):,} ranked trigrams to: {path}")
    return path
