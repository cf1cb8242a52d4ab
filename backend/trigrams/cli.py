# File: trigrams/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from trigrams.core.config import Settings, settings as default_settings
from trigrams.export import export_reports
from trigrams.preprocessing.loader import TextSourceLoader, read_source_paths
from trigrams.processor import TrigramProcessor
from trigrams.report import print_report
from trigrams.settings import ReportConfig

logger = logging.getLogger("trigrams")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="trigram-counter",
        description="Report the most common three word sequences in one or more text files.",
    )
    ap.add_argument("paths", nargs="*",
                    help="Text files to read. When omitted, paths are read from stdin, separated by whitespace.")
    ap.add_argument("-k", "--top-k", type=_positive_int, default=None,
                    help="How many sequences to report (default: TRIGRAMS_TOP_K or 100)")
    ap.add_argument("--individual", action=argparse.BooleanOptionalAction, default=None,
                    help="Rank and print every file separately (--no-individual forces combined mode)")
    ap.add_argument("--include-final-trigram", action=argparse.BooleanOptionalAction, default=None,
                    help="Also count the last three word sequence of each file")
    ap.add_argument("--export", default=None, metavar="PATH",
                    help="Also write the ranked sequences to a .csv or .json file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return ap


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    overrides = {
        "TOP_K": args.top_k,
        "PROCESS_INDIVIDUALLY": args.individual,
        "INCLUDE_FINAL_TRIGRAM": args.include_final_trigram,
        "LOG_LEVEL": "INFO" if args.verbose else None,
    }
    return base.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def configure_logging(level: str) -> None:
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logger.setLevel(level)


def prompt_for_paths(stream=None) -> List[str]:
    stream = stream if stream is not None else sys.stdin
    if stream.isatty():
        print(ReportConfig.PATHS_PROMPT, file=sys.stderr)
    return read_source_paths(stream)


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.export and Path(args.export).suffix.lower() not in ReportConfig.EXPORT_FORMATS:
        parser.error(f"--export must end with one of {', '.join(ReportConfig.EXPORT_FORMATS)}")
    current = resolve_settings(args, settings or default_settings)
    configure_logging(current.LOG_LEVEL)

    paths = list(args.paths) or prompt_for_paths()
    processor = TrigramProcessor(
        TextSourceLoader(encoding=current.ENCODING),
        current,
        on_report=print_report,
    )
    summary = processor.process_sources(paths)

    if args.export:
        if summary.reports:
            export_reports(summary.reports, args.export)
        else:
            logger.warning(f"⚠️ Nothing to export, skipping {args.export}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
