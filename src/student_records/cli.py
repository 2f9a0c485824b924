"""Command-line interface for listing and comparing student records."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .config import ComparisonConfig, LoaderConfig, ReportConfig
from .core.comparer import RecordComparator, RecordComparisonError
from .core.models import StudentRecord
from .loader import RosterLoadError, RosterLoader
from .report import ReportBuilder

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Student record roster tool")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="List a roster in natural order (last name, then first name)")
    list_parser.add_argument("roster", help="Path or http(s) URL of a JSON or CSV roster")
    list_parser.add_argument("--output", type=Path, help="Path to save Markdown report; prints to stdout if omitted")
    list_parser.add_argument("--json-output", type=Path, help="Optional path for JSON report payload")
    list_parser.add_argument("--title", default="Student Roster", help="Heading used in the Markdown report")
    list_parser.add_argument("--reverse", action="store_true", help="List in reverse natural order")
    list_parser.add_argument("--no-summary", action="store_true", help="Omit the roster summary section")
    list_parser.add_argument("--skip-invalid", action="store_true", help="Skip unparsable rows instead of failing")
    list_parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout for remote rosters (seconds)")

    compare_parser = commands.add_parser("compare", help="Compare two records for equality and order")
    compare_parser.add_argument("first", nargs=3, metavar=("LAST", "FIRST", "ID"), help="First record")
    compare_parser.add_argument("second", nargs=3, metavar=("LAST", "FIRST", "ID"), help="Second record")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "list":
            return _run_list(args)
        return _run_compare(parser, args)
    except (RosterLoadError, RecordComparisonError) as exc:
        logger.error("%s", exc)
        return 1


def _run_list(args: argparse.Namespace) -> int:
    loader = RosterLoader(LoaderConfig(timeout=args.timeout, skip_invalid=args.skip_invalid))
    report_config = ReportConfig(
        output_path=str(args.output) if args.output else None,
        json_output_path=str(args.json_output) if args.json_output else None,
        title=args.title,
        include_summary=not args.no_summary,
        reverse=args.reverse,
    )
    records = loader.load(args.roster)
    builder = ReportBuilder(report_config, RecordComparator(ComparisonConfig()))

    markdown = builder.build_markdown(records)
    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(markdown, encoding="utf-8")
        logger.info("Markdown report written to %s", args.output)
    else:
        print(markdown, end="")

    if args.json_output:
        _ensure_parent(args.json_output)
        payload = builder.build_json(records)
        args.json_output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("JSON report written to %s", args.json_output)
    return 0


def _run_compare(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    records = []
    for last_name, first_name, raw_id in (args.first, args.second):
        try:
            student_id = int(raw_id)
        except ValueError:
            parser.error(f"student ID must be an integer: {raw_id!r}")
        records.append(StudentRecord(last_name, first_name, student_id))
    builder = ReportBuilder(ReportConfig())
    print(builder.build_comparison(records[0], records[1]), end="")
    return 0


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
