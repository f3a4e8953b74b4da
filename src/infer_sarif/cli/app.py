"""Command-line interface implementation for the Infer to SARIF converter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..adapters import OutputWriteError, ReportFormatError, ReportLoaderError, write_document
from ..config import ConfigError, load_settings
from ..models import PhysicalLocation, ResultLevel, SarifLog
from ..service import ConversionResult, ConversionService

LEVEL_RANK = {
    ResultLevel.WARNING: 0,
    ResultLevel.ERROR: 1,
}
FAIL_NEVER = "never"

logger = logging.getLogger(__name__)


def render_table(document: SarifLog, project_root: Path | None = None) -> str:
    """Render results as a simple text table for terminal output."""

    results = [result for run in document.runs for result in run.results]
    if not results:
        return "No findings detected."

    root_uri = project_root.as_uri().rstrip("/") + "/" if project_root else None

    headers = ("Level", "Rule ID", "Location", "Message")
    rows = [headers]
    for result in results:
        rows.append(
            (
                result.level.value,
                result.rule_id,
                _format_location(result.locations[0] if result.locations else None, root_uri),
                result.message,
            )
        )

    widths = [max(len(str(row[idx])) for row in rows) for idx in range(len(headers))]

    def format_row(values: tuple[str, str, str, str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths, strict=True))

    lines = [format_row(headers)]
    lines.append("  ".join("=" * width for width in widths))
    for row in rows[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_location(location: PhysicalLocation | None, root_uri: str | None) -> str:
    if location is None:
        return "-"
    uri = location.uri
    if root_uri and uri.startswith(root_uri):
        uri = uri[len(root_uri):]
    if location.region.start_line is not None:
        return f"{uri}:{location.region.start_line}"
    return uri


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="infer-sarif", description="Convert Infer reports to SARIF"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert", help="Convert an Infer report.json into a SARIF document."
    )
    convert_parser.add_argument(
        "report",
        type=Path,
        help="Path to the Infer report.json file.",
    )
    convert_parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory the report's file paths are relative to (defaults to the current directory).",
    )
    convert_parser.add_argument(
        "--md5",
        dest="compute_hashes",
        action="store_const",
        const=True,
        default=None,
        help="Attach an MD5 hash of every referenced source file that exists on disk.",
    )
    convert_parser.add_argument(
        "--no-md5",
        dest="compute_hashes",
        action="store_const",
        const=False,
        help="Do not hash referenced source files.",
    )
    convert_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML/JSON settings file.",
    )
    convert_parser.add_argument(
        "--tool-name",
        default=None,
        help="Tool name recorded in the SARIF run (defaults to 'Infer').",
    )
    convert_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the SARIF document to this file instead of stdout.",
    )
    convert_parser.add_argument(
        "--format",
        choices=["sarif", "table"],
        default="sarif",
        help="Print the SARIF document or a table of results.",
    )
    convert_parser.add_argument(
        "--fail-on",
        choices=[level.value for level in ResultLevel] + [FAIL_NEVER],
        default=FAIL_NEVER,
        help="Exit with status 1 when results at or above the provided level are present.",
    )

    return parser


def create_service() -> ConversionService:
    """Create a conversion service wired with the default adapters."""

    return ConversionService()


def _format_summary(result: ConversionResult) -> str:
    metadata = result.metadata
    return (
        f"\n{metadata.get('finding_count', 0)} findings, "
        f"{metadata.get('rule_count', 0)} rules, "
        f"{metadata.get('file_count', 0)} files"
    )


def _should_fail(result: ConversionResult, fail_on: str) -> bool:
    if fail_on == FAIL_NEVER:
        return False

    threshold = LEVEL_RANK[ResultLevel(fail_on)]
    return any(
        LEVEL_RANK[item.level] >= threshold
        for run in result.document.runs
        for item in run.results
    )


def _handle_convert(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(
            args.config,
            project_root=args.project_root,
            compute_hashes=args.compute_hashes,
            tool_name=args.tool_name,
        )
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 2

    service = create_service()

    try:
        result = service.convert(args.report, settings)
        if args.format == "sarif" or args.output is not None:
            write_document(result.document, args.output)
    except (ReportLoaderError, ReportFormatError, OutputWriteError) as exc:
        print(f"Error: {exc}")
        return 2

    logger.info("Conversion summary: %s", dict(result.metadata))
    if args.format == "table":
        print(render_table(result.document, settings.project_root))
        print(_format_summary(result))

    return 1 if _should_fail(result, args.fail_on) else 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "convert":
        return _handle_convert(args)

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
