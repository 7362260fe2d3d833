# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the engines over result sets saved as (Extended) JSON files,
#   e.g. the outputs of two consecutive pipeline stages.
#
# COMMANDS:
# ---------
# 1. Diff two stage outputs:
#    stage-inspector diff before.json after.json
#    stage-inspector diff before.json after.json --only added --level 1
#    stage-inspector diff before.json after.json --json
#
# 2. Build chart data for a result set:
#    stage-inspector chart results.json
#    stage-inspector chart results.json --type pie --title "Orders"
#
# 3. Resolve a diff path:
#    stage-inspector lookup after.json "[1].b"
#
#   Also available as `python -m stage_inspector.cli`.
#
# INPUT / OUTPUT:
# ---------------
#   Files are read with bson.json_util, so {"$date": ...} arrives as a
#   datetime and {"$oid": ...} as an ObjectId. JSON output is written
#   the same way.
#
# ==============================================

import argparse
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List, Optional

from bson import json_util

from .charts import ChartConfig, ChartType, detect_chart_type, get_chart_config, transform_to_chart_data
from .config import get_config
from .diff import ChangeType, compare, filter_changes_by_type, get_changes_at_level, has_nested_changes
from .documents import ABSENT, format_path, get_value_at_path
from .errors import DocumentTooDeepError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stage-inspector",
        description="Inspect how pipeline stage results change and how to chart them.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    diff_parser = subparsers.add_parser("diff", help="Compare two result documents")
    diff_parser.add_argument("old", help="JSON file with the earlier result")
    diff_parser.add_argument("new", help="JSON file with the later result")
    diff_parser.add_argument(
        "--only",
        choices=[change_type.value for change_type in ChangeType],
        help="Only list changes of this type",
    )
    diff_parser.add_argument(
        "--level",
        type=int,
        help="Only list changes with this many field separators in their path",
    )
    diff_parser.add_argument(
        "--all",
        action="store_true",
        help="Also list unchanged positions",
    )
    diff_parser.add_argument("--json", action="store_true", help="Print the full result as JSON")

    chart_parser = subparsers.add_parser("chart", help="Build chart data for a result set")
    chart_parser.add_argument("data", help="JSON file with the result set")
    chart_parser.add_argument(
        "--type",
        dest="chart_type",
        choices=[chart_type.value for chart_type in ChartType],
        help="Chart type (detected from the data when omitted)",
    )
    chart_parser.add_argument("--title", help="Chart title")
    chart_parser.add_argument("--colors", help="Comma separated colours overriding the palette")

    lookup_parser = subparsers.add_parser("lookup", help="Print the value at a diff path")
    lookup_parser.add_argument("document", help="JSON file to look into")
    lookup_parser.add_argument("path", help='Path such as "a.b[0].c"')

    return parser


def load_document(path: str) -> Any:
    """
    Read one (Extended) JSON document from a file.

    Raises:
        OSError: if the file cannot be read
        ValueError: if the content is not valid JSON
    """
    text = Path(path).read_text(encoding="utf-8")
    return json_util.loads(text)


def _dumps(value: Any, **kwargs) -> str:
    return json_util.dumps(value, ensure_ascii=False, **kwargs)


def run_diff(args: argparse.Namespace, max_depth: int) -> int:
    result = compare(load_document(args.old), load_document(args.new), max_depth=max_depth)

    if args.json:
        print(_dumps(result.to_dict(), indent=2))
        return 0

    changes = list(result.changes)
    if args.only:
        changes = filter_changes_by_type(changes, args.only)
    elif not args.all:
        changes = [change for change in changes if change.type is not ChangeType.UNCHANGED]
    if args.level is not None:
        changes = get_changes_at_level(changes, args.level)

    summary = result.summary
    print(
        f"{summary.total} positions: {summary.added} added, {summary.removed} removed, "
        f"{summary.modified} modified, {summary.unchanged} unchanged"
    )
    for change in changes:
        print(_describe_change(change))
    return 0


def _describe_change(change) -> str:
    line = f"{change.type.icon} {format_path(change.path)}"
    if change.is_container:
        if has_nested_changes(change):
            line += " (nested changes)"
        return line
    if change.type is ChangeType.ADDED:
        return f"{line}: {_dumps(change.new_value)}"
    if change.type is ChangeType.REMOVED:
        return f"{line}: {_dumps(change.old_value)}"
    if change.type is ChangeType.MODIFIED:
        return f"{line}: {_dumps(change.old_value)} → {_dumps(change.new_value)}"
    return line


def run_chart(args: argparse.Namespace, max_depth: int, palette) -> int:
    data = load_document(args.data)
    if isinstance(data, Mapping):
        data = [data]

    chart_type = ChartType(args.chart_type) if args.chart_type else detect_chart_type(data)
    colors = [color.strip() for color in args.colors.split(",")] if args.colors else palette

    model = transform_to_chart_data(
        data, chart_type, ChartConfig(colors=colors), max_depth=max_depth
    )
    config = get_chart_config(data, chart_type, args.title)

    print(_dumps(
        {"type": chart_type.value, "config": config.to_dict(), "data": model.to_dict()},
        indent=2,
    ))
    return 0


def run_lookup(args: argparse.Namespace) -> int:
    value = get_value_at_path(load_document(args.document), args.path, default=ABSENT)
    if value is ABSENT:
        print(f"error: no value at '{args.path}'", file=sys.stderr)
        return 1
    print(_dumps(value, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        # a bad MAX_DOCUMENT_DEPTH or LOG_LEVEL is a ValueError too
        config = get_config()
        setup_logging(config.logging.level, config.logging.log_file)
        max_depth = config.analysis.max_depth

        if args.command == "diff":
            return run_diff(args, max_depth)
        if args.command == "chart":
            return run_chart(args, max_depth, config.charts.palette)
        return run_lookup(args)
    except (OSError, ValueError) as e:
        # DocumentTooDeepError is a ValueError, as is a JSON decode error
        if isinstance(e, DocumentTooDeepError):
            logger.warning("Input rejected: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
