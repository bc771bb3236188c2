"""Command-line entry point: directory statistics and classification previews."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from fileclassifier.preview import GroupedPreview, Preview
from fileclassifier.samples import sample_size_data, sample_time_data, sample_type_data
from fileclassifier.sizepreview import SizePreview
from fileclassifier.statistics import CHART_TITLE, FileStatistics, scan_directory
from fileclassifier.timepreview import TimePreview

VIEWS = ("type", "size", "time")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileclassifier",
        description="Show file type statistics for a directory and classification previews.",
    )
    parser.add_argument("path", nargs="?", default=".", help="directory to examine")
    parser.add_argument(
        "--view",
        choices=VIEWS,
        action="append",
        default=[],
        help="also show a classification preview (may be repeated)",
    )
    return parser


def _render_statistics(stats: FileStatistics) -> list[str]:
    lines = [stats.summary(), CHART_TITLE]
    lines.extend(f"  {s.label}  {s.percentage:.1f}%" for s in stats.slices)
    return lines


def _view_parts(view: str, now: datetime) -> tuple[GroupedPreview, Any, Callable[[Any], str]]:
    if view == "type":
        return Preview(), sample_type_data(), lambda item: item.file_name
    if view == "size":
        return SizePreview(), sample_size_data(), lambda item: item.label()
    return (
        TimePreview(),
        sample_time_data(now),
        lambda item: item.label(now.date()).replace("\n", "  "),
    )


def _render_view(view: str, now: datetime) -> list[str]:
    preview, data, item_text = _view_parts(view, now)
    preview.set_file_data(data)
    lines = [preview.title]
    for group in preview.groups:
        lines.append(group.title())
        lines.append(f"  目标文件夹名称: {group.folder_name}")
        lines.extend(f"  {item_text(item)}  [{item.button_text()}]" for item in group.items)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print statistics for a directory and any requested previews."""
    args = _build_parser().parse_args(argv)
    try:
        stats = scan_directory(args.path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        print(f"fileclassifier: {exc}", file=sys.stderr)
        return 1

    lines = _render_statistics(stats)
    now = datetime.now()
    for view in args.view:
        lines.append("")
        lines.extend(_render_view(view, now))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())