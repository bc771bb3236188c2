"""File type statistics for a directory, grouped for a pie chart."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

OTHER_LABEL = "其他"
OTHER_THRESHOLD = 0.05
CHART_TITLE = "文件类型占比"


def _suffix(name: str) -> str:
    """Characters after the last dot of a file name, or an empty string."""
    _, dot, suffix = name.rpartition(".")
    return suffix if dot else ""


@dataclass(frozen=True)
class PieSlice:
    """One slice of the file type chart."""

    file_type: str
    count: int
    percentage: float

    @property
    def label(self) -> str:
        """Slice caption: the type followed by its file count."""
        return f"{self.file_type}({self.count}个)"


def group_file_types(counts: Mapping[str, int], total: int) -> dict[str, int]:
    """Merge types holding less than 5% of all files into one "other" entry.

    The result is ordered by type name.
    """
    threshold = int(total * OTHER_THRESHOLD)
    grouped: dict[str, int] = {}
    for file_type in sorted(counts):
        count = counts[file_type]
        if count >= threshold:
            grouped[file_type] = count
        else:
            grouped[OTHER_LABEL] = grouped.get(OTHER_LABEL, 0) + count
    return dict(sorted(grouped.items()))


def pie_slices(grouped: Mapping[str, int], total: int) -> list[PieSlice]:
    """Build chart slices, with each type's share of ``total`` in percent."""
    return [
        PieSlice(file_type, count, count / total * 100 if total else 0.0)
        for file_type, count in grouped.items()
    ]


@dataclass(frozen=True)
class FileStatistics:
    """How many files of each type a directory holds."""

    path: str
    total: int
    type_counts: dict[str, int]

    @property
    def grouped(self) -> dict[str, int]:
        """Type counts with rare types merged into one entry."""
        return group_file_types(self.type_counts, self.total)

    @property
    def slices(self) -> list[PieSlice]:
        """Chart slices for the grouped type counts."""
        return pie_slices(self.grouped, self.total)

    def summary(self) -> str:
        """Path line and a line with the file and type totals."""
        return (
            f"路径：{self.path}\n"
            f"文件总数：{self.total}      文件类型数：{len(self.type_counts)}"
        )


def scan_directory(path: str | os.PathLike[str]) -> FileStatistics:
    """Count the readable files directly inside ``path`` by suffix.

    Hidden files are included; subdirectories are not descended into.
    """
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(f"no such directory: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    counts: Counter[str] = Counter()
    with os.scandir(root) as entries:
        for entry in entries:
            if entry.is_file() and os.access(entry.path, os.R_OK):
                counts[_suffix(entry.name)] += 1

    return FileStatistics(
        path=str(root),
        total=sum(counts.values()),
        type_counts=dict(sorted(counts.items())),
    )