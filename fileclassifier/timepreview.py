"""Preview of files grouped by modification time, with per-file selection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from fileclassifier.preview import GroupedPreview, SelectableItem, SelectionGroup, match_folder

WINDOW_TITLE = "文件修改时间分类预览"
HEADER_TEXT = "文件修改时间分类预览 (点击按钮可切换文件选中状态)"

FULL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_FOLDER_RULES = (
    (("今天", "天内"), "today_files"),
    (("本周", "周内"), "this_week"),
    (("本月", "月内"), "this_month"),
    (("本年", "年内"), "this_year"),
    ("更早", "older_files"),
    ("昨天", "yesterday_files"),
    ("上周", "last_week"),
    ("上月", "last_month"),
)


@dataclass(frozen=True)
class FileTimeInfo:
    """A file's name, modification time, optional path and size in bytes."""

    file_name: str
    modified_time: datetime
    file_path: str = ""
    file_size: int = 0


def format_modified_time(modified: datetime, today: date | None = None) -> str:
    """Render a modification time relative to ``today``.

    Today and yesterday show the time of day, other dates in the same year
    show month, day and time, and older years show the full date.
    """
    if today is None:
        today = date.today()
    file_date = modified.date()
    if file_date == today:
        return f"今天 {modified:%H:%M}"
    if file_date == today - timedelta(days=1):
        return f"昨天 {modified:%H:%M}"
    if file_date.year == today.year:
        return f"{modified:%m-%d %H:%M}"
    return f"{modified:%Y-%m-%d}"


def default_time_folder_name(time_range: str) -> str:
    """Return the suggested target folder name for a time range label."""
    folder = match_folder(time_range, _FOLDER_RULES)
    if folder is not None:
        return folder
    return time_range.lower().replace(" ", "_").replace("(", "").replace(")", "")


@dataclass
class FileTimeItem(SelectableItem):
    """A single dated file entry whose selection can be toggled."""

    info: FileTimeInfo
    selected: bool = True

    @property
    def file_name(self) -> str:
        return self.info.file_name

    @property
    def modified_time(self) -> datetime:
        return self.info.modified_time

    def toggle(self) -> bool:
        """Flip the selection state and return the new state."""
        return super().toggle()

    def label(self, today: date | None = None) -> str:
        """File name on one line, relative modification time on the next."""
        return f"{self.file_name}\n{format_modified_time(self.modified_time, today)}"

    def tooltip(self) -> str:
        """Two-line description of the file and its full modification time."""
        return f"文件: {self.file_name}\n修改时间: {self.modified_time.strftime(FULL_TIME_FORMAT)}"


class FileTimeGroup(SelectionGroup[FileTimeItem]):
    """All files in one time range, their selection state and target folder."""

    def __init__(self, time_range: str, files: Iterable[FileTimeInfo]) -> None:
        self.time_range = time_range
        self.files = list(files)
        super().__init__(
            (FileTimeItem(info) for info in self.files), default_time_folder_name(time_range)
        )

    def title(self) -> str:
        """Heading text for the group."""
        return f"修改时间: {self.time_range} ({len(self.files)}个文件)"

    def selected_files(self) -> list[FileTimeInfo]:
        """Selected files, in the order they were given."""
        return [item.info for item in self._selected_items()]

    def select_all(self) -> None:
        """Select every file in the time range."""
        super().select_all()

    def deselect_all(self) -> None:
        """Deselect every file in the time range."""
        super().deselect_all()

    def toggle(self, file_name: str) -> bool:
        """Toggle the named file's selection and return its new state."""
        return super().toggle(file_name)

    def describe(self, file_name: str) -> str:
        """Message describing a file chosen from the group."""
        item = self._item(file_name)
        return (
            f"您选择了文件:\n文件名: {item.file_name}\n"
            f"修改时间: {item.modified_time.strftime(FULL_TIME_FORMAT)}\n"
            f"时间分类: {self.time_range}"
        )


@dataclass
class TimePreview(GroupedPreview[FileTimeGroup]):
    """A set of time range groups shown side by side."""

    title: str = WINDOW_TITLE
    _group_type = FileTimeGroup

    def set_file_data(self, file_time_data: Mapping[str, Iterable[FileTimeInfo]]) -> None:
        """Replace the groups with one per time range, ordered by range name."""
        self._load(file_time_data)

    def select_all(self) -> None:
        """Select every file in every time group."""
        super().select_all()

    def deselect_all(self) -> None:
        """Deselect every file in every time group."""
        super().deselect_all()