"""Preview of files grouped by size range, with per-file selection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from fileclassifier.preview import GroupedPreview, SelectableItem, SelectionGroup, match_folder

WINDOW_TITLE = "文件体积分类预览"
HEADER_TEXT = "文件体积分类预览 (点击按钮可切换文件选中状态)"

KB = 1024
MB = KB * 1024
GB = MB * 1024

_FOLDER_RULES = (
    ("小文件", "small_files"),
    ("中等文件", "medium_files"),
    ("大文件", "large_files"),
    ("超大文件", "huge_files"),
    ("KB", "kb_files"),
    ("MB", "mb_files"),
    ("GB", "gb_files"),
)


@dataclass(frozen=True)
class FileInfo:
    """A file's name, size in bytes and optional path."""

    file_name: str
    file_size: int = 0
    file_path: str = ""


def format_file_size(size: int) -> str:
    """Render a byte count as B, KB, MB or GB with two decimals above bytes."""
    for unit, name in ((GB, "GB"), (MB, "MB"), (KB, "KB")):
        if size >= unit:
            return f"{size / unit:.2f} {name}"
    return f"{size} B"


def default_size_folder_name(size_range: str) -> str:
    """Return the suggested target folder name for a size range label."""
    return match_folder(size_range, _FOLDER_RULES) or size_range.lower().replace(" ", "_")


@dataclass
class FileSizeItem(SelectableItem):
    """A single sized file entry whose selection can be toggled."""

    info: FileInfo
    selected: bool = True

    @property
    def file_name(self) -> str:
        return self.info.file_name

    @property
    def file_size(self) -> int:
        return self.info.file_size

    def toggle(self) -> bool:
        """Flip the selection state and return the new state."""
        return super().toggle()

    def label(self) -> str:
        """File name followed by its formatted size."""
        return f"{self.file_name} ({format_file_size(self.file_size)})"

    def tooltip(self) -> str:
        """Two-line description of the file and its size."""
        return f"文件: {self.file_name}\n大小: {format_file_size(self.file_size)}"


class FileSizeGroup(SelectionGroup[FileSizeItem]):
    """All files in one size range, their selection state and target folder."""

    def __init__(self, size_range: str, files: Iterable[FileInfo]) -> None:
        self.size_range = size_range
        self.files = list(files)
        super().__init__(
            (FileSizeItem(info) for info in self.files), default_size_folder_name(size_range)
        )

    def title(self) -> str:
        """Heading text for the group."""
        return f"文件体积: {self.size_range} ({len(self.files)}个文件)"

    def selected_files(self) -> list[FileInfo]:
        """Selected files, in the order they were given."""
        return [item.info for item in self._selected_items()]

    def select_all(self) -> None:
        """Select every file in the size range."""
        super().select_all()

    def deselect_all(self) -> None:
        """Deselect every file in the size range."""
        super().deselect_all()

    def toggle(self, file_name: str) -> bool:
        """Toggle the named file's selection and return its new state."""
        return super().toggle(file_name)

    def describe(self, file_name: str) -> str:
        """Message describing a file chosen from the group."""
        item = self._item(file_name)
        return (
            f"您选择了文件:\n文件名: {item.file_name}\n"
            f"大小: {format_file_size(item.file_size)}\n"
            f"体积分类: {self.size_range}"
        )


@dataclass
class SizePreview(GroupedPreview[FileSizeGroup]):
    """A set of size range groups shown side by side."""

    title: str = WINDOW_TITLE
    _group_type = FileSizeGroup

    def set_file_data(self, file_size_data: Mapping[str, Iterable[FileInfo]]) -> None:
        """Replace the groups with one per size range, ordered by range name."""
        self._load(file_size_data)

    def select_all(self) -> None:
        """Select every file in every size group."""
        super().select_all()

    def deselect_all(self) -> None:
        """Deselect every file in every size group."""
        super().deselect_all()