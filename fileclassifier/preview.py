"""Preview of files grouped by type, with per-file selection.

Also holds the selection machinery shared by the size and time previews.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

SELECTED_TEXT = "已选中"
UNSELECTED_TEXT = "未选中"
WINDOW_TITLE = "文件分类预览"
HEADER_TEXT = "文件分类预览 (点击按钮可切换文件选中状态)"
GROUP_WIDTH = 340

_FOLDER_RULES = (
    ("文本", "txt"),
    ("Word", "doc"),
    ("PDF", "pdf"),
    ("图片", "images"),
    ("Excel", "xls"),
)


def match_folder(label: str, rules: Iterable[tuple[str | tuple[str, ...], str]]) -> str | None:
    """Return the folder of the first rule with a marker found in ``label``."""
    for markers, folder in rules:
        if isinstance(markers, str):
            markers = (markers,)
        if any(marker in label for marker in markers):
            return folder
    return None


def default_folder_name(file_type: str) -> str:
    """Return the suggested target folder name for a file type label."""
    return match_folder(file_type, _FOLDER_RULES) or file_type.lower()


class SelectableItem:
    """Behaviour shared by every file entry with a selection button."""

    file_name: str
    selected: bool

    def toggle(self) -> bool:
        """Flip the selection state and return the new state."""
        self.selected = not self.selected
        return self.selected

    def button_text(self) -> str:
        """Text shown on the item's selection button."""
        return SELECTED_TEXT if self.selected else UNSELECTED_TEXT


ItemT = TypeVar("ItemT", bound=SelectableItem)


class SelectionGroup(Generic[ItemT]):
    """A column of items, their selection state and a target folder name."""

    def __init__(self, items: Iterable[ItemT], folder_name: str) -> None:
        self.items: list[ItemT] = list(items)
        self._selection = {item.file_name: True for item in self.items}
        self._folder_name = folder_name

    @property
    def folder_name(self) -> str:
        """The target folder name, with surrounding whitespace removed."""
        return self._folder_name.strip()

    @folder_name.setter
    def folder_name(self, value: str) -> None:
        self._folder_name = value

    def _selected_items(self) -> Iterator[ItemT]:
        return (item for item in self.items if self._selection.get(item.file_name, False))

    def _flip(self, item: ItemT) -> None:
        self._selection[item.file_name] = item.toggle()

    def select_all(self) -> None:
        """Select every file in the group."""
        for item in self.items:
            if not item.selected:
                self._flip(item)

    def deselect_all(self) -> None:
        """Deselect every file in the group."""
        for item in self.items:
            if item.selected:
                self._flip(item)

    def _item(self, file_name: str) -> ItemT:
        for item in self.items:
            if item.file_name == file_name:
                return item
        raise KeyError(file_name)

    def toggle(self, file_name: str) -> bool:
        """Toggle the named file's selection and return its new state."""
        item = self._item(file_name)
        self._flip(item)
        return item.selected


GroupT = TypeVar("GroupT", bound=SelectionGroup)


@dataclass
class GroupedPreview(Generic[GroupT]):
    """Groups shown side by side, each built by the subclass's group type."""

    groups: list[GroupT] = field(default_factory=list)
    title: str = ""

    def _load(self, data: Mapping[str, Iterable[Any]]) -> None:
        self.groups = [self._group_type(label, data[label]) for label in sorted(data)]

    @property
    def min_width(self) -> int:
        """Minimum width needed to lay out all groups."""
        return len(self.groups) * GROUP_WIDTH

    def select_all(self) -> None:
        """Select every file in every group."""
        for group in self.groups:
            group.select_all()

    def deselect_all(self) -> None:
        """Deselect every file in every group."""
        for group in self.groups:
            group.deselect_all()


@dataclass
class FileItem(SelectableItem):
    """A single file entry whose selection can be toggled."""

    file_name: str
    selected: bool = True

    def toggle(self) -> bool:
        """Flip the selection state and return the new state."""
        return super().toggle()

    def button_text(self) -> str:
        """Text shown on the item's selection button."""
        return super().button_text()


class FileTypeGroup(SelectionGroup[FileItem]):
    """All files of one type, their selection state and target folder."""

    def __init__(self, file_type: str, files: Iterable[str]) -> None:
        self.file_type = file_type
        self.files = list(files)
        super().__init__((FileItem(name) for name in self.files), default_folder_name(file_type))

    def title(self) -> str:
        """Heading text for the group."""
        return f"文件类型: {self.file_type} ({len(self.files)}个文件)"

    def selected_files(self) -> list[str]:
        """Names of the selected files, in sorted order."""
        return sorted({item.file_name for item in self._selected_items()})

    def select_all(self) -> None:
        """Select every file of this type."""
        super().select_all()

    def deselect_all(self) -> None:
        """Deselect every file of this type."""
        super().deselect_all()

    def toggle(self, file_name: str) -> bool:
        """Toggle the named file's selection and return its new state."""
        return super().toggle(file_name)

    def describe(self, file_name: str) -> str:
        """Message describing a file chosen from the group."""
        item = self._item(file_name)
        return f"您选择了文件:\n{item.file_name}\n文件类型: {self.file_type}"


@dataclass
class Preview(GroupedPreview[FileTypeGroup]):
    """A set of file type groups shown side by side."""

    title: str = WINDOW_TITLE
    _group_type = FileTypeGroup

    def set_file_data(self, file_type_data: Mapping[str, Iterable[str]]) -> None:
        """Replace the groups with one per file type, ordered by type name."""
        self._load(file_type_data)

    def select_all(self) -> None:
        """Select every file in every type group."""
        super().select_all()

    def deselect_all(self) -> None:
        """Deselect every file in every type group."""
        super().deselect_all()