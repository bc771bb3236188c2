from datetime import date, datetime

import pytest

from fileclassifier.preview import GROUP_WIDTH, SELECTED_TEXT, UNSELECTED_TEXT
from fileclassifier.timepreview import (
    FULL_TIME_FORMAT,
    WINDOW_TITLE,
    FileTimeGroup,
    FileTimeInfo,
    FileTimeItem,
    TimePreview,
    default_time_folder_name,
    format_modified_time,
)

TODAY = date(2024, 5, 10)


def _files():
    return [
        FileTimeInfo("report_draft.pdf", datetime(2024, 5, 9, 14, 0), "/reports/report_draft.pdf"),
        FileTimeInfo("backup_config.ini", datetime(2024, 5, 9, 10, 0), "/config/backup_config.ini"),
        FileTimeInfo("photo_edit.jpg", datetime(2024, 5, 9, 16, 0), "/images/photo_edit.jpg"),
    ]


def test_format_today():
    assert format_modified_time(datetime(2024, 5, 10, 14, 30), TODAY) == "今天 14:30"


def test_format_yesterday_uses_prefix_and_time():
    text = format_modified_time(datetime(2024, 5, 9, 14, 30), TODAY)
    assert text.startswith("昨天 ")
    assert text.endswith("14:30")


def test_format_same_year():
    assert format_modified_time(datetime(2024, 3, 2, 8, 5), TODAY) == "03-02 08:05"


def test_format_older_year_shows_date_only():
    assert format_modified_time(datetime(2023, 12, 15, 16, 30), TODAY) == "2023-12-15"


def test_format_defaults_to_current_date():
    now = datetime.now()
    assert format_modified_time(now).startswith("今天 ")


@pytest.mark.parametrize(
    "label, folder",
    [
        ("今天 (5个文件)", "today_files"),
        ("昨天 (4个文件)", "yesterday_files"),
        ("本周 (5个文件)", "this_week"),
        ("本月 (6个文件)", "this_month"),
        ("上月 (3个文件)", "last_month"),
        ("更早 (3个文件)", "older_files"),
        ("本年", "this_year"),
        ("上周", "last_week"),
    ],
)
def test_default_folder_names(label, folder):
    assert default_time_folder_name(label) == folder


def test_default_folder_name_fallback_cleans_label():
    name = default_time_folder_name("Some Range (X)")
    assert " " not in name and "(" not in name and ")" not in name
    assert name == name.lower()


def test_default_folder_name_fallback_plain():
    assert default_time_folder_name("Recent") == "recent"


def test_item_toggle_and_button_text():
    item = FileTimeItem(_files()[0])
    assert item.button_text() == SELECTED_TEXT
    assert item.toggle() is False
    assert item.button_text() == UNSELECTED_TEXT
    assert item.toggle() is True


def test_item_label_has_name_and_relative_time():
    info = _files()[0]
    lines = FileTimeItem(info).label(TODAY).splitlines()
    assert lines[0] == info.file_name
    assert lines[1] == format_modified_time(info.modified_time, TODAY)


def test_item_tooltip_round_trips_time():
    info = _files()[1]
    first, second = FileTimeItem(info).tooltip().splitlines()
    assert first == f"文件: {info.file_name}"
    prefix = "修改时间: "
    assert second.startswith(prefix)
    assert datetime.strptime(second[len(prefix):], FULL_TIME_FORMAT) == info.modified_time


def test_group_title_and_folder():
    group = FileTimeGroup("昨天 (4个文件)", _files())
    assert group.title() == "修改时间: 昨天 (4个文件) (3个文件)"
    assert group.folder_name == "yesterday_files"
    group.folder_name = "  custom  "
    assert group.folder_name == "custom"


def test_group_starts_all_selected_in_order():
    files = _files()
    group = FileTimeGroup("昨天", files)
    assert group.selected_files() == files


def test_group_toggle_and_bulk_selection():
    files = _files()
    group = FileTimeGroup("昨天", files)
    assert group.toggle("backup_config.ini") is False
    assert group.selected_files() == [files[0], files[2]]
    group.deselect_all()
    assert group.selected_files() == []
    assert all(not item.selected for item in group.items)
    group.select_all()
    assert group.selected_files() == files


def test_group_unknown_file_raises():
    group = FileTimeGroup("昨天", _files())
    with pytest.raises(KeyError):
        group.toggle("missing.txt")
    with pytest.raises(KeyError):
        group.describe("missing.txt")


def test_group_describe():
    info = _files()[2]
    group = FileTimeGroup("昨天", _files())
    lines = group.describe(info.file_name).splitlines()
    assert lines[0] == "您选择了文件:"
    assert lines[1] == f"文件名: {info.file_name}"
    assert datetime.strptime(lines[2][len("修改时间: "):], FULL_TIME_FORMAT) == info.modified_time
    assert lines[3] == "时间分类: 昨天"


def test_preview_orders_groups_and_bulk_selects():
    preview = TimePreview()
    assert preview.title == WINDOW_TITLE
    files = _files()
    preview.set_file_data({"b": files[:1], "a": files[1:]})
    assert [g.time_range for g in preview.groups] == ["a", "b"]
    assert preview.min_width == 2 * GROUP_WIDTH
    preview.deselect_all()
    assert all(g.selected_files() == [] for g in preview.groups)
    preview.select_all()
    assert sum(len(g.selected_files()) for g in preview.groups) == len(files)


def test_preview_set_file_data_replaces_groups():
    preview = TimePreview()
    preview.set_file_data({"a": _files(), "b": []})
    preview.set_file_data({"c": _files()})
    assert [g.time_range for g in preview.groups] == ["c"]