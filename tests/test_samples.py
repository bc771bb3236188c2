from datetime import datetime, timedelta

import pytest

from fileclassifier.preview import default_folder_name
from fileclassifier.samples import sample_size_data, sample_time_data, sample_type_data
from fileclassifier.sizepreview import GB, KB, MB
from fileclassifier.timepreview import default_time_folder_name

NOW = datetime(2024, 5, 15, 12, 0)


def test_type_data_folder_names():
    folders = {default_folder_name(key) for key in sample_type_data()}
    assert folders == {"txt", "doc", "pdf", "images", "xls"}


def test_type_data_text_files_are_txt():
    data = sample_type_data()
    assert all(name.endswith(".txt") for name in data["文本文件"])
    assert all(name.endswith(".pdf") for name in data["PDF文件"])


def test_size_data_ranges_hold():
    data = sample_size_data()
    assert all(f.file_size < KB for f in data["小文件 (< 1KB)"])
    assert all(KB <= f.file_size < MB for f in data["中等文件 (1KB - 1MB)"])
    assert all(MB <= f.file_size <= 100 * MB for f in data["大文件 (1MB - 100MB)"])
    assert all(f.file_size > 100 * MB for f in data["超大文件 (> 100MB)"])


def test_size_data_paths_end_with_name():
    for files in sample_size_data().values():
        for info in files:
            assert info.file_path.endswith("/" + info.file_name)


def test_size_data_huge_vdi_is_eight_gb():
    huge = {f.file_name: f.file_size for f in sample_size_data()["超大文件 (> 100MB)"]}
    assert huge["virtual_machine.vdi"] == 8 * GB


def test_time_data_labels_match_counts():
    for label, files in sample_time_data(NOW).items():
        assert f"({len(files)}个文件)" in label


def test_time_data_today_and_yesterday():
    data = sample_time_data(NOW)
    assert all(f.modified_time.date() == NOW.date() for f in data["今天 (5个文件)"])
    yesterday = NOW.date() - timedelta(days=1)
    assert all(f.modified_time.date() == yesterday for f in data["昨天 (4个文件)"])


def test_time_data_week_and_month():
    data = sample_time_data(NOW)
    monday = NOW.date() - timedelta(days=NOW.isoweekday() - 1)
    assert all(f.modified_time.date() >= monday for f in data["本周 (5个文件)"])
    assert all(f.modified_time.month == NOW.month for f in data["本月 (6个文件)"])
    assert all(f.modified_time.month == NOW.month - 1 for f in data["上月 (3个文件)"])


def test_time_data_last_month_wraps_year():
    january = datetime(2024, 1, 10, 12, 0)
    data = sample_time_data(january)
    assert all(f.modified_time.year == january.year - 1 for f in data["上月 (3个文件)"])


def test_time_data_older_files_fixed():
    older = sample_time_data(NOW)["更早 (3个文件)"]
    assert older[0].modified_time == datetime(2023, 12, 15, 16, 30)
    assert older[0].file_name == "annual_report_2023.pdf"


@pytest.mark.parametrize(
    "label, folder",
    [("今天 (5个文件)", "today_files"), ("更早 (3个文件)", "older_files"), ("上月 (3个文件)", "last_month")],
)
def test_time_data_labels_map_to_folders(label, folder):
    assert label in sample_time_data(NOW)
    assert default_time_folder_name(label) == folder