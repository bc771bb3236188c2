"""Demonstration data for the type, size and time previews."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from fileclassifier.sizepreview import GB, KB, MB, FileInfo
from fileclassifier.timepreview import FileTimeInfo


def sample_type_data() -> dict[str, list[str]]:
    """File names grouped by type label."""
    return {
        "文本文件": [
            "document1.txt", "readme.txt", "notes.txt",
            "report.txt", "log.txt", "data.txt",
            "config.txt", "manual.txt", "info.txt",
        ],
        "Word文档": [
            "proposal.doc", "contract.docx", "letter.doc",
            "resume.docx", "report.doc", "manual.docx",
        ],
        "PDF文件": [
            "handbook.pdf", "guide.pdf", "specification.pdf",
            "tutorial.pdf", "brochure.pdf",
        ],
        "图片文件": [
            "photo1.jpg", "logo.png", "chart.jpg",
            "diagram.png", "screenshot.jpg", "icon.png",
            "banner.jpg", "thumbnail.png", "pp.png", "ioio.png",
            "kppppppppppppppppphnmmmmmmmmmmmmmmmmmk.png",
        ],
        "Excel文件": [
            "budget.xlsx", "data.xls", "report.xlsx",
            "analysis.xls", "summary.xlsx",
        ],
    }


def _sized(name: str, size: int) -> FileInfo:
    return FileInfo(name, size, f"/path/to/{name}")


def sample_size_data() -> dict[str, list[FileInfo]]:
    """Files with sizes, grouped by size range label."""
    return {
        "小文件 (< 1KB)": [
            _sized("config.ini", 256),
            _sized("readme.txt", 512),
            _sized("license.txt", 1000),
            _sized("version.info", 128),
            _sized("changelog.md", 800),
        ],
        "中等文件 (1KB - 1MB)": [
            _sized("document.doc", 50 * KB),
            _sized("presentation.ppt", 200 * KB),
            _sized("spreadsheet.xls", 150 * KB),
            _sized("report.pdf", 800 * KB),
            _sized("manual.pdf", 1000 * KB),
            _sized("data.csv", 75 * KB),
            _sized("script.py", 25 * KB),
        ],
        "大文件 (1MB - 100MB)": [
            _sized("video_sample.mp4", 25 * MB),
            _sized("audio_track.wav", 50 * MB),
            _sized("high_res_image.psd", 80 * MB),
            _sized("database_backup.sql", 45 * MB),
            _sized("software_installer.exe", 35 * MB),
            _sized("presentation_video.mov", 60 * MB),
        ],
        "超大文件 (> 100MB)": [
            _sized("movie_full_hd.mkv", int(1.5 * 1024 * 1024 * 1024)),
            _sized("system_image.iso", int(4.2 * 1024 * 1024 * 1024)),
            _sized("virtual_machine.vdi", int(8.0 * 1024 * 1024 * 1024)),
            _sized("game_archive.zip", int(2.8 * 1024 * 1024 * 1024)),
        ],
    }


def _previous_month_start(month_start: date) -> date:
    if month_start.month == 1:
        return date(month_start.year - 1, 12, 1)
    return date(month_start.year, month_start.month - 1, 1)


def sample_time_data(now: datetime | None = None) -> dict[str, list[FileTimeInfo]]:
    """Files with modification times relative to ``now``, grouped by period."""
    if now is None:
        now = datetime.now()
    today = datetime.combine(now.date(), time())
    yesterday = today - timedelta(days=1)
    this_week_start = today - timedelta(days=today.isoweekday() - 1)
    this_month_start = datetime.combine(today.date().replace(day=1), time())
    last_month_start = datetime.combine(_previous_month_start(this_month_start.date()), time())

    def at(base: datetime, days: int, hours: int) -> datetime:
        return base + timedelta(days=days, hours=hours)

    return {
        "今天 (5个文件)": [
            FileTimeInfo("current_work.docx", now - timedelta(hours=2), "/documents/current_work.docx"),
            FileTimeInfo("meeting_notes.txt", now - timedelta(hours=1), "/notes/meeting_notes.txt"),
            FileTimeInfo("project_update.xlsx", now - timedelta(minutes=30), "/projects/project_update.xlsx"),
            FileTimeInfo("temp_file.tmp", now - timedelta(minutes=15), "/temp/temp_file.tmp"),
            FileTimeInfo("log_today.log", now - timedelta(minutes=5), "/logs/log_today.log"),
        ],
        "昨天 (4个文件)": [
            FileTimeInfo("report_draft.pdf", at(yesterday, 0, 14), "/reports/report_draft.pdf"),
            FileTimeInfo("backup_config.ini", at(yesterday, 0, 10), "/config/backup_config.ini"),
            FileTimeInfo("photo_edit.jpg", at(yesterday, 0, 16), "/images/photo_edit.jpg"),
            FileTimeInfo("script_v2.py", at(yesterday, 0, 9), "/scripts/script_v2.py"),
        ],
        "本周 (5个文件)": [
            FileTimeInfo("weekly_summary.docx", at(this_week_start, 2, 15), "/documents/weekly_summary.docx"),
            FileTimeInfo("client_proposal.pptx", at(this_week_start, 1, 10), "/presentations/client_proposal.pptx"),
            FileTimeInfo("database_schema.sql", at(this_week_start, 3, 14), "/database/database_schema.sql"),
            FileTimeInfo("test_results.csv", at(this_week_start, 4, 11), "/data/test_results.csv"),
            FileTimeInfo("user_manual.pdf", at(this_week_start, 2, 9), "/docs/user_manual.pdf"),
        ],
        "本月 (6个文件)": [
            FileTimeInfo("monthly_report.xlsx", at(this_month_start, 5, 14), "/reports/monthly_report.xlsx"),
            FileTimeInfo("system_backup.zip", at(this_month_start, 10, 2), "/backups/system_backup.zip"),
            FileTimeInfo("invoice_template.docx", at(this_month_start, 15, 16), "/templates/invoice_template.docx"),
            FileTimeInfo("conference_video.mp4", at(this_month_start, 8, 10), "/videos/conference_video.mp4"),
            FileTimeInfo("budget_analysis.xlsx", at(this_month_start, 12, 13), "/finance/budget_analysis.xlsx"),
            FileTimeInfo("design_mockup.psd", at(this_month_start, 18, 11), "/design/design_mockup.psd"),
        ],
        "上月 (3个文件)": [
            FileTimeInfo("archive_data.zip", at(last_month_start, 20, 10), "/archive/archive_data.zip"),
            FileTimeInfo("old_config.conf", at(last_month_start, 25, 14), "/config/old_config.conf"),
            FileTimeInfo("expired_logs.log", at(last_month_start, 28, 8), "/logs/expired_logs.log"),
        ],
        "更早 (3个文件)": [
            FileTimeInfo("annual_report_2023.pdf", datetime(2023, 12, 15, 16, 30), "/reports/annual_report_2023.pdf"),
            FileTimeInfo("foundation_docs.rar", datetime(2023, 6, 1, 9, 0), "/archive/foundation_docs.rar"),
            FileTimeInfo("legacy_system.exe", datetime(2022, 8, 20, 14, 15), "/systems/legacy_system.exe"),
        ],
    }