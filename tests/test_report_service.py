from __future__ import annotations

from datetime import date, datetime

from src.workly.workly.core.enums import LegacyStatus
from src.workly.workly.reports.service import UNKNOWN_ICON, WorkReportService
from src.workly.workly.status.model import DailyWorkStatus
from src.workly.workly.storage.memory import InMemoryStore


def _store():
    store = InMemoryStore()
    store.set_daily_work_status_for_date(
        date(2025, 1, 6),
        DailyWorkStatus(
            status=LegacyStatus.DU_CONG,
            vao_log_time=datetime(2025, 1, 6, 8, 0),
            ra_log_time=datetime(2025, 1, 6, 19, 0),
            standard_hours_scheduled=8.0,
            ot_hours_scheduled=2.0,
            total_hours_scheduled=10.0,
        ),
    )
    store.set_daily_work_status_for_date(
        date(2025, 1, 7),
        DailyWorkStatus(
            status=LegacyStatus.DI_MUON,
            vao_log_time=datetime(2025, 1, 7, 8, 30),
            ra_log_time=datetime(2025, 1, 7, 17, 0),
            standard_hours_scheduled=7.5,
            total_hours_scheduled=7.5,
            late_minutes=30,
        ),
    )
    store.set_daily_work_status_for_date(
        date(2025, 1, 8),
        DailyWorkStatus(status=LegacyStatus.NGHI_PHEP, is_manual_override=True),
    )
    # outside the report range
    store.set_daily_work_status_for_date(
        date(2025, 1, 20),
        DailyWorkStatus(status=LegacyStatus.DU_CONG, total_hours_scheduled=8.0),
    )
    return store


def test_report_totals():
    report = WorkReportService(_store()).build_report(start=date(2025, 1, 6), end=date(2025, 1, 12))

    assert [r["date"] for r in report.rows] == ["2025-01-06", "2025-01-07", "2025-01-08"]
    assert report.summary["standard_hours"] == 15.5
    assert report.summary["ot_hours"] == 2.0
    assert report.summary["total_hours"] == 17.5
    assert report.summary["total_hhmm"] == "17:30"
    assert report.summary["late_minutes"] == 30
    assert report.summary["status_counts"] == {"DU_CONG": 1, "DI_MUON": 1, "NGHI_PHEP": 1}
    assert report.summary["days_recorded"] == 3


def test_report_rows_format_times_and_icons():
    rows = WorkReportService(_store()).build_report(start=date(2025, 1, 6), end=date(2025, 1, 8)).rows

    assert rows[0]["check_in"] == "08:00"
    assert rows[0]["worked_hours"] == "10:00"
    assert rows[0]["icon"] == "✅"
    assert rows[1]["icon"] == "❗"
    assert rows[2]["check_in"] == "-"
    assert rows[2]["icon"] == "🛌"
    assert rows[2]["manual"] is True


def test_weekly_grid_marks_future_days_pending():
    cells = WorkReportService(_store()).weekly_grid(week_start=date(2025, 1, 6), today=date(2025, 1, 9))

    assert len(cells) == 7
    assert cells[0] == {"date": "2025-01-06", "status": "DU_CONG", "icon": "✅"}
    assert cells[3] == {"date": "2025-01-09", "status": None, "icon": UNKNOWN_ICON}
    assert cells[4]["status"] == LegacyStatus.PENDING.value


def test_weekly_grid_shows_day_off_icon():
    store = _store()
    store.set_daily_work_status_for_date(date(2025, 1, 12), DailyWorkStatus(status=LegacyStatus.DAY_OFF))

    cells = WorkReportService(store).weekly_grid(week_start=date(2025, 1, 6), today=date(2025, 1, 12))

    assert cells[6] == {"date": "2025-01-12", "status": "day_off", "icon": "💤"}
