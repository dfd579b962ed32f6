from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta

from ..core.enums import LegacyStatus
from ..status.repository import DailyStatusRepository

WEEKLY_STATUS_ICONS = {
    LegacyStatus.COMPLETED: "✅",
    LegacyStatus.DU_CONG: "✅",
    LegacyStatus.MANUAL_COMPLETED: "✅",
    LegacyStatus.LATE: "❗",
    LegacyStatus.DI_MUON: "❗",
    LegacyStatus.EARLY: "⏰",
    LegacyStatus.VE_SOM: "⏰",
    LegacyStatus.DI_MUON_VE_SOM: "❗",
    LegacyStatus.ABSENT: "❌",
    LegacyStatus.VANG_MAT: "❌",
    LegacyStatus.MANUAL_PRESENT: "📩",
    LegacyStatus.CONG_TAC: "📩",
    LegacyStatus.MANUAL_ABSENT: "🛌",
    LegacyStatus.NGHI_PHEP: "🛌",
    LegacyStatus.NGHI_BENH: "🛌",
    LegacyStatus.MANUAL_HOLIDAY: "🎌",
    LegacyStatus.NGHI_LE: "🎌",
    LegacyStatus.MANUAL_REVIEW: "RV",
    LegacyStatus.RV: "RV",
    LegacyStatus.THIEU_LOG: "RV",
    LegacyStatus.DAY_OFF: "💤",
}
UNKNOWN_ICON = "❓"


def _hhmm(hours: float) -> str:
    minutes = int(round(hours * 60))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class WorkReport:
    rows: list[dict]
    summary: dict


class WorkReportService:
    def __init__(self, statuses: DailyStatusRepository):
        self._statuses = statuses

    def build_report(self, *, start: date, end: date) -> WorkReport:
        records = self._statuses.list_range(start=start, end=end)

        totals = {
            "standard_hours": 0.0,
            "ot_hours": 0.0,
            "sunday_hours": 0.0,
            "night_hours": 0.0,
            "total_hours": 0.0,
        }
        late_minutes = 0
        early_minutes = 0
        holiday_days = 0
        status_counts: Counter = Counter()
        rows: list[dict] = []

        for work_date in sorted(records):
            r = records[work_date]
            totals["standard_hours"] += r.standard_hours_scheduled
            totals["ot_hours"] += r.ot_hours_scheduled
            totals["sunday_hours"] += r.sunday_hours_scheduled
            totals["night_hours"] += r.night_hours_scheduled
            totals["total_hours"] += r.total_hours_scheduled
            late_minutes += r.late_minutes
            early_minutes += r.early_minutes
            holiday_days += 1 if r.is_holiday_work else 0
            status_counts[r.status.value] += 1

            rows.append(
                {
                    "date": work_date.strftime("%Y-%m-%d"),
                    "status": r.status.value,
                    "icon": WEEKLY_STATUS_ICONS.get(r.status, UNKNOWN_ICON),
                    "check_in": r.vao_log_time.strftime("%H:%M") if r.vao_log_time else "-",
                    "check_out": r.ra_log_time.strftime("%H:%M") if r.ra_log_time else "-",
                    "worked_hours": _hhmm(r.total_hours_scheduled),
                    "manual": r.is_manual_override,
                    "notes": r.notes or "",
                }
            )

        summary = {k: round(v, 2) for k, v in totals.items()}
        summary.update(
            {
                "total_hhmm": _hhmm(totals["total_hours"]),
                "late_minutes": late_minutes,
                "early_minutes": early_minutes,
                "holiday_work_days": holiday_days,
                "status_counts": dict(status_counts),
                "days_recorded": len(rows),
            }
        )
        return WorkReport(rows=rows, summary=summary)

    def weekly_grid(self, *, week_start: date, today: date) -> list[dict]:
        """Seven cells from week_start; days after today without a record show as pending."""
        records = self._statuses.list_range(start=week_start, end=week_start + timedelta(days=6))
        cells = []
        for offset in range(7):
            day = week_start + timedelta(days=offset)
            record = records.get(day)
            if record is not None:
                icon = WEEKLY_STATUS_ICONS.get(record.status, UNKNOWN_ICON)
                status = record.status.value
            else:
                icon = UNKNOWN_ICON
                status = LegacyStatus.PENDING.value if day > today else None
            cells.append({"date": day.strftime("%Y-%m-%d"), "status": status, "icon": icon})
        return cells
