from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.classifier import AttendanceClassifier
from .attendance.factory import HoursStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceLogRepository
from .attendance.repository import AttendanceLogRepository
from .attendance.service import WorkService
from .database.connection import DBConfig, DatabaseConnection
from .notes.mysql_note_repository import MySQLNoteRepository
from .notes.repository import NoteRepository
from .notes.service import NoteService
from .reports.service import WorkReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .status.day_off import DayOffService
from .status.manual import ManualOverrideResolver
from .status.mysql_daily_status_repository import MySQLDailyStatusRepository
from .status.repository import DailyStatusRepository
from .status.service import DayStatusService
from .storage.memory import InMemoryStore


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    shifts_repo: ShiftRepository
    settings_repo: SettingsRepository
    logs_repo: AttendanceLogRepository
    statuses_repo: DailyStatusRepository
    notes_repo: NoteRepository

    shift_service: ShiftService
    settings_service: SettingsService
    work_service: WorkService
    day_status_service: DayStatusService
    day_off_service: DayOffService
    report_service: WorkReportService
    note_service: NoteService


def build_container(
    *,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    store: Optional[InMemoryStore] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None
    if storage_backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        shifts_repo = MySQLShiftRepository(conn)
        settings_repo = MySQLSettingsRepository(conn)
        logs_repo = MySQLAttendanceLogRepository(conn)
        statuses_repo = MySQLDailyStatusRepository(conn)
        notes_repo = MySQLNoteRepository(conn)
    elif storage_backend == "memory":
        store = store or InMemoryStore()
        shifts_repo = settings_repo = logs_repo = statuses_repo = notes_repo = store
    else:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    classifier = AttendanceClassifier(strategy_factory=HoursStrategyFactory())
    shift_service = ShiftService(shifts_repo, settings_repo, statuses_repo)
    work_service = WorkService(logs_repo, statuses_repo, settings_repo, shift_service, classifier=classifier)
    day_status_service = DayStatusService(
        statuses_repo,
        logs_repo,
        settings_repo,
        shift_service,
        resolver=ManualOverrideResolver(classifier),
    )

    return Container(
        conn=conn,
        shifts_repo=shifts_repo,
        settings_repo=settings_repo,
        logs_repo=logs_repo,
        statuses_repo=statuses_repo,
        notes_repo=notes_repo,
        shift_service=shift_service,
        settings_service=SettingsService(settings_repo, shifts_repo),
        work_service=work_service,
        day_status_service=day_status_service,
        day_off_service=DayOffService(statuses_repo),
        report_service=WorkReportService(statuses_repo),
        note_service=NoteService(notes_repo, shifts=shifts_repo),
    )
