from datetime import date

from src.workly.workly.core.enums import LegacyStatus
from src.workly.workly.status.day_off import DayOffService
from src.workly.workly.status.model import DailyWorkStatus
from src.workly.workly.storage.memory import InMemoryStore


def test_sundays_are_marked_unless_already_recorded():
    store = InMemoryStore()
    store.set_daily_work_status_for_date(date(2025, 1, 12), DailyWorkStatus(status=LegacyStatus.DU_CONG))
    store.set_daily_work_status_for_date(date(2025, 1, 19), DailyWorkStatus(status=LegacyStatus.PENDING))

    marked = DayOffService(store).set_sundays_as_day_off(date(2025, 1, 1), date(2025, 1, 31))

    assert marked == [date(2025, 1, 5), date(2025, 1, 19), date(2025, 1, 26)]
    assert store.get_daily_work_status_for_date(date(2025, 1, 12)).status == LegacyStatus.DU_CONG
    day_off = store.get_daily_work_status_for_date(date(2025, 1, 19))
    assert day_off.status == LegacyStatus.DAY_OFF
    assert day_off.is_manual_override is False
    assert store.get_daily_work_status_for_date(date(2025, 1, 6)) is None
