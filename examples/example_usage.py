"""Ví dụ: dùng service layer (không qua Flask).

Một ngày làm việc với nút chấm công đa năng, lưu trong bộ nhớ.
"""

from datetime import datetime

from src.workly.workly.container import build_container
from src.workly.workly.core.exceptions import RapidPressDetected


def main():
    container = build_container(storage_backend="memory")
    shift = container.shift_service.create_shift(
        {
            "id": "day",
            "name": "Hành chính",
            "start_time": "08:00",
            "office_end_time": "17:00",
            "end_time": "19:00",
            "break_minutes": 60,
        }
    )
    container.shift_service.set_active_shift(shift.shift_id)

    work = container.work_service
    for hour, minute in [(8, 0), (8, 5), (18, 30), (18, 35)]:
        now = datetime(2025, 1, 6, hour, minute)
        state = work.get_button_state(now=now)
        try:
            record = work.handle_button_press(state, now=now)
        except RapidPressDetected as e:
            print("rapid press:", e.signal.to_dict())
            continue
        print(now.strftime("%H:%M"), state.value, record.status.value if record else None)

    report = container.report_service.build_report(start=datetime(2025, 1, 6).date(), end=datetime(2025, 1, 12).date())
    print(report.summary)


if __name__ == "__main__":
    main()
