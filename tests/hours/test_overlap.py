from datetime import date, datetime, timezone

from src.workly.workly.hours.overlap import night_overlap_minutes, overlap_minutes


def test_overnight_interval_covers_whole_night_window():
    minutes = night_overlap_minutes(
        datetime(2025, 1, 6, 20, 0),
        datetime(2025, 1, 7, 8, 0),
        date(2025, 1, 6),
    )

    assert minutes == 480


def test_day_interval_has_no_night_minutes():
    minutes = night_overlap_minutes(
        datetime(2025, 1, 6, 9, 0),
        datetime(2025, 1, 6, 17, 0),
        date(2025, 1, 6),
    )

    assert minutes == 0


def test_partial_evening_overlap_keeps_timezone():
    minutes = night_overlap_minutes(
        datetime(2025, 1, 6, 18, 0, tzinfo=timezone.utc),
        datetime(2025, 1, 6, 23, 30, tzinfo=timezone.utc),
        date(2025, 1, 6),
    )

    assert minutes == 90


def test_empty_or_reversed_interval_is_zero():
    start = datetime(2025, 1, 6, 23, 0)

    assert night_overlap_minutes(start, start, date(2025, 1, 6)) == 0
    assert night_overlap_minutes(start, datetime(2025, 1, 6, 22, 0), date(2025, 1, 6)) == 0


def test_disjoint_intervals_do_not_overlap():
    assert overlap_minutes(
        datetime(2025, 1, 6, 8, 0),
        datetime(2025, 1, 6, 9, 0),
        datetime(2025, 1, 6, 10, 0),
        datetime(2025, 1, 6, 11, 0),
    ) == 0
