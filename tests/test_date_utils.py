"""
日期工具测试
"""
from datetime import date, datetime, timedelta, timezone

from utils.date_utils import midpoint, month_key, shift_months, to_iso_timestamp, trailing_months


def test_month_key():
    assert month_key(date(2024, 3, 5)) == "2024-03"
    assert month_key(datetime(999, 12, 1)) == "0999-12"


def test_shift_months_overflows_like_sqlite():
    assert shift_months(date(2024, 3, 15), -1) == date(2024, 2, 15)
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 3, 2)
    assert shift_months(date(2023, 3, 31), -1) == date(2023, 3, 3)
    assert shift_months(date(2024, 1, 10), -1) == date(2023, 12, 10)
    assert shift_months(date(2023, 11, 30), 3) == date(2024, 3, 1)


def test_trailing_months_crosses_year():
    assert trailing_months(date(2024, 2, 29), 3) == ["2023-12", "2024-01", "2024-02"]
    assert len(trailing_months(date(2024, 2, 29))) == 12


def test_iso_timestamp_format():
    assert to_iso_timestamp(date(2022, 3, 1)) == "2022-03-01T00:00:00.000Z"
    assert to_iso_timestamp(datetime(2022, 3, 1, 12, 30, 5, 123456)) == "2022-03-01T12:30:05.123Z"

    shanghai = timezone(timedelta(hours=8))
    assert to_iso_timestamp(datetime(2022, 3, 1, 8, 0, tzinfo=shanghai)) == "2022-03-01T00:00:00.000Z"


def test_midpoint():
    mid = midpoint(date(2022, 1, 1), date(2023, 1, 1))

    assert mid == datetime(2022, 7, 2, 12, 0, tzinfo=timezone.utc)
    assert to_iso_timestamp(mid) == "2022-07-02T12:00:00.000Z"


def test_trailing_months_from_month_end():
    assert trailing_months(datetime(2024, 3, 31, 23, 59, tzinfo=timezone.utc), 2) == ["2024-02", "2024-03"]
    assert trailing_months(date(2024, 12, 1), 13)[0] == "2023-12"
