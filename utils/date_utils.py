"""日期工具模块

统计报表使用的月份窗口与时间格式化
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Union

DateLike = Union[date, datetime]


def month_key(value: DateLike) -> str:
    """返回 YYYY-MM 格式的月份标识"""
    return f"{value.year:04d}-{value.month:02d}"


def shift_months(value: date, months: int) -> date:
    """按月平移日期

    与 SQLite date(value, '+N month') 一致：日不变，超出目标月天数时顺延到下个月，
    例如 3月31日 减一个月得到 3月2日或3月3日。
    """
    total = value.year * 12 + (value.month - 1) + months
    year, month = divmod(total, 12)
    return date(year, month + 1, 1) + timedelta(days=value.day - 1)


def trailing_months(today: DateLike, count: int = 12) -> List[str]:
    """返回以当前月结尾的最近 count 个自然月，按时间升序"""
    first_of_month = date(today.year, today.month, 1)
    return [month_key(shift_months(first_of_month, -offset)) for offset in range(count - 1, -1, -1)]


def as_datetime(value: DateLike) -> datetime:
    """将日期转换为 UTC 时间，无时区的值按 UTC 处理"""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def to_iso_timestamp(value: DateLike) -> str:
    """格式化为带毫秒和 Z 后缀的 ISO-8601 时间，如 2022-03-01T00:00:00.000Z"""
    dt = as_datetime(value)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def midpoint(start: DateLike, end: DateLike) -> datetime:
    """返回起止时间的中点"""
    start_dt = as_datetime(start)
    end_dt = as_datetime(end)
    return start_dt + (end_dt - start_dt) / 2
