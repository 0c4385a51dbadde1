"""Time utility tools for MCP server."""

from datetime import datetime
from typing import Optional

import pytz

KOREAN_WEEKDAYS = ["월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"]

EXAMPLE_TIMEZONES = ["Asia/Seoul", "America/New_York", "Europe/London", "UTC"]


def _korean_clock(dt: datetime, padded: bool) -> str:
    meridiem = "오전" if dt.hour < 12 else "오후"
    hour = dt.hour % 12 or 12
    if padded:
        return f"{meridiem} {hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    return f"{meridiem} {hour}:{dt.minute:02d}:{dt.second:02d}"


def korean_date(dt: datetime) -> str:
    """Short Korean date, e.g. '2026. 10. 19.'"""
    return f"{dt.year}. {dt.month}. {dt.day}."


def korean_time(dt: datetime) -> str:
    """Short Korean time, e.g. '오후 3:04:05'"""
    return _korean_clock(dt, padded=False)


def korean_datetime(dt: datetime) -> str:
    """Short Korean date and time, e.g. '2026. 10. 19. 오후 3:04:05'"""
    return f"{korean_date(dt)} {korean_time(dt)}"


def korean_long_datetime(dt: datetime) -> str:
    """Long Korean form with weekday, e.g. '2026. 10. 19. 월요일 오후 03:04:05'"""
    return (
        f"{dt.year}. {dt.month:02d}. {dt.day:02d}. "
        f"{KOREAN_WEEKDAYS[dt.weekday()]} {_korean_clock(dt, padded=True)}"
    )


def get_current_time(timezone: str = "UTC", now: Optional[datetime] = None) -> str:
    """
    Get current time in specified timezone.

    Args:
        timezone: IANA timezone name (e.g., 'UTC', 'Asia/Seoul', 'America/New_York')
        now: Instant to format instead of the wall clock; naive values are taken as UTC

    Returns:
        Formatted time text, or an error message naming an unknown timezone
    """
    try:
        tz = pytz.timezone(timezone)
    except pytz.exceptions.UnknownTimeZoneError:
        examples = ", ".join(f'"{name}"' for name in EXAMPLE_TIMEZONES)
        return (
            f"❌ 오류: 유효하지 않은 timezone입니다. ({timezone})\n"
            f"올바른 형식: {examples} 등"
        )

    if now is None:
        local = datetime.now(tz)
    else:
        if now.tzinfo is None:
            now = pytz.utc.localize(now)
        local = now.astimezone(tz)

    return f"🕐 {timezone} 시간: {korean_long_datetime(local)}"
