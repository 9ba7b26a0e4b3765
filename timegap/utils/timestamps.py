# timegap/utils/timestamps.py
"""
Helpers for the badge-scan timestamp format "DD-MMM-YYYY HH:MM:SS".
Month names go through a fixed English table so parsing never depends on
the host locale or timezone.
"""

import re
from datetime import datetime
from typing import Optional

MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4,
    "May": 5, "Jun": 6, "Jul": 7, "Aug": 8,
    "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}
MONTH_NAMES = list(MONTHS)

LOG_DATE_RE = re.compile(r"(\d{1,2})-([A-Za-z]{3})-(\d{4}) (\d{1,2}):(\d{2}):(\d{2})")


def calendar_day(log_date: str) -> str:
    """Portion of the log date before the first space, e.g. '25-Jun-2025'."""
    return log_date.split(" ", 1)[0]


def time_of_day(log_date: str) -> str:
    """Portion after the first space, or '' when the value has no time part."""
    parts = log_date.split(" ", 1)
    return parts[1] if len(parts) > 1 else ""


def parse_log_date(log_date: str) -> Optional[datetime]:
    """Parse '25-Jun-2025 11:35:45'. Returns None when the text does not match."""
    match = LOG_DATE_RE.fullmatch(log_date.strip())
    if not match:
        return None

    day, month_name, year, hour, minute, second = match.groups()
    month = MONTHS.get(month_name)
    if month is None:
        return None
    try:
        return datetime(int(year), month, int(day), int(hour), int(minute), int(second))
    except ValueError:
        # 31-Feb-2025, 25:00:00 and friends
        return None


def format_log_date(value: datetime) -> str:
    """Render a datetime in the log format, independent of locale."""
    return f"{value.day:02d}-{MONTH_NAMES[value.month - 1]}-{value.year} {value:%H:%M:%S}"


def gap_seconds(first: datetime, last: datetime) -> int:
    """Absolute whole seconds between two timestamps (truncated, never rounded)."""
    return int(abs((last - first).total_seconds()))


def format_gap(total_seconds: int) -> str:
    """3661 -> '1h 1m 1s'. No day component: 90000 -> '25h 0m 0s'."""
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}h {minutes}m {seconds}s"
