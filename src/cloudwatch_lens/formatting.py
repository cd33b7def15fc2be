"""Pure formatting helpers for timestamps, sizes and log messages."""

import time
from datetime import datetime, timezone, tzinfo
from typing import Optional

import click

from .constants import MESSAGE_INDENT, LogLevel

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS

LEVEL_COLORS = {
    LogLevel.START: "green",
    LogLevel.END: "green",
    LogLevel.REPORT: "green",
    LogLevel.ERROR: "red",
    LogLevel.WARN: "yellow",
    LogLevel.INFO: "cyan",
    LogLevel.DEBUG: "bright_black",
}


def now_ms() -> int:
    """Current time in epoch millis."""
    return int(time.time() * 1000)


def _to_datetime(timestamp: int, tz: Optional[tzinfo] = None) -> datetime:
    # astimezone(None) converts to the local zone
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).astimezone(tz)


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of month: 1 -> 'st', 12 -> 'th'."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _clock(dt: datetime, seconds: bool = False) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    if seconds:
        return f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    return f"{hour}:{dt.minute:02d} {meridiem}"


def format_timestamp_full(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """
    Render an absolute timestamp.

    Args:
        timestamp: Epoch millis
        tz: Zone to render in (local zone when None)

    Returns:
        e.g. "16th Jan 2025, 10:30 AM UTC"
    """
    dt = _to_datetime(timestamp, tz)
    day = f"{dt.day}{ordinal_suffix(dt.day)}"
    return f"{day} {MONTHS[dt.month - 1]} {dt.year:04d}, {_clock(dt)} {dt.tzname()}"


def format_timestamp_relative(
    timestamp: int,
    now: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Render a timestamp relative to ``now``.

    Anything a week old or more falls back to :func:`format_timestamp_full`.

    Args:
        timestamp: Epoch millis
        now: Reference epoch millis (current time when None)
        tz: Zone for the absolute fallback
    """
    if now is None:
        now = now_ms()

    diff = now - timestamp
    minutes = diff // MINUTE_MS
    hours = diff // HOUR_MS
    days = diff // DAY_MS

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"

    return format_timestamp_full(timestamp, tz)


def format_log_time(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Clock time of a log event, e.g. "10:30:05 AM"."""
    return _clock(_to_datetime(timestamp, tz), seconds=True)


def format_iso(timestamp: int) -> str:
    """UTC ISO-8601 with milliseconds, e.g. "2025-01-16T10:30:00.000Z"."""
    dt = _to_datetime(timestamp, timezone.utc)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{timestamp % 1000:03d}Z"


def format_bytes(size: Optional[int]) -> str:
    """Render a byte count in B, KB or MB."""
    if not size:
        return "0 B"

    kb = size / 1024
    if kb < 1:
        return f"{size} B"
    if kb < 1024:
        return f"{kb:.1f} KB"
    return f"{kb / 1024:.1f} MB"


def detect_log_level(message: str) -> LogLevel:
    """
    Classify a log message.

    Lambda runtime markers are matched as prefixes before any keyword, so
    "START RequestId: x ERROR" is START.
    """
    upper = message.upper()

    if upper.startswith("START REQUESTID:"):
        return LogLevel.START
    if upper.startswith("END REQUESTID:"):
        return LogLevel.END
    if upper.startswith("REPORT REQUESTID:"):
        return LogLevel.REPORT

    if "ERROR" in upper or "EXCEPTION" in upper:
        return LogLevel.ERROR
    if "WARN" in upper:
        return LogLevel.WARN
    if "INFO" in upper:
        return LogLevel.INFO
    if "DEBUG" in upper:
        return LogLevel.DEBUG

    return LogLevel.DEFAULT


def format_log_message(message: str) -> str:
    """Indent every line after the first so stack traces align under the message."""
    first, *rest = message.split("\n")
    if not rest:
        return message
    return "\n".join([first, *(f"{MESSAGE_INDENT}{line}" for line in rest)])


def colorize_message(message: str, level: LogLevel) -> str:
    """Wrap a message in the ANSI color for its level."""
    color = LEVEL_COLORS.get(level)
    if color is None:
        return message
    return click.style(message, fg=color)
