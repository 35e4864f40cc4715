"""Calendar helpers working on local calendar days.

All dates are plain ``datetime.date`` values (no time, no timezone) and are
exchanged as ``YYYY-MM-DD`` strings. Parsing splits the string into its
calendar components instead of handing it to a generic date parser, so a
stored date always means the same calendar day.
"""
import math
from datetime import date, timedelta
from typing import Optional, Union


def to_local_date_string(d: date) -> str:
    """Format ``d`` as ``YYYY-MM-DD`` (zero padded)."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_local_date_string(s: Optional[str]) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` into a date, or return None when it is not one.

    Missing, zero or non-numeric components yield None, as does a triple that
    is not a real calendar day (``2025-02-30``).
    """
    if not s or not isinstance(s, str):
        return None
    parts = s.split("-")
    if len(parts) < 3:
        return None
    try:
        y, m, d = (int(p) for p in parts[:3])
    except ValueError:
        return None
    if not y or not m or not d:
        return None
    try:
        return date(y, m, d)
    except ValueError:
        return None


def monday_of(d: date) -> str:
    """Return the Monday on or before ``d`` as a date string."""
    # date.weekday() is already Monday-based (Mon=0 .. Sun=6)
    return to_local_date_string(d - timedelta(days=d.weekday()))


def week_start_for(date_str: str) -> str:
    """Monday string for the week containing ``date_str`` ('' if unparseable)."""
    d = parse_local_date_string(date_str)
    if d is None:
        return ""
    return monday_of(d)


def shift_weeks(week_start: str, offset: int) -> str:
    """Move a week start by ``offset`` whole weeks (negative goes back)."""
    d = parse_local_date_string(week_start)
    if d is None:
        return ""
    return monday_of(d + timedelta(weeks=offset))


def format_display_date(date_str: str, today: date) -> str:
    """Short human label: 'Today', 'Yesterday' or e.g. 'Wed, 12 Nov'."""
    d = parse_local_date_string(date_str)
    if d is None:
        return date_str
    if d == today:
        return "Today"
    if d == today - timedelta(days=1):
        return "Yesterday"
    return f"{d.strftime('%a')}, {d.day} {d.strftime('%b')}"


def parse_nullable_number(value: Optional[str]) -> Optional[Union[int, float]]:
    """Convert raw form text into a number, or None for blank/invalid input."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


__all__ = [
    "to_local_date_string", "parse_local_date_string", "monday_of",
    "week_start_for", "shift_weeks", "format_display_date", "parse_nullable_number",
]
