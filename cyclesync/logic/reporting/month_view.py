"""Month grid for the log calendar (Monday-first) with per-day phase keys."""
import calendar
from datetime import date
from typing import Dict, List, Optional

from cyclesync.domain.LogEntry import LogEntry
from cyclesync.utilities.constants import CUSTOM_PHASE_COLOR, PHASE_COLORS
from cyclesync.utilities.dates import to_local_date_string

MIXED = "mixed"
UNLABELED = "unlabeled"


def phase_key_for_date(phases: List[str]) -> str:
    """One distinct label -> that label, several -> 'mixed', none -> 'unlabeled'."""
    distinct = []
    for p in phases:
        p = (p or "").strip()
        if p and p not in distinct:
            distinct.append(p)
    if not distinct:
        return UNLABELED
    if len(distinct) == 1:
        return distinct[0]
    return MIXED


def phase_color(phase_key: Optional[str]) -> str:
    if not phase_key:
        return CUSTOM_PHASE_COLOR
    return PHASE_COLORS.get(phase_key.strip(), CUSTOM_PHASE_COLOR)


def _blank_cell() -> Dict:
    return {"date": "", "day": 0, "has_log": False, "phase_key": None}


def build_calendar_month(year: int, month: int, logs: List[LogEntry]) -> List[List[Dict]]:
    """Weeks of seven cells covering ``month``; padding cells have date ''.

    ``month`` is 1-12.
    """
    phases_by_date: Dict[str, List[str]] = {}
    for log in logs:
        if log.date:
            phases_by_date.setdefault(log.date, []).append(log.phase)

    weeks: List[List[Dict]] = []
    for week in calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(year, month):
        row = []
        for day in week:
            if day == 0:
                row.append(_blank_cell())
                continue
            date_str = to_local_date_string(date(year, month, day))
            phases = phases_by_date.get(date_str)
            row.append({
                "date": date_str,
                "day": day,
                "has_log": phases is not None,
                "phase_key": phase_key_for_date(phases) if phases is not None else None,
            })
        weeks.append(row)
    return weeks


__all__ = ["build_calendar_month", "phase_key_for_date", "phase_color"]
