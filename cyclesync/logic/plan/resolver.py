"""Planned-session lookup for a calendar date."""
from datetime import date
from typing import Optional

from cyclesync.domain.Plan import PlanState, WeekPlan
from cyclesync.utilities.dates import monday_of, parse_local_date_string


def _pick_from_week(week: WeekPlan, target: date) -> Optional[str]:
    start = parse_local_date_string(week.week_start)
    if start is None:
        return None
    day_offset = (target - start).days
    if day_offset < 0 or day_offset >= 7 or day_offset >= len(week.days):
        return None
    planned = week.days[day_offset].planned
    return planned or None


def resolve_planned_session(date_str: str, plan_state: Optional[PlanState]) -> Optional[str]:
    """Return the planned session text for ``date_str``, or None.

    The week whose ``week_start`` is the date's own Monday is asked first.
    If it is missing or its slot is empty, every week is scanned in stored
    order and the first one whose seven days cover the date with a non-empty
    slot wins. This recovers suggestions from legacy or mislabeled weeks;
    when several weeks cover the same date, stored order decides.
    """
    if not date_str or plan_state is None or not plan_state.weeks:
        return None
    target = parse_local_date_string(date_str)
    if target is None:
        return None

    expected = monday_of(target)
    direct = next((w for w in plan_state.weeks if w.week_start == expected), None)
    if direct is not None:
        planned = _pick_from_week(direct, target)
        if planned:
            return planned

    for week in plan_state.weeks:
        planned = _pick_from_week(week, target)
        if planned:
            return planned
    return None


__all__ = ["resolve_planned_session"]
