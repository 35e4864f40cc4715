"""Plan domain entities: Monday-anchored weeks of planned training sessions."""
from datetime import date
from typing import List, Optional

from cyclesync.utilities.constants import DAYS
from cyclesync.utilities.dates import monday_of


class DayPlan:
    def __init__(self, name: str = "", planned: str = ""):
        self.name = name
        self.planned = planned

    @staticmethod
    def from_dict(data):
        '''Creates a DayPlan from a dictionary; anything else becomes an empty slot.'''
        d = data if isinstance(data, dict) else {}
        return DayPlan(name=str(d.get("name") or ""), planned=str(d.get("planned") or ""))

    def to_dict(self):
        return {"name": self.name, "planned": self.planned}

    def __repr__(self) -> str:
        return f"DayPlan({self.name!r}, {self.planned!r})"


class WeekPlan:
    def __init__(self, week_start: str, focus: str = "", days: Optional[List[DayPlan]] = None):
        self.week_start = week_start  # YYYY-MM-DD (Monday)
        self.focus = focus
        self.days = days[:] if days else []

    @staticmethod
    def from_dict(data):
        '''Creates a WeekPlan from stored JSON. Malformed day lists are kept as read.'''
        d = data if isinstance(data, dict) else {}
        raw_days = d.get("days")
        days = [DayPlan.from_dict(x) for x in raw_days] if isinstance(raw_days, list) else []
        return WeekPlan(
            week_start=str(d.get("weekStart") or ""),
            focus=str(d.get("focus") or ""),
            days=days,
        )

    def to_dict(self):
        return {
            "weekStart": self.week_start,
            "focus": self.focus,
            "days": [day.to_dict() for day in self.days],
        }

    def __repr__(self) -> str:
        return f"WeekPlan({self.week_start!r}, focus={self.focus!r})"


class PlanState:
    def __init__(self, weeks: Optional[List[WeekPlan]] = None):
        self.weeks = weeks[:] if weeks else []

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        raw_weeks = d.get("weeks")
        if not isinstance(raw_weeks, list):
            return PlanState()
        return PlanState([WeekPlan.from_dict(w) for w in raw_weeks])

    def to_dict(self):
        return {"weeks": [w.to_dict() for w in self.weeks]}


def create_week(week_start: str) -> WeekPlan:
    """Empty week starting at the given Monday string."""
    return WeekPlan(week_start, "", [DayPlan(name, "") for name in DAYS])


def create_week_for_date(d: date) -> WeekPlan:
    return create_week(monday_of(d))


def find_week(weeks: List[WeekPlan], week_start: str) -> Optional[WeekPlan]:
    for week in weeks:
        if week.week_start == week_start:
            return week
    return None


def ensure_week_in_state(weeks: List[WeekPlan], week_start: str) -> List[WeekPlan]:
    """Return ``weeks`` with a fresh week appended unless ``week_start`` already exists."""
    if find_week(weeks, week_start) is not None:
        return weeks
    return [*weeks, create_week(week_start)]


def create_initial_plan_state(today: date) -> PlanState:
    return PlanState([create_week_for_date(today)])
