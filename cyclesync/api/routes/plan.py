from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from cyclesync.infra.Plan_Repository import PlanRepository
from cyclesync.logic.plan.resolver import resolve_planned_session
from cyclesync.api.dependencies import get_today, parse_date_or_400
from cyclesync.utilities.dates import monday_of, shift_weeks, week_start_for
from cyclesync.utilities.validators import DayPlanInput, WeekFocusInput

router = APIRouter(prefix="/api/plan", tags=["plan"])


def _week_start_or_400(value: str) -> str:
    week_start = week_start_for(value)
    if not week_start:
        raise HTTPException(status_code=400, detail="Invalid week start (expected YYYY-MM-DD)")
    return week_start


@router.get("")
def get_plan(today: date = Depends(get_today)):
    state = PlanRepository().load_state(today)
    return {"current_week_start": monday_of(today), **state.to_dict()}


@router.get("/week")
def get_week(start: str = Query(..., description="Any date in the week"), today: date = Depends(get_today)):
    week = PlanRepository().get_week(_week_start_or_400(start), today)
    return week.to_dict()


@router.get("/week/shift")
def shift_week(start: str = Query(...), offset: int = Query(..., ge=-520, le=520),
               today: date = Depends(get_today)):
    """Previous/next week navigation; the target week is created on first visit."""
    target = shift_weeks(_week_start_or_400(start), offset)
    return PlanRepository().get_week(target, today).to_dict()


@router.put("/week/{week_start}/focus")
def set_focus(week_start: str, payload: WeekFocusInput, today: date = Depends(get_today)):
    week = PlanRepository().set_focus(_week_start_or_400(week_start), payload.focus, today)
    return week.to_dict()


@router.put("/week/{week_start}/days/{day_index}")
def set_day(week_start: str, day_index: int, payload: DayPlanInput, today: date = Depends(get_today)):
    if not 0 <= day_index < 7:
        raise HTTPException(status_code=400, detail="Day index must be 0 (Mon) .. 6 (Sun)")
    week = PlanRepository().set_day_planned(_week_start_or_400(week_start), day_index, payload.planned, today)
    return week.to_dict()


@router.get("/suggestion")
def planned_suggestion(date_str: str = Query(..., alias="date")):
    """Planned session the plan would pre-fill for this date (null when none)."""
    parse_date_or_400(date_str)
    planned = resolve_planned_session(date_str, PlanRepository().load_state_for_suggestions())
    return {"date": date_str, "planned": planned}
