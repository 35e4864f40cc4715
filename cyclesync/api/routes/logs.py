import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from cyclesync.infra.Log_Repository import LogRepository
from cyclesync.infra.Plan_Repository import PlanRepository
from cyclesync.logic.logs.journal import create_log_entry, sort_logs_for_display
from cyclesync.api.dependencies import get_today, parse_date_or_400
from cyclesync.utilities.dates import format_display_date
from cyclesync.utilities.validators import LogCreateInput, LogPatchInput

router = APIRouter(prefix="/api/logs", tags=["logs"])
logger = logging.getLogger(__name__)


@router.get("")
def list_logs():
    """All entries, newest date first, undated last."""
    logs = sort_logs_for_display(LogRepository().load_logs())
    return {"count": len(logs), "logs": [entry.to_dict() for entry in logs]}


@router.get("/day")
def logs_for_day(date_str: str = Query(..., alias="date"), today: date = Depends(get_today)):
    parse_date_or_400(date_str)
    entries = LogRepository().for_date(date_str)
    return {
        "date": date_str,
        "label": format_display_date(date_str, today),
        "entries": [entry.to_dict() for entry in entries],
    }


@router.post("", status_code=201)
def add_log(payload: LogCreateInput, today: date = Depends(get_today)):
    """Create an entry for the selected day, pre-filled from the plan when it has a session."""
    plan_state = PlanRepository().load_state_for_suggestions()
    entry = create_log_entry(plan_state, payload.date, today)
    LogRepository().add(entry)
    return entry.to_dict()


@router.patch("/{entry_id}")
def update_log(entry_id: str, payload: LogPatchInput):
    updated = LogRepository().update(entry_id, payload.to_patch())
    if updated is None:
        raise HTTPException(status_code=404, detail="Log entry not found")
    return updated.to_dict()


@router.delete("/{entry_id}")
def delete_log(entry_id: str):
    if not LogRepository().remove(entry_id):
        raise HTTPException(status_code=404, detail="Log entry not found")
    logger.info("Log entry %s deleted", entry_id)
    return {"status": "deleted", "id": entry_id}
