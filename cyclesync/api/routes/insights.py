from typing import Optional

from fastapi import APIRouter, Query

from cyclesync.infra.Log_Repository import LogRepository
from cyclesync.logic.reporting.insights import (
    build_insights_stats, build_metrics_series, filter_logs_by_month, month_options,
)
from cyclesync.logic.reporting.month_view import build_calendar_month, phase_color

router = APIRouter(prefix="/api", tags=["insights"])


@router.get("/insights")
def insights(month: Optional[str] = Query(default=None, pattern=r'^\d{4}-\d{2}$')):
    """Stats over all logs; the chart series over the selected month (default: newest month)."""
    logs = LogRepository().load_logs()
    options = month_options(logs)
    if month is None and options:
        month = options[0]["key"]
    return {
        **build_insights_stats(logs),
        "month": month,
        "months": options,
        "series": build_metrics_series(filter_logs_by_month(logs, month)),
    }


@router.get("/insights/months")
def insights_months():
    return {"months": month_options(LogRepository().load_logs())}


@router.get("/calendar")
def calendar_month(year: int = Query(..., ge=1, le=9999), month: int = Query(..., ge=1, le=12)):
    weeks = build_calendar_month(year, month, LogRepository().load_logs())
    for week in weeks:
        for cell in week:
            cell["color"] = phase_color(cell["phase_key"]) if cell["has_log"] else None
    return {"year": year, "month": month, "weeks": weeks}
