"""Shared request helpers for the API routers."""
from datetime import date
from typing import Optional

from fastapi import HTTPException, Query

from cyclesync.utilities.dates import parse_local_date_string


def parse_date_or_400(value: str, field: str = "date") -> date:
    d = parse_local_date_string(value)
    if d is None:
        raise HTTPException(status_code=400, detail=f"Invalid {field} (expected YYYY-MM-DD)")
    return d


def get_today(today: Optional[str] = Query(default=None, description="Override the server date (YYYY-MM-DD)")) -> date:
    """The clock for this request: the ``today`` query parameter or the server's local date."""
    if today is None:
        return date.today()
    return parse_date_or_400(today, "today")
