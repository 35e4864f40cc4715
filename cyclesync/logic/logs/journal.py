"""Journal operations over an in-memory list of log entries.

Each function returns a new list; the caller owns the collection and decides
when to persist it.
"""
from datetime import date
from typing import Any, Dict, List, Optional

from cyclesync.domain.LogEntry import LogEntry
from cyclesync.domain.Plan import PlanState
from cyclesync.logic.logs.normalizer import normalize_log_entry
from cyclesync.logic.plan.resolver import resolve_planned_session
from cyclesync.utilities.dates import parse_local_date_string, to_local_date_string


def create_log_entry(plan_state: Optional[PlanState], selected_date: str, today: date) -> LogEntry:
    """New entry for ``selected_date`` (or today), pre-filled from the plan when possible."""
    entry = normalize_log_entry({})
    entry.date = selected_date or to_local_date_string(today)
    suggestion = resolve_planned_session(entry.date, plan_state)
    if suggestion:
        entry.planned = suggestion
        entry.planned_source = "plan"
    return entry


def add_log(logs: List[LogEntry], entry: LogEntry) -> List[LogEntry]:
    """Prepend ``entry``: the collection is newest-created first."""
    return [entry, *logs]


def update_log(logs: List[LogEntry], entry_id: str, patch: Dict[str, Any]) -> List[LogEntry]:
    """Apply a field-level patch to the entry with ``entry_id``.

    The id itself cannot be patched. Editing ``planned`` without saying where
    it came from marks it as a manual edit.
    """
    changes = {k: v for k, v in patch.items() if k != "id"}
    if "planned_source" in changes:
        changes["plannedSource"] = changes.pop("planned_source")
    if "planned" in changes and "plannedSource" not in changes:
        changes["plannedSource"] = "manual"

    updated = []
    for entry in logs:
        if entry.id == entry_id:
            entry = normalize_log_entry({**entry.to_dict(), **changes})
        updated.append(entry)
    return updated


def remove_log(logs: List[LogEntry], entry_id: str) -> List[LogEntry]:
    return [entry for entry in logs if entry.id != entry_id]


def find_log(logs: List[LogEntry], entry_id: str) -> Optional[LogEntry]:
    return next((entry for entry in logs if entry.id == entry_id), None)


def sort_logs_for_display(logs: List[LogEntry]) -> List[LogEntry]:
    """Newest date first; undated or unparseable entries go last (stable)."""
    def key(entry: LogEntry):
        d = parse_local_date_string(entry.date)
        if d is None:
            return (1, 0)
        return (0, -d.toordinal())
    return sorted(logs, key=key)


def entries_for_date(logs: List[LogEntry], date_str: str) -> List[LogEntry]:
    if not date_str:
        return []
    return [entry for entry in sort_logs_for_display(logs) if entry.date == date_str]


__all__ = [
    "create_log_entry", "add_log", "update_log", "remove_log", "find_log",
    "sort_logs_for_display", "entries_for_date",
]
