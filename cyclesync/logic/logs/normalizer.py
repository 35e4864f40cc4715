"""Conversion of untrusted stored records into canonical LogEntry objects."""
import math
from typing import Any, Optional, Union
from uuid import uuid4

from cyclesync.domain.LogEntry import LogEntry
from cyclesync.utilities.constants import PLANNED_SOURCES

TEXT_FIELDS = ("date", "planned", "actual", "notes", "phase")
METRIC_FIELDS = ("rpe", "energy", "sleep")


def _coerce_metric(value: Any) -> Optional[Union[int, float]]:
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_log_entry(raw: Any) -> LogEntry:
    """Build a LogEntry from a partial record, filling defaults.

    Accepts a dict (as read from storage), an existing LogEntry, or anything
    else (treated as an empty record). Metrics that are not finite numbers
    become None. A new id is generated only when the record has none, so
    normalizing an already normalized entry keeps its identity.
    """
    if isinstance(raw, LogEntry):
        data = raw.to_dict()
    elif isinstance(raw, dict):
        data = raw
    else:
        data = {}

    entry_id = data.get("id")
    source = data.get("plannedSource", data.get("planned_source"))
    return LogEntry(
        id=str(entry_id) if entry_id is not None else str(uuid4()),
        planned_source=source if source in PLANNED_SOURCES else None,
        **{field: _coerce_text(data.get(field)) for field in TEXT_FIELDS},
        **{field: _coerce_metric(data.get(field)) for field in METRIC_FIELDS},
    )


__all__ = ["normalize_log_entry"]
