"""Insights aggregation over the log collection.

Produces the overall numbers, a per-phase breakdown and the chart series for
the Insights view. Metrics are averaged only over entries that actually
recorded them: a missing value is never counted as zero.
"""
from typing import Any, Dict, Iterable, List, Optional

from cyclesync.domain.LogEntry import LogEntry
from cyclesync.utilities.constants import UNLABELED_PHASE
from cyclesync.utilities.dates import parse_local_date_string

METRICS = ("energy", "rpe", "sleep")


def _avg(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def _metric_averages(logs: Iterable[LogEntry]) -> Dict[str, Optional[float]]:
    collected: Dict[str, List[float]] = {m: [] for m in METRICS}
    for log in logs:
        for metric in METRICS:
            value = getattr(log, metric)
            if value is not None:
                collected[metric].append(value)
    return {f"avg_{m}": _avg(collected[m]) for m in METRICS}


def compute_overall_stats(logs: List[LogEntry]) -> Dict[str, Any]:
    """Totals and averages across every entry.

    Returns:
        {'total_entries': int, 'days_with_logs': int,
         'avg_energy': float|None, 'avg_rpe': float|None, 'avg_sleep': float|None}
    """
    dates_with_logs = {log.date for log in logs if log.date}
    return {
        "total_entries": len(logs),
        "days_with_logs": len(dates_with_logs),
        **_metric_averages(logs),
    }


def compute_phase_stats(logs: List[LogEntry]) -> List[Dict[str, Any]]:
    """Group entries by trimmed phase label, most populated label first."""
    groups: Dict[str, List[LogEntry]] = {}
    for log in logs:
        key = (log.phase or "").strip() or UNLABELED_PHASE
        groups.setdefault(key, []).append(log)

    phases = [
        {"phase": key, "key": key, "entries": len(members), **_metric_averages(members)}
        for key, members in groups.items()
    ]
    # sorted() is stable: equal counts keep first-seen order
    return sorted(phases, key=lambda p: -p["entries"])


def build_insights_stats(logs: List[LogEntry]) -> Dict[str, Any]:
    return {"overall": compute_overall_stats(logs), "phases": compute_phase_stats(logs)}


def build_metrics_series(logs: List[LogEntry]) -> List[Dict[str, Any]]:
    """Chart points ordered by date.

    Entries without a date or without any metric are skipped. Missing
    metrics and an empty phase are left out of the point instead of being
    set to None, so a chart can tell "no value" from zero. Several entries on
    one date each produce a point, in encounter order.
    """
    points = []
    for log in logs:
        if not log.date or not log.has_metrics():
            continue
        point: Dict[str, Any] = {"date": log.date}
        for metric in METRICS:
            value = getattr(log, metric)
            if value is not None:
                point[metric] = value
        if log.phase:
            point["phase"] = log.phase
        points.append(point)
    # fixed-width YYYY-MM-DD strings sort chronologically
    return sorted(points, key=lambda p: p["date"])


# --- Month selection for the Insights view ---

def month_key(date_str: str) -> Optional[str]:
    d = parse_local_date_string(date_str)
    if d is None:
        return None
    return f"{d.year:04d}-{d.month:02d}"


def format_month_label(key: str) -> str:
    d = parse_local_date_string(f"{key}-01")
    if d is None:
        return key
    return d.strftime("%B %Y")


def month_options(logs: List[LogEntry]) -> List[Dict[str, str]]:
    """Distinct months that have entries, newest first."""
    seen: Dict[str, str] = {}
    for log in logs:
        key = month_key(log.date)
        if key and key not in seen:
            seen[key] = format_month_label(key)
    return [{"key": k, "label": seen[k]} for k in sorted(seen, reverse=True)]


def filter_logs_by_month(logs: List[LogEntry], month: Optional[str]) -> List[LogEntry]:
    if not month:
        return list(logs)
    return [log for log in logs if month_key(log.date) == month]


__all__ = [
    "compute_overall_stats", "compute_phase_stats", "build_insights_stats",
    "build_metrics_series", "month_key", "format_month_label", "month_options",
    "filter_logs_by_month",
]
