"""LogEntry domain entity: what actually happened on one calendar day."""
from typing import Optional, Union

Number = Union[int, float]


class LogEntry:
    def __init__(self, id: str, date: str = "", planned: str = "", actual: str = "",
                 notes: str = "", rpe: Optional[Number] = None, energy: Optional[Number] = None,
                 sleep: Optional[Number] = None, phase: str = "",
                 planned_source: Optional[str] = None):
        self.id = id
        self.date = date  # YYYY-MM-DD or "" (unset)
        self.planned = planned
        self.actual = actual
        self.notes = notes
        self.rpe = rpe
        self.energy = energy
        self.sleep = sleep
        self.phase = phase
        self.planned_source = planned_source  # "plan" | "manual" | None

    def has_metrics(self) -> bool:
        return self.energy is not None or self.rpe is not None or self.sleep is not None

    def to_dict(self):
        '''Converts the entry to its persisted JSON shape.'''
        return {
            "id": self.id,
            "date": self.date,
            "planned": self.planned,
            "actual": self.actual,
            "notes": self.notes,
            "rpe": self.rpe,
            "energy": self.energy,
            "sleep": self.sleep,
            "phase": self.phase,
            "plannedSource": self.planned_source,
        }

    def __eq__(self, other):
        if not isinstance(other, LogEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"LogEntry({self.id!r}, date={self.date!r}, phase={self.phase!r})"
