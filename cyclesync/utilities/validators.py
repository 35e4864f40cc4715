"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from cyclesync.utilities.dates import parse_local_date_string, parse_nullable_number

Number = Union[int, float]


def _check_date(v: Optional[str]) -> Optional[str]:
    if v and parse_local_date_string(v) is None:
        raise ValueError('Date must be YYYY-MM-DD')
    return v


class LogCreateInput(BaseModel):
    """Schema for creating a log entry; an empty date means today."""
    date: str = ""

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return _check_date(v.strip())


class LogPatchInput(BaseModel):
    """Schema for a field-level log patch. Only fields that are sent are applied."""
    date: Optional[str] = None
    planned: Optional[str] = None
    actual: Optional[str] = None
    notes: Optional[str] = None
    phase: Optional[str] = None
    rpe: Optional[Number] = None
    energy: Optional[Number] = None
    sleep: Optional[Number] = Field(None, ge=0, le=24)
    plannedSource: Optional[str] = Field(None, pattern=r'^(plan|manual)$')

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return _check_date(v)

    @field_validator('rpe', 'energy', 'sleep', mode='before')
    @classmethod
    def parse_form_number(cls, v):
        """Blank or non-numeric form text means no measurement."""
        if isinstance(v, str):
            return parse_nullable_number(v)
        return v

    @field_validator('phase')
    @classmethod
    def strip_phase(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


class WeekFocusInput(BaseModel):
    focus: str = Field("", max_length=500)


class DayPlanInput(BaseModel):
    planned: str = Field("", max_length=1000)
