"""
Read-only views built on top of the state: week plan, dashboard
overview and training statistics.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.workout import FocusType


class DayPlan(BaseModel):
    """One day of the weekly calendar."""

    date: datetime.date
    is_training: bool
    is_override: bool
    focus: Optional[FocusType] = Field(
        None, description="Calendar focus (only on training days)",
    )


class TrainingOverview(BaseModel):
    """Dashboard header data."""

    level: int
    level_tier: str = Field(..., description="One of: foundation, progression, breakthrough")
    total_sessions: int
    cycle_week: int = Field(..., ge=1, le=5)
    is_deload_week: bool
    is_training_day: bool
    next_training_day: datetime.date
    lapse_adjusted: bool = Field(
        ..., description="Today's session was generated below the current level",
    )


class StrengthPoint(BaseModel):
    date: datetime.date
    load_kg: float


class MuscleGroupSets(BaseModel):
    group: str
    sets: int


class WeeklyCount(BaseModel):
    week_start: datetime.date
    count: int


class Achievement(BaseModel):
    key: str
    title: str
    description: str
    unlocked: bool
