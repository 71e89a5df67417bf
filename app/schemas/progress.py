"""
Progress schemas.

:class:`ProgressState` is rewritten every time a session is finalized.
``level`` only ever grows (until a full reset); the lapse penalty of the
intensity model softens recommendations without touching it.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.workout import WorkoutExercise


class ProgressState(BaseModel):
    """Cumulative training progress."""

    total_sessions: int = Field(0, ge=0)
    level: int = Field(0, ge=0)
    last_session_date: Optional[datetime.date] = None
    personal_records: dict[str, float] = Field(
        default_factory=dict,
        description="Machine id -> highest recommended load reached (kg)",
    )
    missed_exercises: list[str] = Field(
        default_factory=list,
        description="Machine ids skipped in the most recent finalized session",
    )


class PersonalRecord(BaseModel):
    """Event emitted when an exercise beats its stored record."""

    exercise_name: str
    machine: str
    load_kg: float


class SetCompletionEvent(str, Enum):
    """Outcome of logging one more set on an exercise."""
    SET_LOGGED = "set_logged"
    TARGET_REACHED = "target_reached"
    OVER_TARGET = "over_target"


class SetAdjustment(BaseModel):
    """Result of incrementing / decrementing the completed sets of an exercise."""

    exercise: WorkoutExercise
    event: Optional[SetCompletionEvent] = Field(
        None, description="Only set when a set was added",
    )
    personal_records: list[PersonalRecord] = Field(default_factory=list)
