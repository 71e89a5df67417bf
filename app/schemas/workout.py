"""
Workout schemas — focus, exercises and sessions.

A :class:`WorkoutSession` is generated once per calendar day and then
mutated in place by the user (completed sets, notes, substitutions).
Its *completion* is derived from the exercise counters, never stored.
"""

from __future__ import annotations

import datetime
import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class PrimaryGroup(str, Enum):
    """Muscle group a machine primarily trains."""
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    LEGS = "legs"
    CALVES = "calves"
    ARMS = "arms"
    CORE = "core"


class FocusType(str, Enum):
    """Muscle-group emphasis of a training day."""
    FULL_BODY = "full_body"
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"


_FOCUS_GROUPS: dict[FocusType, list[PrimaryGroup]] = {
    FocusType.FULL_BODY: [
        PrimaryGroup.CHEST, PrimaryGroup.BACK, PrimaryGroup.SHOULDERS,
        PrimaryGroup.LEGS, PrimaryGroup.CALVES, PrimaryGroup.ARMS,
        PrimaryGroup.CORE,
    ],
    FocusType.PUSH: [PrimaryGroup.CHEST, PrimaryGroup.SHOULDERS, PrimaryGroup.ARMS],
    FocusType.PULL: [PrimaryGroup.BACK, PrimaryGroup.ARMS],
    FocusType.LEGS: [PrimaryGroup.LEGS, PrimaryGroup.CALVES, PrimaryGroup.CORE],
    FocusType.UPPER: [
        PrimaryGroup.CHEST, PrimaryGroup.BACK, PrimaryGroup.SHOULDERS,
        PrimaryGroup.ARMS,
    ],
    FocusType.LOWER: [PrimaryGroup.LEGS, PrimaryGroup.CALVES, PrimaryGroup.CORE],
}


class TrainingFocus(BaseModel):
    """Focus assigned to a date, with the deload state of that date."""

    type: FocusType
    is_deload: bool = False

    @property
    def primary_groups(self) -> list[PrimaryGroup]:
        return list(_FOCUS_GROUPS[self.type])


class IntensityProfile(BaseModel):
    """Output of the intensity model, input of the routine builder."""

    level: int = Field(..., ge=0)
    readiness: float = Field(..., gt=0.0)
    missed_exercises: list[str] = Field(default_factory=list)


class WorkoutExercise(BaseModel):
    """A single prescribed exercise within a session."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., description="Display name")
    machine: str = Field(..., description="Catalog machine id")
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    rest_seconds: int = Field(..., ge=0)
    tempo: str
    target_rpe: float = Field(..., ge=0.0, le=10.0)
    recommended_load_kg: float = Field(20.0, ge=0.0)
    notes: str = ""
    # May exceed ``sets``: over-completion is tracked, not rejected.
    completed_sets: int = Field(0, ge=0)


class WorkoutExerciseUpdate(BaseModel):
    """Partial update of a :class:`WorkoutExercise` (named fields only)."""

    name: Optional[str] = None
    machine: Optional[str] = None
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    rest_seconds: Optional[int] = Field(None, ge=0)
    tempo: Optional[str] = None
    target_rpe: Optional[float] = Field(None, ge=0.0, le=10.0)
    recommended_load_kg: Optional[float] = Field(None, ge=0.0)
    notes: Optional[str] = None
    completed_sets: Optional[int] = Field(None, ge=0)


class WorkoutSession(BaseModel):
    """The workout planned (and logged) for one calendar day."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    date: datetime.date
    difficulty_level: int = Field(0, ge=0)
    focus: Optional[FocusType] = None
    exercises: list[WorkoutExercise] = Field(default_factory=list)

    @property
    def total_target_sets(self) -> int:
        return sum(e.sets for e in self.exercises)

    @property
    def total_completed_sets(self) -> int:
        return sum(e.completed_sets for e in self.exercises)

    @computed_field
    @property
    def completed(self) -> bool:
        if not self.exercises:
            return False
        return self.total_completed_sets == self.total_target_sets

    @property
    def started(self) -> bool:
        return any(e.completed_sets > 0 for e in self.exercises)

    @computed_field
    @property
    def progress_fraction(self) -> float:
        """Completed/target sets for display, clamped to ``[0, 1]``."""
        total = self.total_target_sets
        if total <= 0:
            return 0.0
        return min(1.0, self.total_completed_sets / total)

    def find_exercise(self, exercise_id: uuid.UUID) -> Optional[WorkoutExercise]:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None
