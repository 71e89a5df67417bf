"""
User profile schemas.

The profile is the only user-entered input of the planner.  Everything
else (progress, overrides, sessions) is derived from training history.

Goal parameters
---------------
Each training goal defines the base ranges used by the routine builder:

    goal          sets   reps    rest   base RPE
    strength      4-5    4-8     150s   8.0
    hypertrophy   3-4    8-12     90s   7.5
    fat_loss      2-3    12-16    60s   7.0
"""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TrainingGoal(str, Enum):
    """What the user is training for."""
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    FAT_LOSS = "fat_loss"

    @property
    def parameters(self) -> GoalParameters:
        return GOAL_PARAMETERS[self]


class TrainingSplit(str, Enum):
    """How training days are distributed over muscle groups."""
    AUTO = "auto"
    FULL_BODY = "full_body"
    PUSH_PULL_LEGS = "push_pull_legs"
    UPPER_LOWER = "upper_lower"
    PPLUL = "pplul"
    PPLUPL = "pplupl"


class GoalParameters(BaseModel):
    """Base programming ranges for a training goal."""

    min_sets: int
    max_sets: int
    min_reps: int
    max_reps: int
    rest_seconds: int
    base_rpe: float

    def clamp_sets(self, value: int) -> int:
        return min(max(value, self.min_sets), self.max_sets)

    def clamp_reps(self, value: int) -> int:
        return min(max(value, self.min_reps), self.max_reps)


GOAL_PARAMETERS: dict[TrainingGoal, GoalParameters] = {
    TrainingGoal.STRENGTH: GoalParameters(
        min_sets=4, max_sets=5, min_reps=4, max_reps=8,
        rest_seconds=150, base_rpe=8.0,
    ),
    TrainingGoal.HYPERTROPHY: GoalParameters(
        min_sets=3, max_sets=4, min_reps=8, max_reps=12,
        rest_seconds=90, base_rpe=7.5,
    ),
    TrainingGoal.FAT_LOSS: GoalParameters(
        min_sets=2, max_sets=3, min_reps=12, max_reps=16,
        rest_seconds=60, base_rpe=7.0,
    ),
}


class UserProfile(BaseModel):
    """Profile of the (single) user of the planner."""

    age: int = Field(..., ge=0, le=120, description="Age in years")
    weight_kg: float = Field(..., ge=0.0, le=400.0, description="Body weight in kilograms")
    goal: TrainingGoal
    training_days: list[int] = Field(
        default_factory=list,
        description="Training weekdays, 1=Monday .. 7=Sunday",
    )
    split: TrainingSplit = TrainingSplit.AUTO
    created_at: datetime.datetime = Field(
        default_factory=datetime.datetime.now,
        description="Anchor of the periodization cycles",
    )

    @field_validator("training_days")
    @classmethod
    def validate_training_days(cls, value: list[int]) -> list[int]:
        invalid = [d for d in value if d < 1 or d > 7]
        if invalid:
            raise ValueError(f"Training days must be in 1..7, got {invalid}")
        # Keep first occurrence order, drop duplicates.
        return list(dict.fromkeys(value))
