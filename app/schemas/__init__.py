"""Pydantic schemas for request/response validation."""

from app.schemas.profile import GoalParameters, TrainingGoal, TrainingSplit, UserProfile
from app.schemas.workout import (
    FocusType,
    IntensityProfile,
    PrimaryGroup,
    TrainingFocus,
    WorkoutExercise,
    WorkoutExerciseUpdate,
    WorkoutSession,
)
from app.schemas.progress import (
    PersonalRecord,
    ProgressState,
    SetAdjustment,
    SetCompletionEvent,
)
from app.schemas.state import AppState
from app.schemas.overview import (
    Achievement,
    DayPlan,
    MuscleGroupSets,
    StrengthPoint,
    TrainingOverview,
    WeeklyCount,
)
from app.schemas.requests import (
    FinalizeRequest,
    PreferenceRequest,
    ScheduleOverrideRequest,
    SubstituteRequest,
)

__all__ = [
    "GoalParameters",
    "TrainingGoal",
    "TrainingSplit",
    "UserProfile",
    "FocusType",
    "IntensityProfile",
    "PrimaryGroup",
    "TrainingFocus",
    "WorkoutExercise",
    "WorkoutExerciseUpdate",
    "WorkoutSession",
    "PersonalRecord",
    "ProgressState",
    "SetAdjustment",
    "SetCompletionEvent",
    "AppState",
    "Achievement",
    "DayPlan",
    "MuscleGroupSets",
    "StrengthPoint",
    "TrainingOverview",
    "WeeklyCount",
    "FinalizeRequest",
    "PreferenceRequest",
    "ScheduleOverrideRequest",
    "SubstituteRequest",
]
