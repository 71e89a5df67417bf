"""Planning core: scheduling, periodization, routine building and progression."""

from app.planner.intensity import cycle_week, intensity_profile, is_deload_week
from app.planner.scheduler import focus_for, next_training_day, should_train
from app.planner.routine import build_routine, generate_session
from app.planner.progression import finalize_session, progressed_load

__all__ = [
    "build_routine",
    "cycle_week",
    "finalize_session",
    "focus_for",
    "generate_session",
    "intensity_profile",
    "is_deload_week",
    "next_training_day",
    "progressed_load",
    "should_train",
]
