"""Business logic services."""

from app.services.state_store import StateStore
from app.services.workout_service import WorkoutService

__all__ = [
    "StateStore",
    "WorkoutService",
]
