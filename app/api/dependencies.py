"""
Shared API dependencies.

The state store is owned by the application (``app.state.store``) and
handed to the endpoints through these dependencies.
"""

from fastapi import Depends, Request

from app.services.state_store import StateStore
from app.services.workout_service import WorkoutService


def get_store(request: Request) -> StateStore:
    return request.app.state.store


def get_workout_service(request: Request, store: StateStore = Depends(get_store)) -> WorkoutService:
    clock = getattr(request.app.state, "clock", None)
    if clock is None:
        return WorkoutService(store)
    return WorkoutService(store, clock=clock)
