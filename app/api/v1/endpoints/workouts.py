"""
Workout endpoints.

Sessions are addressed by calendar date; exercises by their id within
the session.  Every set change recomputes progress.
"""

import datetime
import uuid
from typing import Optional

from fastapi import APIRouter, Depends

from app.api.dependencies import get_workout_service
from app.schemas.progress import PersonalRecord, SetAdjustment
from app.schemas.requests import FinalizeRequest, SubstituteRequest
from app.schemas.workout import WorkoutExercise, WorkoutExerciseUpdate, WorkoutSession
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.get("/{day}", summary="Get (or plan) the session for a date.", response_model=WorkoutSession, )
def get_session(day: datetime.date, service: WorkoutService = Depends(get_workout_service)):
    return service.session_for(day)


@router.get("/{day}/preview", summary="Preview the session for a date without storing it.",
            response_model=Optional[WorkoutSession], )
def preview_session(day: datetime.date, service: WorkoutService = Depends(get_workout_service)):
    return service.preview_session(day)


@router.post("/{day}/finalize", summary="Recompute progress from the session of a date.",
             response_model=list[PersonalRecord], )
def finalize_session(day: datetime.date, data: Optional[FinalizeRequest] = None,
                     service: WorkoutService = Depends(get_workout_service)):
    return service.finalize(day, data.feedback if data else None)


@router.patch("/{day}/exercises/{exercise_id}", summary="Update fields of an exercise.",
              response_model=WorkoutExercise, )
def update_exercise(day: datetime.date, exercise_id: uuid.UUID, data: WorkoutExerciseUpdate,
                    service: WorkoutService = Depends(get_workout_service)):
    return service.update_exercise(day, exercise_id, data)


@router.post("/{day}/exercises/{exercise_id}/sets/increment", summary="Log one completed set.",
             response_model=SetAdjustment, )
def increment_sets(day: datetime.date, exercise_id: uuid.UUID,
                   service: WorkoutService = Depends(get_workout_service)):
    return service.adjust_completed_sets(day, exercise_id, 1)


@router.post("/{day}/exercises/{exercise_id}/sets/decrement", summary="Undo one completed set.",
             response_model=SetAdjustment, )
def decrement_sets(day: datetime.date, exercise_id: uuid.UUID,
                   service: WorkoutService = Depends(get_workout_service)):
    return service.adjust_completed_sets(day, exercise_id, -1)


@router.post("/{day}/exercises/{exercise_id}/substitute", summary="Swap for an equivalent machine.",
             response_model=WorkoutExercise, )
def substitute_exercise(day: datetime.date, exercise_id: uuid.UUID, data: SubstituteRequest,
                        service: WorkoutService = Depends(get_workout_service)):
    return service.substitute_exercise(day, exercise_id, data.machine_id)
