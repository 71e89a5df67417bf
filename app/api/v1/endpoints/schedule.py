"""
Schedule endpoints.

Weekly calendar, per-date overrides and the dashboard overview.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import get_store, get_workout_service
from app.schemas.overview import DayPlan, TrainingOverview
from app.schemas.requests import ScheduleOverrideRequest
from app.services.state_store import StateStore
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.get("/week", summary="Training calendar of a week (Monday..Sunday).", response_model=list[DayPlan], )
def get_week(reference: Optional[datetime.date] = Query(None, description="Any day of the week (default: today)"),
             service: WorkoutService = Depends(get_workout_service)):
    return service.week_plan(reference)


@router.put("/overrides/{day}", summary="Force a date to be a training or rest day.",
            status_code=status.HTTP_204_NO_CONTENT, )
def set_override(day: datetime.date, data: ScheduleOverrideRequest, store: StateStore = Depends(get_store)):
    store.set_schedule_override(day, data.is_training)


@router.delete("/overrides/{day}", summary="Remove the override of a date.",
               status_code=status.HTTP_204_NO_CONTENT, )
def clear_override(day: datetime.date, store: StateStore = Depends(get_store)):
    if not store.clear_schedule_override(day):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No override on {day}", )


@router.get("/overview", summary="Level, cycle week and next training day.", response_model=TrainingOverview, )
def get_overview(today: Optional[datetime.date] = Query(None),
                 service: WorkoutService = Depends(get_workout_service)):
    return service.overview(today)
