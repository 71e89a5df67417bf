"""
Statistics endpoints.

Read-only views over the logged sessions.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_store
from app.planner import stats
from app.schemas.overview import Achievement, MuscleGroupSets, StrengthPoint, WeeklyCount
from app.services.state_store import StateStore

router = APIRouter()


@router.get("/strength/{machine_id}", summary="Load history of a machine.", response_model=list[StrengthPoint], )
def get_strength_history(machine_id: str, store: StateStore = Depends(get_store)):
    return stats.strength_history(store.state, machine_id)


@router.get("/muscle-groups", summary="Completed sets per muscle group.", response_model=list[MuscleGroupSets], )
def get_muscle_group_sets(store: StateStore = Depends(get_store)):
    return stats.muscle_group_sets(store.state)


@router.get("/weekly", summary="Sessions per week.", response_model=list[WeeklyCount], )
def get_weekly_consistency(store: StateStore = Depends(get_store)):
    return stats.weekly_consistency(store.state)


@router.get("/achievements", summary="Achievements and their unlock state.", response_model=list[Achievement], )
def get_achievements(store: StateStore = Depends(get_store)):
    return stats.achievements(store.state)
