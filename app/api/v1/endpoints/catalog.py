"""
Machine catalog endpoints (read-only).
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.catalog.machine_catalog import all_machines, equivalents_for, get_machine
from app.catalog.machine_profile import MachineInfo
from app.planner.loading import PlateLoading, StackLoading, loading_for
from app.schemas.workout import PrimaryGroup

router = APIRouter()


@router.get("", summary="List all machines.", response_model=list[MachineInfo], )
def list_machines(group: Optional[PrimaryGroup] = Query(None, description="Filter by muscle group")):
    machines = all_machines()
    if group is not None:
        machines = [m for m in machines if m.group == group]
    return machines


@router.get("/{machine_id}/equivalents", summary="Machines training the same muscle group.",
            response_model=list[MachineInfo], )
def list_equivalents(machine_id: str):
    if get_machine(machine_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown machine '{machine_id}'", )
    return equivalents_for(machine_id)


@router.get("/{machine_id}/loading", summary="How to rack a target load on a machine.",
            response_model=PlateLoading | StackLoading, )
def get_loading(machine_id: str, target_kg: float = Query(..., ge=0.0), base_kg: float = Query(0.0, ge=0.0),
                split_sides: bool = Query(False)):
    loading = loading_for(machine_id, target_kg, base_kg, split_sides)
    if loading is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown machine '{machine_id}'", )
    return loading
