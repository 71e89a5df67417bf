"""
Machine preference endpoints.

A preferred machine is picked first for its muscle group.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_store
from app.catalog.machine_catalog import get_machine
from app.schemas.requests import PreferenceRequest
from app.schemas.workout import PrimaryGroup
from app.services.state_store import StateStore

router = APIRouter()


@router.get("", summary="Preferred machine per muscle group.", response_model=dict[str, str], )
def list_preferences(store: StateStore = Depends(get_store)):
    return store.state.machine_preferences


@router.put("/{group}", summary="Set the preferred machine of a muscle group.", response_model=dict[str, str], )
def set_preference(group: PrimaryGroup, data: PreferenceRequest, store: StateStore = Depends(get_store)):
    info = get_machine(data.machine_id)
    if info is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown machine '{data.machine_id}'", )
    if info.group != group:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail=f"'{data.machine_id}' does not train {group.value}", )
    store.set_preference(group, data.machine_id)
    return store.state.machine_preferences
