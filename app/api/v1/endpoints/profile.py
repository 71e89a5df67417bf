"""
Profile endpoints.

Read and replace the (single) user profile.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_store
from app.schemas.profile import UserProfile
from app.services.state_store import StateStore

router = APIRouter()


@router.get("", summary="Get the user profile.", response_model=UserProfile, )
def get_profile(store: StateStore = Depends(get_store)):
    profile = store.state.profile
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No profile configured", )
    return profile


@router.put("", summary="Create or replace the user profile.", response_model=UserProfile, )
def put_profile(data: UserProfile, store: StateStore = Depends(get_store)):
    return store.update_profile(data)
