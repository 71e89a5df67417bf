"""Request bodies of the mutation endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class FinalizeRequest(BaseModel):
    feedback: Optional[float] = Field(
        None, ge=0.0, le=10.0,
        description="Session RPE; below 6 doubles the next load step",
    )


class SubstituteRequest(BaseModel):
    machine_id: str = Field(..., description="Replacement machine (same muscle group)")


class ScheduleOverrideRequest(BaseModel):
    is_training: bool


class PreferenceRequest(BaseModel):
    machine_id: str
