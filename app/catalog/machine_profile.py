"""
Machine profile data model.

Each gym machine is described by its muscle group (which drives focus
filtering, load factors and progression increments) and its *load
scheme*:

* ``plate_loaded`` — standard Olympic plates hung on the machine
  (leg press, hammer-strength rows, ...).
* ``stack`` — a selectorized weight stack moving in fixed increments
  (``stack_increment_kg``, typically 5 kg or 2.5 kg).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Self

from pydantic import BaseModel, Field, model_validator

from app.schemas.workout import PrimaryGroup


class LoadScheme(str, Enum):
    """How weight is added to a machine."""
    PLATE_LOADED = "plate_loaded"
    STACK = "stack"


class MachineInfo(BaseModel):
    """Catalog entry describing a single machine."""

    machine_id: str = Field(..., description="Unique id, e.g. 'Leg Press'")
    display_name: str = Field(..., description="Name shown to the user")
    english_name: str
    icon_name: str
    group: PrimaryGroup
    description: str = ""
    load_scheme: LoadScheme = LoadScheme.STACK
    stack_increment_kg: Optional[float] = Field(
        default=5.0, gt=0.0,
        description="Weight per stack slot (stack machines only)",
    )

    @model_validator(mode="after")
    def validate_load_scheme(self) -> Self:
        if self.load_scheme == LoadScheme.PLATE_LOADED:
            self.stack_increment_kg = None
        elif self.stack_increment_kg is None:
            raise ValueError(
                f"Stack machine '{self.machine_id}' requires stack_increment_kg"
            )
        return self
