"""
Loading helper — turn a recommended load into something you can rack.

* **Plate-loaded** machines: greedy breakdown of the load over the
  standard plates, optionally per side.
* **Selectorized stacks**: best pin slot near ``target / increment``,
  optionally completed by a 2.5 kg micro plate when the stack steps are
  coarse enough for it to matter.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.catalog.machine_catalog import get_machine
from app.catalog.machine_profile import LoadScheme

PLATES_KG: list[float] = [25.0, 20.0, 15.0, 10.0, 5.0, 2.5, 1.25]
MICRO_PLATE_KG = 2.5
MICRO_PLATE_MIN_INCREMENT = 4.5


class PlateCount(BaseModel):
    plate_kg: float
    count: int = Field(..., ge=1)


class PlateLoading(BaseModel):
    """Plates to load for a plate-loaded machine."""

    target_kg: float
    base_kg: float
    split_sides: bool
    per_side_kg: float = Field(..., description="Load to add (per side when split)")
    plates: list[PlateCount] = Field(default_factory=list)

    @property
    def loaded_kg(self) -> float:
        """Actual load reached by the listed plates."""
        added = sum(p.plate_kg * p.count for p in self.plates)
        return self.base_kg + (added * 2 if self.split_sides else added)


class StackLoading(BaseModel):
    """Pin position on a weight stack."""

    target_kg: float
    increment_kg: float
    slot: int = Field(..., ge=0)
    use_micro_plate: bool
    actual_kg: float


def plate_breakdown(target_kg: float, base_kg: float = 0.0,
                    split_sides: bool = False) -> PlateLoading:
    """Greedy plate breakdown, heaviest plates first.

    Whatever cannot be matched with the smallest plate is left off.
    """
    to_load = max(0.0, target_kg - base_kg)
    per_side = to_load / 2.0 if split_sides else to_load

    remaining = per_side
    plates: list[PlateCount] = []
    for plate in PLATES_KG:
        count = int(remaining / plate)
        if count > 0:
            plates.append(PlateCount(plate_kg=plate, count=count))
            remaining -= count * plate

    return PlateLoading(
        target_kg=target_kg,
        base_kg=base_kg,
        split_sides=split_sides,
        per_side_kg=per_side,
        plates=plates,
    )


def stack_pin(target_kg: float, increment_kg: float) -> StackLoading:
    """Closest pin slot (with or without micro plate) to *target_kg*.

    Ties keep the first combination found: lower slot first, plain stack
    before stack plus micro plate.
    """
    if increment_kg <= 0:
        raise ValueError("increment_kg must be positive")

    supports_micro = increment_kg >= MICRO_PLATE_MIN_INCREMENT
    approx = int(target_kg / increment_kg)

    best_slot = 0
    use_micro = False
    min_diff = float("inf")
    for slot in range(max(0, approx - 1), approx + 2):
        base = slot * increment_kg
        diff = abs(target_kg - base)
        if diff < min_diff:
            min_diff, best_slot, use_micro = diff, slot, False
        if supports_micro:
            diff = abs(target_kg - (base + MICRO_PLATE_KG))
            if diff < min_diff:
                min_diff, best_slot, use_micro = diff, slot, True

    actual = best_slot * increment_kg + (MICRO_PLATE_KG if use_micro else 0.0)
    return StackLoading(
        target_kg=target_kg,
        increment_kg=increment_kg,
        slot=best_slot,
        use_micro_plate=use_micro,
        actual_kg=actual,
    )


def loading_for(machine_id: str, target_kg: float, base_kg: float = 0.0,
                split_sides: bool = False) -> Optional[PlateLoading | StackLoading]:
    """Loading suggestion for a catalog machine, ``None`` if unknown."""
    info = get_machine(machine_id)
    if info is None:
        return None
    if info.load_scheme == LoadScheme.PLATE_LOADED:
        return plate_breakdown(target_kg, base_kg, split_sides)
    return stack_pin(target_kg, info.stack_increment_kg)
