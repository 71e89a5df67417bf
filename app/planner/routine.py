"""
Routine builder — which machines, how many sets, reps and kilograms.

Algorithm
---------
1. ``sets = clamp(int(max_sets × readiness) − deload, set_range)``
2. ``reps = clamp(int(max_reps × readiness), rep_range)``
3. Filter the catalog on the focus's muscle groups (whole catalog when
   fewer than 4 machines match).
4. Deterministic shuffle seeded by the 4-week block index.
5. Priority pass: missed machines first, then preferred machines.
6. Keep ``clamp(5 + level // 2, 5, 8)`` machines.
7. Per machine: tempo, target RPE, recommended load and reps (stored
   per-machine overrides win over computed values).

Steps 4 and 5 are two separate stable sorts; a single combined key picks
different machines.

Determinism
-----------
The shuffle uses a 64-bit wrapping linear-congruential recurrence
(multiplier 1664525, increment 1013904223) advanced once per comparison
of a stable sort.  The same block index over the same catalog order
always yields the same routine, so a session can be regenerated for any
past date without stored random state.
"""

from __future__ import annotations

import datetime
import math
import uuid
from collections.abc import Mapping, Sequence
from functools import cmp_to_key
from typing import Optional

from app.catalog.machine_catalog import all_machines
from app.catalog.machine_profile import MachineInfo
from app.planner.intensity import block_index, intensity_profile
from app.planner.scheduler import focus_for
from app.schemas.profile import TrainingGoal, UserProfile
from app.schemas.progress import ProgressState
from app.schemas.workout import (
    FocusType,
    IntensityProfile,
    PrimaryGroup,
    TrainingFocus,
    WorkoutExercise,
    WorkoutSession,
)

# ======================================================================
# Configuration
# ======================================================================

LOAD_STEP_KG = 2.5
MIN_LOAD_KG = 5.0
DELOAD_LOAD_FACTOR = 0.85

MIN_CANDIDATES = 4
MIN_EXERCISES = 5
MAX_EXERCISES = 8

MAX_TARGET_RPE = 9.0
RPE_PER_LEVEL = 0.1
ADVANCED_TEMPO_LEVEL = 6
BASE_TEMPO = "2-1-2"
ADVANCED_TEMPO = "3-1-2"

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
_UINT64_MASK = (1 << 64) - 1

DEFAULT_NOTE = "建议重量为参考值，若RPE偏离目标请微调。"

# Fraction of body weight a machine for this group starts at.
GROUP_LOAD_FACTORS: dict[PrimaryGroup, float] = {
    PrimaryGroup.LEGS: 0.70,
    PrimaryGroup.BACK: 0.55,
    PrimaryGroup.CHEST: 0.45,
    PrimaryGroup.CALVES: 0.40,
    PrimaryGroup.SHOULDERS: 0.30,
    PrimaryGroup.ARMS: 0.25,
    PrimaryGroup.CORE: 0.20,
}

GOAL_LOAD_FACTORS: dict[TrainingGoal, float] = {
    TrainingGoal.STRENGTH: 1.05,
    TrainingGoal.HYPERTROPHY: 1.0,
    TrainingGoal.FAT_LOSS: 0.9,
}

_NAMESPACE = uuid.UUID("6f1d2a52-8a8e-4b55-9d0c-2b7c1f0e5a31")


# ======================================================================
# Load arithmetic
# ======================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def round_load(value: float) -> float:
    """Nearest multiple of 2.5 kg, never below 5 kg."""
    return max(MIN_LOAD_KG, round_half_up(value / LOAD_STEP_KG) * LOAD_STEP_KG)


def recommended_load_kg(group: PrimaryGroup, profile: UserProfile, readiness: float,
                        is_deload: bool) -> float:
    """Starting load for a machine with no recorded history."""
    deload_factor = DELOAD_LOAD_FACTOR if is_deload else 1.0
    load = (profile.weight_kg * GROUP_LOAD_FACTORS[group] * GOAL_LOAD_FACTORS[profile.goal]
            * readiness * deload_factor)
    return round_load(load)


# ======================================================================
# Selection
# ======================================================================


def seeded_shuffle(machines: Sequence[MachineInfo], seed: int) -> list[MachineInfo]:
    """Reproducible pseudo-random ordering of *machines*.

    Every comparison of a stable sort advances the LCG state and reports
    "in order" when the new state is even.
    """
    state = seed & _UINT64_MASK

    def compare(_a: MachineInfo, _b: MachineInfo) -> int:
        nonlocal state
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) & _UINT64_MASK
        return -1 if state % 2 == 0 else 0

    return sorted(machines, key=cmp_to_key(compare))


def prioritize(machines: Sequence[MachineInfo], missed: Sequence[str],
               preferences: Mapping[str, str]) -> list[MachineInfo]:
    """Stable sort: missed machines, then preferred machines, then the rest."""
    missed_ids = set(missed)

    def rank(info: MachineInfo) -> tuple[int, int]:
        is_missed = info.machine_id in missed_ids
        is_preferred = preferences.get(info.group.value) == info.machine_id
        return (0 if is_missed else 1, 0 if is_preferred else 1)

    return sorted(machines, key=rank)


def candidate_machines(focus: TrainingFocus) -> list[MachineInfo]:
    catalog = all_machines()
    groups = set(focus.primary_groups)
    matching = [m for m in catalog if m.group in groups]
    if len(matching) < MIN_CANDIDATES:
        return catalog
    return matching


def pick_count(level: int) -> int:
    return min(MAX_EXERCISES, max(MIN_EXERCISES, MIN_EXERCISES + level // 2))


def tempo_for(level: int) -> str:
    return ADVANCED_TEMPO if level >= ADVANCED_TEMPO_LEVEL else BASE_TEMPO


def target_rpe_for(goal: TrainingGoal, level: int) -> float:
    # Two decimals: base 7.0 at level 3 is 7.3, not 7.300000000000001.
    return round(min(MAX_TARGET_RPE, goal.parameters.base_rpe + level * RPE_PER_LEVEL), 2)


# ======================================================================
# Main entry points
# ======================================================================


def build_routine(intensity: IntensityProfile, goal: TrainingGoal, focus: TrainingFocus,
                  profile: UserProfile, load_overrides: Mapping[str, float],
                  reps_overrides: Mapping[str, int], machine_preferences: Mapping[str, str],
                  reference_date: datetime.date,
                  note: str = DEFAULT_NOTE) -> list[WorkoutExercise]:
    """Build the ordered exercise list of a session.

    Args:
        intensity: Level, readiness and missed machines.
        goal: Training goal (set/rep ranges, rest, base RPE).
        focus: Focus of the day, including its deload flag.
        profile: User profile (body weight, cycle anchor).
        load_overrides: Machine id -> last used load.
        reps_overrides: Machine id -> last used reps.
        machine_preferences: Muscle group -> preferred machine id.
        reference_date: Day being planned; selects the shuffle block.
        note: Note attached to every exercise.

    Returns:
        Between 5 and 8 :class:`WorkoutExercise` entries (fewer only if
        the catalog itself is smaller).
    """
    params = goal.parameters
    deload_sets = 1 if focus.is_deload else 0
    base_sets = params.clamp_sets(int(params.max_sets * intensity.readiness) - deload_sets)
    base_reps = params.clamp_reps(int(params.max_reps * intensity.readiness))

    candidates = candidate_machines(focus)
    candidates = seeded_shuffle(candidates, block_index(profile, reference_date))
    candidates = prioritize(candidates, intensity.missed_exercises, machine_preferences)
    selected = candidates[:pick_count(intensity.level)]

    tempo = tempo_for(intensity.level)
    rpe = target_rpe_for(goal, intensity.level)

    exercises: list[WorkoutExercise] = []
    for position, info in enumerate(selected):
        load = load_overrides.get(info.machine_id)
        if load is None:
            load = recommended_load_kg(info.group, profile, intensity.readiness, focus.is_deload)
        reps = reps_overrides.get(info.machine_id, base_reps)
        exercises.append(WorkoutExercise(
            id=uuid.uuid5(_NAMESPACE, f"{reference_date.isoformat()}/{position}/{info.machine_id}"),
            name=info.display_name,
            machine=info.machine_id,
            sets=base_sets,
            reps=reps,
            rest_seconds=params.rest_seconds,
            tempo=tempo,
            target_rpe=rpe,
            recommended_load_kg=load,
            notes=note,
        ))
    return exercises


def generate_session(day: datetime.date, profile: UserProfile, progress: ProgressState,
                     load_overrides: Mapping[str, float], reps_overrides: Mapping[str, int],
                     machine_preferences: Mapping[str, str],
                     last_focus: Optional[FocusType] = None,
                     note: str = DEFAULT_NOTE) -> WorkoutSession:
    """Plan the session for *day* from profile, progress and overrides.

    Pure: the same inputs always produce an identical session, ids
    included.
    """
    intensity = intensity_profile(profile, progress, day)
    focus = focus_for(day, profile, last_focus)
    exercises = build_routine(
        intensity, profile.goal, focus, profile,
        load_overrides, reps_overrides, machine_preferences,
        reference_date=day, note=note,
    )
    return WorkoutSession(
        id=uuid.uuid5(_NAMESPACE, day.isoformat()),
        date=day,
        difficulty_level=intensity.level,
        focus=focus.type,
        exercises=exercises,
    )
