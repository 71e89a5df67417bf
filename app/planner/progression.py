"""
Progression updater — runs after (every change to) a logged session.

Rules
-----
* ``total_sessions`` counts sessions with **at least one** completed set,
  so partially done workouts count.
* ``level = max(level, total_sessions // 4)`` — it never decreases.
* ``missed_exercises`` is *replaced* by the machines of this session with
  zero completed sets.
* Every machine with at least one completed set:

  - beats its personal record if its recommended load is higher,
  - gets its next load stored in ``machine_loads``:
    ``+2.5`` kg (legs, back) or ``+1.25`` kg (other groups), rounded to
    the 2.5 kg grid, or −10 % on deload weeks; an RPE feedback below 6
    adds one more full step.

* Reps are always remembered, completed or not.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.catalog.machine_catalog import group_for
from app.planner.intensity import is_deload_week
from app.planner.routine import round_load
from app.schemas.profile import TrainingGoal
from app.schemas.progress import PersonalRecord
from app.schemas.state import AppState
from app.schemas.workout import PrimaryGroup

# ======================================================================
# Configuration
# ======================================================================

SESSIONS_PER_LEVEL = 4
DELOAD_LOAD_RETENTION = 0.9
EASY_FEEDBACK_THRESHOLD = 6.0

_LARGE_GROUPS = {PrimaryGroup.LEGS, PrimaryGroup.BACK}
LARGE_GROUP_INCREMENT_KG = 2.5
SMALL_GROUP_INCREMENT_KG = 1.25


def progressed_load(current: float, goal: TrainingGoal, is_deload: bool,
                    group: PrimaryGroup = PrimaryGroup.CHEST) -> float:
    """Load to prescribe next time after working at *current*.

    ``goal`` is accepted for symmetry with the routine builder; the
    increments only depend on the muscle group.
    """
    if is_deload:
        return round_load(current * DELOAD_LOAD_RETENTION)

    increment = LARGE_GROUP_INCREMENT_KG if group in _LARGE_GROUPS else SMALL_GROUP_INCREMENT_KG
    return round_load(current + increment)


def finalize_session(state: AppState, day: datetime.date,
                     feedback: Optional[float] = None) -> list[PersonalRecord]:
    """Recompute progress from the session logged on *day*.

    Mutates *state* in place (progress and the per-machine maps).

    Args:
        state: Application state.
        day: Date of the session to finalize.
        feedback: Optional session RPE (0–10).  Below 6 means "too
            easy" and doubles the load progression.

    Returns:
        Personal records broken by this session, in exercise order.
        Empty when there is no session on *day*.
    """
    session = state.session_on(day)
    if session is None:
        return []

    progress = state.progress
    progress.total_sessions = sum(1 for s in state.sessions if s.started)
    progress.level = max(progress.level, progress.total_sessions // SESSIONS_PER_LEVEL)
    progress.last_session_date = day
    progress.missed_exercises = [e.machine for e in session.exercises if e.completed_sets == 0]

    profile = state.profile
    if profile is None:
        return []

    deload = is_deload_week(profile, day)
    records: list[PersonalRecord] = []

    for exercise in session.exercises:
        group = group_for(exercise.machine)

        if exercise.completed_sets > 0:
            current_record = progress.personal_records.get(exercise.machine, 0.0)
            if exercise.recommended_load_kg > current_record:
                progress.personal_records[exercise.machine] = exercise.recommended_load_kg
                records.append(PersonalRecord(
                    exercise_name=exercise.name,
                    machine=exercise.machine,
                    load_kg=exercise.recommended_load_kg,
                ))

            next_load = progressed_load(exercise.recommended_load_kg, profile.goal, deload, group)
            if feedback is not None and feedback < EASY_FEEDBACK_THRESHOLD:
                next_load += progressed_load(0.0, profile.goal, False, group)
            state.machine_loads[exercise.machine] = next_load

        state.machine_reps[exercise.machine] = exercise.reps

    return records
