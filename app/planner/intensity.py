"""
Intensity and periodization model.

Periodization
-------------
Training is organised in fixed **5-week blocks** anchored on the
profile's creation date.  Week 5 of every block is a **deload week**:
fewer sets and lighter loads to let the athlete recover.

    cycle_week = (whole weeks since creation) % 5 + 1

Readiness
---------
Readiness is a multiplicative scalar (~0.8–1.15) applied to the goal's
baseline sets, reps and loads:

    readiness = min(1.15, age × weight × boost × deload)

where

* ``age``    — 1.0 under 30 stepping down to 0.86 at 60+,
* ``weight`` — 0.94 under 55 kg up to 1.05 from 95 kg,
* ``boost``  — ``1.0 + level × 0.03``, softened by the lapse penalty
  (×0.95 after more than 7 days without training, ×0.90 after more than
  14 days),
* ``deload`` — 0.85 on deload weeks, else 1.0.

The lapse penalty is the planner's auto-regulation: a long break lowers
the recommendation without resetting the stored level.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.schemas.profile import UserProfile
from app.schemas.progress import ProgressState
from app.schemas.workout import IntensityProfile

# ======================================================================
# Configuration
# ======================================================================

CYCLE_WEEKS = 5
DELOAD_WEEK = 5
BLOCK_WEEKS = 4

READINESS_CAP = 1.15
LEVEL_BOOST_PER_LEVEL = 0.03
DELOAD_MULTIPLIER = 0.85

# (upper bound exclusive, factor); the last entry catches everything else.
_AGE_FACTORS: list[tuple[float, float]] = [
    (30, 1.0),
    (40, 0.97),
    (50, 0.94),
    (60, 0.90),
    (float("inf"), 0.86),
]

_WEIGHT_FACTORS: list[tuple[float, float]] = [
    (55.0, 0.94),
    (75.0, 1.0),
    (95.0, 1.03),
    (float("inf"), 1.05),
]

# (more than N days since last session, boost multiplier), checked in order.
_LAPSE_PENALTIES: list[tuple[int, float]] = [
    (14, 0.90),
    (7, 0.95),
]


def _bracket(value: float, table: list[tuple[float, float]]) -> float:
    for upper, factor in table:
        if value < upper:
            return factor
    return table[-1][1]


def age_factor(age: int) -> float:
    return _bracket(age, _AGE_FACTORS)


def weight_factor(weight_kg: float) -> float:
    return _bracket(weight_kg, _WEIGHT_FACTORS)


def lapse_penalty(last_session: Optional[datetime.date], as_of: datetime.date) -> float:
    """Multiplier on the progression boost after a training lapse."""
    if last_session is None:
        return 1.0
    days_since = (as_of - last_session).days
    for threshold, penalty in _LAPSE_PENALTIES:
        if days_since > threshold:
            return penalty
    return 1.0


# ======================================================================
# Periodization
# ======================================================================


def weeks_since_creation(profile: UserProfile, reference_date: datetime.date) -> int:
    """Whole weeks between profile creation and *reference_date*.

    Dates before the creation date count as week zero.
    """
    created = profile.created_at
    if isinstance(created, datetime.datetime):
        created = created.date()
    return max(0, (reference_date - created).days // 7)


def cycle_week(profile: UserProfile, reference_date: datetime.date) -> int:
    """Week of the 5-week periodization block (1..5)."""
    return weeks_since_creation(profile, reference_date) % CYCLE_WEEKS + 1


def is_deload_week(profile: UserProfile, reference_date: datetime.date) -> bool:
    return cycle_week(profile, reference_date) == DELOAD_WEEK


def block_index(profile: UserProfile, reference_date: datetime.date) -> int:
    """4-week block number, used to seed the exercise shuffle."""
    return weeks_since_creation(profile, reference_date) // BLOCK_WEEKS


# ======================================================================
# Main entry point
# ======================================================================


def intensity_profile(profile: UserProfile, progress: ProgressState,
                      as_of: datetime.date) -> IntensityProfile:
    """Compute level and readiness for a training day.

    Args:
        profile: User profile.
        progress: Current progress snapshot.
        as_of: Day being planned; drives the deload and lapse checks.

    Returns:
        :class:`IntensityProfile` with the stored level, the readiness
        multiplier and the previously missed exercises.
    """
    level = max(0, progress.level)

    boost = 1.0 + level * LEVEL_BOOST_PER_LEVEL
    boost *= lapse_penalty(progress.last_session_date, as_of)
    deload = DELOAD_MULTIPLIER if is_deload_week(profile, as_of) else 1.0

    readiness = min(
        READINESS_CAP,
        age_factor(profile.age) * weight_factor(profile.weight_kg) * boost * deload,
    )

    return IntensityProfile(
        level=level,
        readiness=readiness,
        missed_exercises=list(progress.missed_exercises),
    )
