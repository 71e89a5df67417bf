"""
Scheduler — training days and daily focus.

Two independent questions are answered here:

1. **Is this date a training day?**  Manual overrides (``YYYY-MM-DD`` →
   bool) always win; otherwise the Monday-based weekday is looked up in
   the profile's training days.
2. **Which focus applies?**  The profile's split (or, for ``auto``, a
   split inferred from the number of weekly training days) defines a
   fixed cyclic order of focuses.  With a previous focus the next one in
   the cycle is returned; without history the date's position among the
   week's training days indexes the cycle.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Mapping
from typing import Optional

from app.planner.intensity import is_deload_week
from app.schemas.profile import TrainingSplit, UserProfile
from app.schemas.state import day_key
from app.schemas.workout import FocusType, TrainingFocus

# ======================================================================
# Configuration
# ======================================================================

# Days scanned ahead by :func:`next_training_day`.
_LOOKAHEAD_DAYS = 7

_SPLIT_ORDERS: dict[TrainingSplit, list[FocusType]] = {
    TrainingSplit.AUTO: [FocusType.FULL_BODY],
    TrainingSplit.FULL_BODY: [FocusType.FULL_BODY],
    TrainingSplit.PUSH_PULL_LEGS: [FocusType.PUSH, FocusType.PULL, FocusType.LEGS],
    TrainingSplit.UPPER_LOWER: [FocusType.UPPER, FocusType.LOWER],
    TrainingSplit.PPLUL: [
        FocusType.PUSH, FocusType.PULL, FocusType.LEGS,
        FocusType.UPPER, FocusType.LOWER,
    ],
    TrainingSplit.PPLUPL: [
        FocusType.PUSH, FocusType.PULL, FocusType.LEGS,
        FocusType.UPPER, FocusType.PUSH, FocusType.LEGS,
    ],
}


def monday_based_weekday(day: datetime.date) -> int:
    """Weekday of *day* with Monday=1 .. Sunday=7."""
    return day.isoweekday()


# ======================================================================
# Training days
# ======================================================================


def should_train(day: datetime.date, training_days: Iterable[int],
                 overrides: Optional[Mapping[str, bool]] = None) -> bool:
    """Whether *day* is a training day.

    An override for the day is authoritative: the weekly pattern is not
    consulted at all when one exists.
    """
    if overrides:
        override = overrides.get(day_key(day))
        if override is not None:
            return override
    return monday_based_weekday(day) in set(training_days)


def next_training_day(from_day: datetime.date, training_days: Iterable[int],
                      overrides: Optional[Mapping[str, bool]] = None) -> datetime.date:
    """First training day strictly after *from_day*, within a week.

    Falls back to the day after *from_day* when no day in the next seven
    trains (e.g. an empty pattern with no overrides).
    """
    days = list(training_days)
    for offset in range(1, _LOOKAHEAD_DAYS + 1):
        candidate = from_day + datetime.timedelta(days=offset)
        if should_train(candidate, days, overrides):
            return candidate
    return from_day + datetime.timedelta(days=1)


# ======================================================================
# Focus
# ======================================================================


def resolve_split(profile: UserProfile) -> TrainingSplit:
    """Effective split: ``auto`` is inferred from the weekly day count."""
    if profile.split != TrainingSplit.AUTO:
        return profile.split
    count = len(profile.training_days)
    if count == 3:
        return TrainingSplit.PUSH_PULL_LEGS
    if count == 4:
        return TrainingSplit.UPPER_LOWER
    if count == 5:
        return TrainingSplit.PPLUL
    if count >= 6:
        return TrainingSplit.PPLUPL
    return TrainingSplit.FULL_BODY


def focus_order(split: TrainingSplit) -> list[FocusType]:
    return list(_SPLIT_ORDERS[split])


def next_focus(current: FocusType, split: TrainingSplit) -> FocusType:
    """Focus following *current* in the split's cycle (wraps around).

    A focus that is not part of the cycle restarts it.
    """
    order = _SPLIT_ORDERS[split]
    if current in order:
        return order[(order.index(current) + 1) % len(order)]
    return order[0]


def training_day_index(day: datetime.date, training_days: Iterable[int]) -> int:
    """Position of *day* among the sorted training days (0 if absent)."""
    ordered = sorted(training_days)
    weekday = monday_based_weekday(day)
    if weekday in ordered:
        return ordered.index(weekday)
    return 0


def focus_for(day: datetime.date, profile: UserProfile,
              last_focus: Optional[FocusType] = None) -> TrainingFocus:
    """Focus for *day*.

    Args:
        day: The date being planned.
        profile: User profile (split, training days, cycle anchor).
        last_focus: Focus of the previous session, if any.  When absent
            the calendar position of *day* is used instead.
    """
    split = resolve_split(profile)
    if last_focus is not None:
        focus_type = next_focus(last_focus, split)
    else:
        order = _SPLIT_ORDERS[split]
        index = training_day_index(day, profile.training_days)
        focus_type = order[index % len(order)]

    return TrainingFocus(type=focus_type, is_deload=is_deload_week(profile, day))
