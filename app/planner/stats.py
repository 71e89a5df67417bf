"""
Training statistics derived from the stored sessions.

All functions are read-only views over an :class:`AppState`.
"""

from __future__ import annotations

import datetime
from collections import Counter

from app.catalog.machine_catalog import group_for
from app.schemas.overview import Achievement, MuscleGroupSets, StrengthPoint, WeeklyCount
from app.schemas.state import AppState

FOUNDATION_MAX_LEVEL = 5
PROGRESSION_MAX_LEVEL = 15

# (key, title, description, metric, threshold)
_ACHIEVEMENTS: list[tuple[str, str, str, str, int]] = [
    ("first_session", "初出茅庐", "完成第1次训练", "sessions", 1),
    ("sessions_10", "坚持不懈", "累计训练10次", "sessions", 10),
    ("sessions_50", "健身达人", "累计训练50次", "sessions", 50),
    ("sessions_100", "超凡大师", "累计训练100次", "sessions", 100),
    ("level_5", "力量觉醒", "等级达到 Lv.5", "level", 5),
    ("level_20", "钢铁之躯", "等级达到 Lv.20", "level", 20),
]


def level_tier(level: int) -> str:
    if level < FOUNDATION_MAX_LEVEL:
        return "foundation"
    if level < PROGRESSION_MAX_LEVEL:
        return "progression"
    return "breakthrough"


def strength_history(state: AppState, machine_id: str) -> list[StrengthPoint]:
    """Load worked on *machine_id* per session, oldest first.

    Only sessions where the machine had at least one completed set count.
    """
    points: list[StrengthPoint] = []
    for session in sorted(state.sessions, key=lambda s: s.date):
        exercise = next((e for e in session.exercises if e.machine == machine_id), None)
        if exercise is not None and exercise.completed_sets > 0:
            points.append(StrengthPoint(date=session.date, load_kg=exercise.recommended_load_kg))
    return points


def muscle_group_sets(state: AppState) -> list[MuscleGroupSets]:
    """Completed sets per muscle group, most trained first."""
    counts: Counter[str] = Counter()
    for session in state.sessions:
        for exercise in session.exercises:
            if exercise.completed_sets > 0:
                counts[group_for(exercise.machine).value] += exercise.completed_sets
    return [MuscleGroupSets(group=group, sets=sets) for group, sets in counts.most_common()]


def week_start(day: datetime.date) -> datetime.date:
    """Monday of the ISO week containing *day*."""
    return day - datetime.timedelta(days=day.isoweekday() - 1)


def weekly_consistency(state: AppState) -> list[WeeklyCount]:
    """Number of stored sessions per ISO week, oldest week first."""
    counts: Counter[datetime.date] = Counter(week_start(s.date) for s in state.sessions)
    return [WeeklyCount(week_start=start, count=counts[start]) for start in sorted(counts)]


def achievements(state: AppState) -> list[Achievement]:
    metrics = {
        "sessions": state.progress.total_sessions,
        "level": state.progress.level,
    }
    return [
        Achievement(key=key, title=title, description=description,
                    unlocked=metrics[metric] >= threshold)
        for key, title, description, metric, threshold in _ACHIEVEMENTS
    ]
