"""Tests for training statistics."""

import datetime

import pytest

from app.planner.stats import (
    achievements,
    level_tier,
    muscle_group_sets,
    strength_history,
    week_start,
    weekly_consistency,
)
from app.schemas.progress import ProgressState
from app.schemas.state import AppState
from app.schemas.workout import WorkoutExercise, WorkoutSession


def _make_exercise(machine: str, load: float = 40.0, completed: int = 0) -> WorkoutExercise:
    return WorkoutExercise(
        name=machine, machine=machine, sets=3, reps=10, rest_seconds=90,
        tempo="2-1-2", target_rpe=7.5, recommended_load_kg=load, completed_sets=completed,
    )


def _make_state() -> AppState:
    return AppState(sessions=[
        WorkoutSession(date=datetime.date(2026, 1, 14), exercises=[
            _make_exercise("Leg Press", load=65.0, completed=3),
            _make_exercise("Chest Press", load=40.0, completed=2),
        ]),
        WorkoutSession(date=datetime.date(2026, 1, 5), exercises=[
            _make_exercise("Leg Press", load=60.0, completed=3),
            _make_exercise("Leg Curl", load=30.0, completed=3),
        ]),
        WorkoutSession(date=datetime.date(2026, 1, 7), exercises=[
            _make_exercise("Leg Press", load=62.5, completed=0),
        ]),
    ])


class TestLevelTier:

    @pytest.mark.parametrize("level,expected", [
        (0, "foundation"), (4, "foundation"), (5, "progression"), (14, "progression"), (15, "breakthrough"),
    ])
    def test_tiers(self, level, expected):
        assert level_tier(level) == expected


class TestStrengthHistory:

    def test_sorted_and_only_completed(self):
        points = strength_history(_make_state(), "Leg Press")
        assert [(p.date, p.load_kg) for p in points] == [
            (datetime.date(2026, 1, 5), 60.0),
            (datetime.date(2026, 1, 14), 65.0),
        ]

    def test_unused_machine(self):
        assert strength_history(_make_state(), "Pec Deck") == []


class TestMuscleGroupSets:

    def test_descending_totals(self):
        result = [(g.group, g.sets) for g in muscle_group_sets(_make_state())]
        assert result == [("legs", 9), ("chest", 2)]

    def test_empty(self):
        assert muscle_group_sets(AppState()) == []


class TestWeeklyConsistency:

    def test_week_start_is_monday(self):
        assert week_start(datetime.date(2026, 1, 11)) == datetime.date(2026, 1, 5)
        assert week_start(datetime.date(2026, 1, 5)) == datetime.date(2026, 1, 5)

    def test_counts_per_week(self):
        result = [(w.week_start, w.count) for w in weekly_consistency(_make_state())]
        assert result == [
            (datetime.date(2026, 1, 5), 2),
            (datetime.date(2026, 1, 12), 1),
        ]


class TestAchievements:

    def test_fresh_state(self):
        assert not any(a.unlocked for a in achievements(AppState()))
        assert len(achievements(AppState())) == 6

    def test_unlocks(self):
        state = AppState(progress=ProgressState(total_sessions=12, level=5))
        unlocked = {a.key for a in achievements(state) if a.unlocked}
        assert unlocked == {"first_session", "sessions_10", "level_5"}
