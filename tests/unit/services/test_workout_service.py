"""
Tests for the workout service.

Session get-or-create, preview, set logging, substitution and the
calendar views, against an in-memory SQLite database.
"""

import datetime
import uuid

import pytest
from fastapi import HTTPException
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

import app.db.base  # noqa: F401
from app.catalog.machine_catalog import equivalents_for, get_machine
from app.schemas.profile import TrainingGoal, UserProfile
from app.schemas.progress import SetCompletionEvent
from app.schemas.workout import FocusType, WorkoutExerciseUpdate
from app.services.state_store import StateStore
from app.services.workout_service import WorkoutService

MONDAY = datetime.date(2026, 1, 5)
TUESDAY = datetime.date(2026, 1, 6)
WEDNESDAY = datetime.date(2026, 1, 7)
FRIDAY = datetime.date(2026, 1, 9)


# ======================================================================
# Helpers
# ======================================================================


@pytest.fixture
def store():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield StateStore(engine)
    engine.dispose()


def _make_profile() -> UserProfile:
    return UserProfile(
        age=25, weight_kg=70.0, goal=TrainingGoal.HYPERTROPHY, training_days=[1, 3, 5],
        created_at=datetime.datetime.combine(MONDAY, datetime.time()),
    )


def _make_service(store: StateStore, with_profile: bool = True) -> WorkoutService:
    if with_profile:
        store.update_profile(_make_profile())
    return WorkoutService(store, clock=lambda: MONDAY)


# ======================================================================
# Sessions
# ======================================================================


class TestSessionFor:

    def test_requires_profile(self, store):
        service = _make_service(store, with_profile=False)
        with pytest.raises(HTTPException) as exc:
            service.session_for(MONDAY)
        assert exc.value.status_code == 409

    def test_get_or_create_is_idempotent(self, store):
        service = _make_service(store)
        first = service.session_for(MONDAY)
        second = service.session_for(MONDAY)
        assert first is second
        assert len(store.state.sessions) == 1

    def test_generated_session_is_persisted(self, store):
        service = _make_service(store)
        session = service.session_for(MONDAY)

        reloaded = StateStore(store.engine)
        reloaded.load()
        assert reloaded.state.session_on(MONDAY) == session

    def test_focus_follows_calendar(self, store):
        service = _make_service(store)
        assert service.session_for(MONDAY).focus == FocusType.PUSH
        assert service.session_for(WEDNESDAY).focus == FocusType.PULL

    def test_focus_ignores_opening_order(self, store):
        service = _make_service(store)
        for day in (MONDAY, FRIDAY, WEDNESDAY):
            service.session_for(day)

        focuses = [store.state.session_on(day).focus for day in (MONDAY, WEDNESDAY, FRIDAY)]
        assert focuses == [FocusType.PUSH, FocusType.PULL, FocusType.LEGS]
        assert focuses == [d.focus for d in service.week_plan(MONDAY) if d.is_training]

    def test_focus_ignores_opened_rest_day(self, store):
        service = _make_service(store)
        service.session_for(MONDAY)
        service.session_for(TUESDAY)
        assert service.session_for(WEDNESDAY).focus == FocusType.PULL

    def test_session_matches_fresh_store(self, store):
        service = _make_service(store)
        service.session_for(FRIDAY)
        wednesday = service.session_for(WEDNESDAY)

        fresh_engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
        SQLModel.metadata.create_all(fresh_engine)
        fresh = _make_service(StateStore(fresh_engine))
        assert fresh.session_for(WEDNESDAY) == wednesday
        fresh_engine.dispose()

    def test_preview_does_not_persist(self, store):
        service = _make_service(store)
        preview = service.preview_session(MONDAY)
        assert preview is not None
        assert store.state.sessions == []
        assert service.session_for(MONDAY) == preview

    def test_preview_rest_day(self, store):
        service = _make_service(store)
        assert service.preview_session(TUESDAY) is None

    def test_preview_without_profile(self, store):
        service = _make_service(store, with_profile=False)
        assert service.preview_session(MONDAY) is None

    def test_preview_honours_override(self, store):
        service = _make_service(store)
        store.set_schedule_override(TUESDAY, True)
        assert service.preview_session(TUESDAY) is not None

    def test_finalize_unknown_session(self, store):
        service = _make_service(store)
        with pytest.raises(HTTPException) as exc:
            service.finalize(MONDAY)
        assert exc.value.status_code == 404


# ======================================================================
# Exercises
# ======================================================================


class TestSetLogging:

    def test_events(self, store):
        service = _make_service(store)
        exercise = service.session_for(MONDAY).exercises[0]
        assert exercise.sets == 4

        events = [service.adjust_completed_sets(MONDAY, exercise.id, 1).event for _ in range(5)]
        assert events == [
            SetCompletionEvent.SET_LOGGED,
            SetCompletionEvent.SET_LOGGED,
            SetCompletionEvent.SET_LOGGED,
            SetCompletionEvent.TARGET_REACHED,
            SetCompletionEvent.OVER_TARGET,
        ]
        assert exercise.completed_sets == 5

    def test_progress_recomputed_after_each_set(self, store):
        service = _make_service(store)
        exercise = service.session_for(MONDAY).exercises[0]

        result = service.adjust_completed_sets(MONDAY, exercise.id, 1)
        assert store.state.progress.total_sessions == 1
        assert [r.machine for r in result.personal_records] == [exercise.machine]
        assert exercise.machine not in store.state.progress.missed_exercises

    def test_decrement_floors_at_zero(self, store):
        service = _make_service(store)
        exercise = service.session_for(MONDAY).exercises[0]

        result = service.adjust_completed_sets(MONDAY, exercise.id, -1)
        assert result.event is None
        assert result.exercise.completed_sets == 0
        assert store.state.progress.total_sessions == 0

    def test_unknown_exercise(self, store):
        service = _make_service(store)
        service.session_for(MONDAY)
        with pytest.raises(HTTPException) as exc:
            service.adjust_completed_sets(MONDAY, uuid.uuid4(), 1)
        assert exc.value.status_code == 404

    def test_update_exercise_remembers_load_and_reps(self, store):
        service = _make_service(store)
        exercise = service.session_for(MONDAY).exercises[0]

        updated = service.update_exercise(MONDAY, exercise.id, WorkoutExerciseUpdate(
            recommended_load_kg=42.5, reps=9, notes="座椅第3档",
        ))
        assert updated.recommended_load_kg == 42.5
        assert updated.notes == "座椅第3档"
        assert updated.sets == 4
        assert store.state.machine_loads[exercise.machine] == 42.5
        assert store.state.machine_reps[exercise.machine] == 9


class TestSubstitution:

    def test_substitute_equivalent(self, store):
        service = _make_service(store)
        exercise = service.session_for(MONDAY).exercises[0]
        group = get_machine(exercise.machine).group
        replacement = next(m for m in equivalents_for(exercise.machine) if m.machine_id != exercise.machine)
        store.state.machine_loads[replacement.machine_id] = 33.0

        updated = service.substitute_exercise(MONDAY, exercise.id, replacement.machine_id)
        assert updated.machine == replacement.machine_id
        assert updated.name == replacement.display_name
        assert updated.recommended_load_kg == 33.0
        assert store.state.machine_preferences[group.value] == replacement.machine_id

    def test_substitute_non_equivalent(self, store):
        service = _make_service(store)
        exercise = service.session_for(MONDAY).exercises[0]
        with pytest.raises(HTTPException) as exc:
            service.substitute_exercise(MONDAY, exercise.id, "Ab Crunch")
        assert exc.value.status_code == 400


# ======================================================================
# Calendar views
# ======================================================================


class TestCalendarViews:

    def test_week_plan(self, store):
        service = _make_service(store)
        store.set_schedule_override(TUESDAY, True)
        plan = service.week_plan(WEDNESDAY)

        assert [d.date for d in plan] == [MONDAY + datetime.timedelta(days=i) for i in range(7)]
        assert [d.is_training for d in plan] == [True, True, True, False, True, False, False]
        assert plan[1].is_override is True
        assert plan[0].focus == FocusType.PUSH
        assert plan[3].focus is None

    def test_week_plan_without_profile(self, store):
        service = _make_service(store, with_profile=False)
        assert not any(d.is_training for d in service.week_plan())

    def test_overview(self, store):
        service = _make_service(store)
        overview = service.overview()
        assert overview.level == 0
        assert overview.level_tier == "foundation"
        assert overview.cycle_week == 1
        assert overview.is_deload_week is False
        assert overview.is_training_day is True
        assert overview.next_training_day == WEDNESDAY
        assert overview.lapse_adjusted is False

    def test_overview_flags_session_below_level(self, store):
        service = _make_service(store)
        service.session_for(MONDAY)
        store.state.progress.level = 3
        assert service.overview(MONDAY).lapse_adjusted is True

    def test_overview_requires_profile(self, store):
        service = _make_service(store, with_profile=False)
        with pytest.raises(HTTPException) as exc:
            service.overview()
        assert exc.value.status_code == 409
