"""
Workout service.

Session retrieval (get-or-create), exercise edits, set logging,
substitutions and the read-only calendar views.  Every mutation goes
through the :class:`StateStore`, which persists it.

The clock is injected so "today" can be pinned in tests and scripts;
all planner functions receive explicit dates.
"""

import datetime
import logging
import uuid
from typing import Callable, Optional

from fastapi import HTTPException, status

from app.catalog.machine_catalog import display_name_for, equivalents_for, group_for
from app.core.config import settings
from app.planner.intensity import cycle_week, is_deload_week
from app.planner.routine import generate_session
from app.planner.scheduler import focus_for, next_training_day, should_train
from app.planner.stats import level_tier
from app.schemas.overview import DayPlan, TrainingOverview
from app.schemas.profile import UserProfile
from app.schemas.progress import PersonalRecord, SetAdjustment, SetCompletionEvent
from app.schemas.state import day_key
from app.schemas.workout import WorkoutExercise, WorkoutExerciseUpdate, WorkoutSession
from app.services.state_store import StateStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.date]


class WorkoutService:
    """Service for workout planning and logging."""

    def __init__(self, store: StateStore, clock: Clock = datetime.date.today):
        self.store = store
        self.clock = clock

    @property
    def state(self):
        return self.store.state

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def session_for(self, day: datetime.date) -> WorkoutSession:
        """Stored session for *day*, generated and persisted on first access."""
        existing = self.state.session_on(day)
        if existing is not None:
            return existing

        session = self._generate(day, self._require_profile())
        self.state.replace_session(session)
        self.store.persist()
        logger.info("Generated session for %s: focus=%s, %d exercises, level %d",
                    day, session.focus.value if session.focus else None,
                    len(session.exercises), session.difficulty_level)
        return session

    def preview_session(self, day: datetime.date) -> Optional[WorkoutSession]:
        """Session that would be planned for *day*, without storing it.

        ``None`` without a profile or on a rest day (unless a session is
        already stored for that day).
        """
        existing = self.state.session_on(day)
        if existing is not None:
            return existing

        profile = self.state.profile
        if profile is None:
            return None
        if not should_train(day, profile.training_days, self.state.schedule_overrides):
            return None
        return self._generate(day, profile)

    def finalize(self, day: datetime.date, feedback: Optional[float] = None) -> list[PersonalRecord]:
        self._get_session_or_404(day)
        return self.store.finalize(day, feedback)

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def update_exercise(self, day: datetime.date, exercise_id: uuid.UUID,
                        data: WorkoutExerciseUpdate) -> WorkoutExercise:
        """Apply the fields set in *data*; load and reps are remembered per machine."""
        _, exercise = self._get_exercise_or_404(day, exercise_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(exercise, field, value)

        if data.recommended_load_kg is not None:
            self.state.machine_loads[exercise.machine] = data.recommended_load_kg
        if data.reps is not None:
            self.state.machine_reps[exercise.machine] = data.reps

        self.store.persist()
        return exercise

    def adjust_completed_sets(self, day: datetime.date, exercise_id: uuid.UUID,
                              delta: int) -> SetAdjustment:
        """Log (``delta > 0``) or undo (``delta < 0``) completed sets.

        Completed sets never go below zero but may exceed the target.
        Progress is recomputed after every change.
        """
        _, exercise = self._get_exercise_or_404(day, exercise_id)
        exercise.completed_sets = max(0, exercise.completed_sets + delta)

        event = None
        if delta > 0:
            if exercise.completed_sets < exercise.sets:
                event = SetCompletionEvent.SET_LOGGED
            elif exercise.completed_sets == exercise.sets:
                event = SetCompletionEvent.TARGET_REACHED
            else:
                event = SetCompletionEvent.OVER_TARGET

        records = self.store.finalize(day)
        return SetAdjustment(exercise=exercise, event=event, personal_records=records)

    def substitute_exercise(self, day: datetime.date, exercise_id: uuid.UUID,
                            machine_id: str) -> WorkoutExercise:
        """Swap an exercise for an equivalent machine (same muscle group).

        The new machine brings its remembered load and reps (falling back
        to the current ones) and becomes the preferred machine of its
        group.
        """
        _, exercise = self._get_exercise_or_404(day, exercise_id)

        allowed = {m.machine_id for m in equivalents_for(exercise.machine)}
        if machine_id not in allowed:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"'{machine_id}' is not an equivalent of '{exercise.machine}'", )

        exercise.recommended_load_kg = self.state.machine_loads.get(machine_id, exercise.recommended_load_kg)
        exercise.reps = self.state.machine_reps.get(machine_id, exercise.reps)
        exercise.machine = machine_id
        exercise.name = display_name_for(machine_id)

        self.state.machine_preferences[group_for(machine_id).value] = machine_id
        self.store.persist()
        return exercise

    # ------------------------------------------------------------------
    # Calendar views
    # ------------------------------------------------------------------

    def week_plan(self, reference: Optional[datetime.date] = None) -> list[DayPlan]:
        """Monday..Sunday of the week containing *reference* (default: today)."""
        reference = reference or self.clock()
        monday = reference - datetime.timedelta(days=reference.isoweekday() - 1)
        profile = self.state.profile
        training_days = profile.training_days if profile else []
        overrides = self.state.schedule_overrides

        plan: list[DayPlan] = []
        for offset in range(7):
            day = monday + datetime.timedelta(days=offset)
            is_training = should_train(day, training_days, overrides)
            focus = focus_for(day, profile).type if (is_training and profile) else None
            plan.append(DayPlan(date=day, is_training=is_training,
                                is_override=day_key(day) in overrides, focus=focus, ))
        return plan

    def overview(self, today: Optional[datetime.date] = None) -> TrainingOverview:
        today = today or self.clock()
        profile = self._require_profile()
        progress = self.state.progress
        overrides = self.state.schedule_overrides

        session = self.state.session_on(today)
        return TrainingOverview(
            level=progress.level,
            level_tier=level_tier(progress.level),
            total_sessions=progress.total_sessions,
            cycle_week=cycle_week(profile, today),
            is_deload_week=is_deload_week(profile, today),
            is_training_day=should_train(today, profile.training_days, overrides),
            next_training_day=next_training_day(today, profile.training_days, overrides),
            lapse_adjusted=session is not None and session.difficulty_level < progress.level,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _generate(self, day: datetime.date, profile: UserProfile) -> WorkoutSession:
        # Focus follows the calendar, same as week_plan.
        return generate_session(
            day, profile, self.state.progress,
            self.state.machine_loads, self.state.machine_reps, self.state.machine_preferences,
            note=settings.DEFAULT_EXERCISE_NOTE,
        )

    def _require_profile(self) -> UserProfile:
        profile = self.state.profile
        if profile is None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail="A profile is required before planning workouts", )
        return profile

    def _get_session_or_404(self, day: datetime.date) -> WorkoutSession:
        session = self.state.session_on(day)
        if session is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No session on {day}", )
        return session

    def _get_exercise_or_404(self, day: datetime.date,
                             exercise_id: uuid.UUID) -> tuple[WorkoutSession, WorkoutExercise]:
        session = self._get_session_or_404(day)
        exercise = session.find_exercise(exercise_id)
        if exercise is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                                detail=f"Exercise {exercise_id} not found on {day}", )
        return session, exercise
