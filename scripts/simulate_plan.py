"""Simulate a few weeks of training on an in-memory database.

Creates a profile, walks the calendar day by day, plans every training
day, logs all sets (optionally skipping one machine) and prints the
resulting routine and progression.

Usage:
    python scripts/simulate_plan.py [weeks]
"""

import datetime
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

import app.db.base  # noqa: F401
from app.planner.scheduler import should_train
from app.schemas.profile import TrainingGoal, TrainingSplit, UserProfile
from app.services.state_store import StateStore
from app.services.workout_service import WorkoutService

START = datetime.date(2026, 1, 5)  # a Monday
SKIPPED_MACHINE = "Lateral Raise"


def main(weeks: int) -> None:
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)

    store = StateStore(engine)
    store.subscribe(lambda r: print(f"    ** PR {r.exercise_name} ({r.machine}): {r.load_kg:.1f} kg"))
    service = WorkoutService(store, clock=lambda: START)

    store.update_profile(UserProfile(
        age=32, weight_kg=78.0, goal=TrainingGoal.HYPERTROPHY,
        training_days=[1, 3, 5], split=TrainingSplit.AUTO,
        created_at=datetime.datetime.combine(START, datetime.time()),
    ))
    profile = store.state.profile

    for offset in range(weeks * 7):
        day = START + datetime.timedelta(days=offset)
        if not should_train(day, profile.training_days, store.state.schedule_overrides):
            continue

        session = service.session_for(day)
        print(f"\n{day} ({session.focus.value if session.focus else '-'}) Lv.{session.difficulty_level}")
        for exercise in session.exercises:
            print(f"  {exercise.machine:<22} {exercise.sets}x{exercise.reps:<3} "
                  f"{exercise.recommended_load_kg:>6.1f} kg  RPE {exercise.target_rpe:.1f}  {exercise.tempo}")
            if exercise.machine == SKIPPED_MACHINE:
                continue
            for _ in range(exercise.sets):
                service.adjust_completed_sets(day, exercise.id, 1)

    progress = store.state.progress
    print()
    print("=" * 60)
    print(f"Sessions: {progress.total_sessions}  Level: {progress.level}")
    print(f"Missed:   {', '.join(progress.missed_exercises) or '-'}")
    print("=" * 60)


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 6)
