"""
Application state document.

:class:`AppState` is the single JSON-serializable snapshot the planner
works on.  It is persisted as one document and swapped wholesale on
import; every map is optional so older documents still decode.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.profile import UserProfile
from app.schemas.progress import ProgressState
from app.schemas.workout import WorkoutSession


def day_key(day: datetime.date) -> str:
    """Key used by :attr:`AppState.schedule_overrides` (``YYYY-MM-DD``)."""
    if isinstance(day, datetime.datetime):
        day = day.date()
    return day.isoformat()


class AppState(BaseModel):
    """Profile, progress, sessions and per-machine memory."""

    profile: Optional[UserProfile] = None
    progress: ProgressState = Field(default_factory=ProgressState)
    sessions: list[WorkoutSession] = Field(default_factory=list)
    machine_loads: dict[str, float] = Field(default_factory=dict)
    machine_reps: dict[str, int] = Field(default_factory=dict)
    machine_preferences: dict[str, str] = Field(
        default_factory=dict,
        description="Muscle group -> preferred machine id",
    )
    schedule_overrides: dict[str, bool] = Field(
        default_factory=dict,
        description="YYYY-MM-DD -> True (train) / False (rest)",
    )

    def session_on(self, day: datetime.date) -> Optional[WorkoutSession]:
        for session in self.sessions:
            if session.date == day:
                return session
        return None

    def replace_session(self, session: WorkoutSession) -> None:
        """Store *session*, replacing any session with the same date."""
        for index, existing in enumerate(self.sessions):
            if existing.date == session.date:
                self.sessions[index] = session
                return
        self.sessions.append(session)
