"""
State store service.

Owns the in-memory :class:`AppState`, is its single writer and persists
it to the database after every mutation.  Persistence failures are
logged and swallowed: the plan can always be regenerated, so a failed
write must never break the request that triggered it.

Personal records broken while finalizing a session are published
synchronously to the subscribed callbacks.
"""

import datetime
import logging
from pathlib import Path
from typing import Callable, Optional, Union

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.app_state import AppStateRepository
from app.models.app_state import DEFAULT_STATE_KEY
from app.planner.progression import finalize_session
from app.schemas.profile import UserProfile
from app.schemas.progress import PersonalRecord
from app.schemas.state import AppState, day_key
from app.schemas.workout import PrimaryGroup

logger = logging.getLogger(__name__)

RecordListener = Callable[[PersonalRecord], None]


class StateStore:
    """Single-writer holder of the application state."""

    def __init__(self, engine: Engine, key: str = DEFAULT_STATE_KEY):
        self.engine = engine
        self.key = key
        self.state = AppState()
        self._record_listeners: list[RecordListener] = []

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> AppState:
        """Load the stored document; keep an empty state if there is none."""
        try:
            with Session(self.engine) as session:
                entry = AppStateRepository(session).get(self.key)
        except SQLAlchemyError:
            logger.exception("Failed to load application state, starting empty")
            return self.state

        if entry is None:
            logger.info("No stored application state, starting empty")
            return self.state

        try:
            self.state = AppState.model_validate(entry.document)
        except ValidationError:
            logger.exception("Stored application state is invalid, starting empty")
            self.state = AppState()
        return self.state

    def persist(self) -> bool:
        """Write the current state.  Returns ``False`` on a database error."""
        document = self.state.model_dump(mode="json")
        try:
            with Session(self.engine) as session:
                AppStateRepository(session).save(document, self.key)
        except SQLAlchemyError:
            logger.exception("Failed to persist application state")
            return False
        return True

    # ------------------------------------------------------------------
    # Personal-record events
    # ------------------------------------------------------------------

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._record_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._record_listeners:
                self._record_listeners.remove(listener)

        return unsubscribe

    def _publish(self, records: list[PersonalRecord]) -> None:
        for record in records:
            logger.info("New personal record on %s: %.2f kg", record.machine, record.load_kg)
            for listener in list(self._record_listeners):
                listener(record)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def update_profile(self, profile: UserProfile) -> UserProfile:
        self.state.profile = profile
        self.persist()
        return profile

    def set_preference(self, group: PrimaryGroup, machine_id: str) -> None:
        self.state.machine_preferences[group.value] = machine_id
        self.persist()

    def set_schedule_override(self, day: datetime.date, is_training: bool) -> None:
        self.state.schedule_overrides[day_key(day)] = is_training
        self.persist()

    def clear_schedule_override(self, day: datetime.date) -> bool:
        removed = self.state.schedule_overrides.pop(day_key(day), None) is not None
        if removed:
            self.persist()
        return removed

    def finalize(self, day: datetime.date, feedback: Optional[float] = None) -> list[PersonalRecord]:
        """Recompute progress from the session on *day* and persist."""
        records = finalize_session(self.state, day, feedback)
        self.persist()
        self._publish(records)
        return records

    def reset(self) -> None:
        """Drop everything: profile, progress, sessions and memory."""
        logger.warning("Resetting all application data")
        self.state = AppState()
        try:
            with Session(self.engine) as session:
                AppStateRepository(session).delete(self.key)
        except SQLAlchemyError:
            logger.exception("Failed to delete stored application state")

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def export_json(self) -> str:
        return self.state.model_dump_json(indent=2)

    def export_to_file(self, directory: Union[str, Path]) -> Optional[Path]:
        """Write a timestamped snapshot into *directory*; ``None`` on failure."""
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        path = Path(directory) / f"liftplan_backup_{timestamp}.json"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.export_json(), encoding="utf-8")
        except OSError:
            logger.exception("Failed to export application state to %s", path)
            return None
        logger.info("Application state exported to %s", path)
        return path

    def import_state(self, raw: Union[str, bytes, dict]) -> bool:
        """Replace the whole state with *raw*.

        On any parse or validation error the current state is left
        untouched and ``False`` is returned.
        """
        try:
            if isinstance(raw, dict):
                decoded = AppState.model_validate(raw)
            else:
                decoded = AppState.model_validate_json(raw)
        except (ValidationError, ValueError):
            logger.warning("Rejected invalid application state import")
            return False

        self.state = decoded
        self.persist()
        logger.info("Imported application state with %d sessions", len(decoded.sessions))
        return True
