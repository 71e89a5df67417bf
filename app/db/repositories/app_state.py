"""
Application state repository.

Handles database operations for :class:`StoredAppState`.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.app_state import DEFAULT_STATE_KEY, StoredAppState, utc_now


class AppStateRepository:
    """Repository for StoredAppState database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str = DEFAULT_STATE_KEY) -> Optional[StoredAppState]:
        statement = select(StoredAppState).where(StoredAppState.key == key)
        return self.session.exec(statement).first()

    def save(self, document: dict, key: str = DEFAULT_STATE_KEY) -> StoredAppState:
        """Insert or overwrite the document stored under *key*."""
        entry = self.get(key)
        if entry is None:
            entry = StoredAppState(key=key, document=document)
        else:
            entry.document = document
            entry.updated_at = utc_now()
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, key: str = DEFAULT_STATE_KEY) -> bool:
        entry = self.get(key)
        if entry is None:
            return False
        self.session.delete(entry)
        self.session.commit()
        return True
