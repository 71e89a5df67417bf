"""Database repositories."""

from app.db.repositories.app_state import AppStateRepository

__all__ = [
    "AppStateRepository",
]
