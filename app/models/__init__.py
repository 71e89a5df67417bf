"""SQLModel database models."""

from app.models.app_state import StoredAppState

__all__ = [
    "StoredAppState",
]
