"""
Application state database model.

The whole planner state (profile, progress, sessions and per-machine
memory) is stored as a single JSON document, keyed by a fixed id.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

# Key of the single stored document.
DEFAULT_STATE_KEY = "default"


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class StoredAppState(SQLModel, table=True):
    """Serialized :class:`~app.schemas.state.AppState` document."""

    __tablename__ = "app_state"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(default=DEFAULT_STATE_KEY, nullable=False, max_length=50, unique=True, index=True)

    document: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
