"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections may be shared across threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        connect_args=connect_args,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session bound to the application engine.

    Example:
        with next(get_db()) as db:
            AppStateRepository(db).get()
    """
    with Session(engine) as session:
        yield session
