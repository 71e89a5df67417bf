"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "LiftPlan machine-training planner"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (a single JSON document, SQLite is enough)
    DATABASE_URL: str = "sqlite:///./liftplan.db"

    # Snapshot exports written by the export endpoint / scripts
    EXPORT_DIR: str = "./exports"

    # Planner
    DEFAULT_EXERCISE_NOTE: str = "建议重量为参考值，若RPE偏离目标请微调。"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
