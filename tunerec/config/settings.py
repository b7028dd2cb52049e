from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Any
import logging
import os


class Settings(BaseSettings):
    PROJECT_NAME: str = "tunerec"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str
    SQLALCHEMY_ECHO: bool = False

    # Recommendation engine
    RECOMMENDATION_DEFAULT_LIMIT: int = 10
    RECOMMENDATION_COOLDOWN_DAYS: int = 7
    RECOMMENDATION_RETENTION_DAYS: int = 30
    TRENDING_WINDOW_DAYS: int = 30
    GENRE_SUB_LIMIT: int = 4
    ARTIST_SUB_LIMIT: int = 3
    TRENDING_SUB_LIMIT: int = 3

    # Batch driver
    BATCH_TIMEOUT_SECONDS: float = 300.0

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), "../../.env"),
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that the database URL is present and uses PostgreSQL or SQLite."""
        if not v:
            raise ValueError("DATABASE_URL must be set")
        if not v.startswith(('postgresql://', 'postgresql+psycopg2://', 'sqlite://', 'sqlite+pysqlite://')):
            raise ValueError("DATABASE_URL must be a valid PostgreSQL or SQLite URL")
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Normalize the log level to an upper-case standard logging name."""
        if isinstance(v, str):
            normalized = v.strip().upper()
            if isinstance(logging.getLevelName(normalized), int):
                return normalized
        raise ValueError("LOG_LEVEL must be a standard logging level name")

    @field_validator(
        'RECOMMENDATION_DEFAULT_LIMIT',
        'RECOMMENDATION_COOLDOWN_DAYS',
        'RECOMMENDATION_RETENTION_DAYS',
        'TRENDING_WINDOW_DAYS',
        'GENRE_SUB_LIMIT',
        'ARTIST_SUB_LIMIT',
        'TRENDING_SUB_LIMIT',
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject non-positive limits and windows."""
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @field_validator('BATCH_TIMEOUT_SECONDS')
    @classmethod
    def validate_batch_timeout(cls, v: float) -> float:
        """Allow 0 to disable the batch deadline, reject negatives."""
        if v < 0:
            raise ValueError("BATCH_TIMEOUT_SECONDS must be >= 0")
        return v


settings = Settings()
