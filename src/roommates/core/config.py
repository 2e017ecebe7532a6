"""
Roommates Configuration

Database and logging settings, read from the environment.

- PostgreSQL (production): Set DATABASE_URL environment variable
- SQLite (development/test): Uses ROOMMATES_DB path or default
"""

import logging
from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from roommates.core.errors import ConfigurationError


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR: Path = BASE_DIR / "data"


class RoommatesSettings(BaseSettings):
    """Database and logging configuration"""

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # Database
    DATABASE_URL: str | None = None
    ROOMMATES_DB: str = str(DATA_DIR / "roommates.db")

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def log_level(self) -> int:
        """Return LOG_LEVEL as a logging level number.

        Raises:
            ConfigurationError: If LOG_LEVEL is not a known level name.
        """
        try:
            return logging.getLevelNamesMapping()[self.LOG_LEVEL.upper()]
        except KeyError:
            raise ConfigurationError(
                f"Invalid LOG_LEVEL value: '{self.LOG_LEVEL}'."
            ) from None

    @property
    def connection_string(self) -> str:
        """Return the PostgreSQL DSN if set, otherwise the SQLite path.

        Raises:
            ConfigurationError: If ENVIRONMENT is 'production' but DATABASE_URL is not set.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.ENVIRONMENT == Environment.PRODUCTION:
            raise ConfigurationError(
                "DATABASE_URL is required in production environment. "
                "Set DATABASE_URL environment variable."
            )
        return self.ROOMMATES_DB


settings = RoommatesSettings()
