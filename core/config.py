"""
core/config.py -- credportal settings, read from the environment or a .env file.

Modules call get_settings() rather than reading os.environ. The after-validator
rejects an unusable database URL, port or log level, so a bad deployment fails
at startup instead of on the first signup.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("credportal.config")

_DEFAULT_DB_URL = f"sqlite:///{Path(__file__).resolve().parent.parent / 'credportal.db'}"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Database
    # ------------------------------------------------------------------

    # Any SQLAlchemy URL. SQLite file next to the project by default.
    database_url: str = _DEFAULT_DB_URL

    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------

    host: str = "127.0.0.1"
    port: int = 3000

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_runtime(self) -> "Settings":
        """Reject settings the server cannot start with.

        DATABASE_URL must be non-empty, PORT must be a valid TCP port, and
        LOG_LEVEL must name a standard logging level. DEBUG=true forces the
        DEBUG log level.
        """
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL must not be empty.")
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}.")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}.")
        if self.debug and self.log_level != "DEBUG":
            logger.warning("DEBUG=true overrides LOG_LEVEL=%s", self.log_level)
            self.log_level = "DEBUG"
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
