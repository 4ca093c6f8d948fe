"""
Configuration management for the unit catalog.

This module handles:
- Environment-specific configuration (development vs. production)
- Region code used when no region is passed explicitly
- Log level for the command line tool
- Reference database location
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DATABASE_FILENAME,
    DATABASE_VERSION,
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REGION,
    ENV_DATABASE_URL,
    ENV_ENVIRONMENT,
    ENV_LOG_LEVEL,
    ENV_REGION,
    ENVIRONMENTS,
    LOG_LEVELS,
    USER_DATA_DIRNAME,
)


class Config:
    """
    Application configuration manager.

    Settings are read from the environment once, when the instance is created.

    Args:
        environment: Environment mode - 'production' or 'development'
        region_code: Region code; defaults to UNIT_CATALOG_REGION or "US"
        log_level: Log level name; defaults to UNIT_CATALOG_LOG_LEVEL or "INFO"
        database_url: Optional SQLAlchemy URL overriding the file database

    Raises:
        ValueError: If the environment or log level is not recognized
    """

    def __init__(
        self,
        environment: str = DEFAULT_ENVIRONMENT,
        region_code: Optional[str] = None,
        log_level: Optional[str] = None,
        database_url: Optional[str] = None,
    ):
        if environment not in ENVIRONMENTS:
            raise ValueError(f"Unknown environment '{environment}', expected one of {ENVIRONMENTS}")
        self.environment = environment

        if region_code is None:
            region_code = os.environ.get(ENV_REGION, DEFAULT_REGION)
        self._region_code = region_code.strip().upper()

        if log_level is None:
            log_level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        log_level = log_level.strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{log_level}', expected one of {LOG_LEVELS}")
        self._log_level = log_level

        if database_url is None:
            database_url = os.environ.get(ENV_DATABASE_URL) or None
        self._database_url_override = database_url

        # Determine base directory
        if environment == "development":
            self._base_dir = self._get_project_data_dir()
        else:
            self._base_dir = self._get_user_data_dir()
        self._database_path = self._base_dir / DATABASE_FILENAME

    def _get_project_data_dir(self) -> Path:
        """Project data/ directory, used in development."""
        project_root = Path(__file__).parent.parent.parent.parent
        return project_root / "data"

    def _get_user_data_dir(self) -> Path:
        """Per-user data directory, used in production."""
        return Path.home() / USER_DATA_DIRNAME

    def ensure_directories(self) -> None:
        """Create the database directory if it doesn't exist."""
        if self._database_url_override is None:
            self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def app_name(self) -> str:
        return APP_NAME

    @property
    def app_version(self) -> str:
        return APP_VERSION

    @property
    def database_version(self) -> str:
        return DATABASE_VERSION

    @property
    def region_code(self) -> str:
        """Upper-cased two-letter region code."""
        return self._region_code

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return getattr(logging, self._log_level)

    @property
    def database_path(self) -> Path:
        """Full path to the database file."""
        return self._database_path

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy database URL.

        Returns:
            UNIT_CATALOG_DATABASE_URL when set, otherwise a SQLite URL for database_path
        """
        if self._database_url_override is not None:
            return self._database_url_override
        # Use forward slashes for SQLite URL
        db_path_str = str(self._database_path).replace("\\", "/")
        return f"sqlite:///{db_path_str}"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def database_exists(self) -> bool:
        """
        Check if the database exists.

        Returns:
            True if the database file exists. Always True for an overridden URL,
            which is not necessarily a file.
        """
        if self._database_url_override is not None:
            return True
        return self._database_path.exists()

    def __repr__(self) -> str:
        return (
            f"Config(environment='{self.environment}', region_code='{self._region_code}', "
            f"database_url='{self.database_url}')"
        )


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing a
    different environment argument; this prevents switching databases
    mid-session.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    UNIT_CATALOG_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(ENV_ENVIRONMENT, DEFAULT_ENVIRONMENT)
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger = logging.getLogger(__name__)
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None


def get_database_url() -> str:
    """Get the configured database URL."""
    return get_config().database_url
