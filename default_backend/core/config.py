"""
Application configuration.

Loads settings from environment variables once at start-up. In debug
mode a local .env file is exported into the process environment first.
The resulting Settings object is frozen and handed to the app; the
request path never reads the environment directly.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from default_backend.domain.pages.errors import EnvironmentLoadError

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "DEBUG"
ENV_FILE = ".env"

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8080


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the service.
        version: Current service version string.
        debug: Debug mode. Any non-empty ``DEBUG`` value enables it.
        error_files_path: Directory holding the error documents
            (``ERROR_FILES_PATH``). Empty means ``./errors``.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(frozen=True)

    project_name: str = "custom-error-pages"
    version: str = "0.1.0"
    debug: bool = False
    error_files_path: str = "./errors"
    log_level: str = "INFO"

    @field_validator("debug", mode="before")
    @classmethod
    def _any_value_enables_debug(cls, value: object) -> bool:
        if isinstance(value, str):
            return value != ""
        return bool(value)


def load_environment(debug: bool, path: str = ENV_FILE) -> None:
    """Export the variables of a .env file into ``os.environ`` in debug mode.

    Variables already set in the environment keep their value. Outside
    debug mode this is a no-op.

    Raises:
        EnvironmentLoadError: If the file is missing or unreadable.
    """
    if not debug:
        return

    env_file = Path(path)
    if not env_file.is_file():
        raise EnvironmentLoadError(path, "file not found")
    try:
        load_dotenv(env_file, override=False)
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvironmentLoadError(path, str(exc)) from exc

    logger.info("App Running in debug mode")


def load_settings() -> Settings:
    """Load the .env file when ``DEBUG`` is set, then build Settings."""
    load_environment(bool(os.environ.get(DEBUG_ENV_VAR)))
    return Settings()
