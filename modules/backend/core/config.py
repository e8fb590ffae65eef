"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional runtime overrides
from config/.env (or NOTES_* environment variables).
No hardcoded values in code: all configuration comes from these sources.

Overrides (.env / environment):
    NOTES_STORAGE_PATH

Settings (YAML):
    application.yaml    - App identity, preference storage, default view
    logging.yaml        - Logging configuration
    notifications.yaml  - Reminder title/body, display timezone, pending slot
"""

from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.backend.core.config_schema import (
    ApplicationSchema,
    LoggingSchema,
    NotificationsSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Runtime overrides loaded from config/.env or NOTES_* variables."""

    storage_path: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")
        self._notifications = _load_validated(NotificationsSchema, "notifications.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging

    @property
    def notifications(self) -> NotificationsSchema:
        """Reminder notification settings."""
        return self._notifications


@lru_cache
def get_settings() -> Settings:
    """Get cached overrides instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_storage_path() -> Path:
    """
    Resolve the preference store file path.

    NOTES_STORAGE_PATH wins over application.yaml. Relative paths are
    resolved against the project root.
    """
    configured = get_settings().storage_path or get_app_config().application.storage.path
    path = Path(configured)
    if not path.is_absolute():
        path = find_project_root() / path
    return path


def get_display_timezone() -> tzinfo | None:
    """
    Timezone used to read reminder calendar fields.

    Returns None when notifications.yaml leaves it unset, meaning the
    system local timezone.
    """
    name = get_app_config().notifications.timezone
    return ZoneInfo(name) if name else None
