"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear ValidationError
is raised at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in config/settings/:
    ApplicationSchema    → application.yaml
    LoggingSchema        → logging.yaml
    NotificationsSchema  → notifications.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class StorageSchema(_StrictBase):
    path: str
    notes_key: str
    preserve_corrupt_blob: bool


class ViewSchema(_StrictBase):
    default_sort: Literal["title", "date"]


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    storage: StorageSchema
    view: ViewSchema


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: str
    format: str
    handlers: HandlersSchema


# =============================================================================
# notifications.yaml
# =============================================================================


class NotificationsSchema(_StrictBase):
    title: str
    body_template: str
    timezone: str | None
    pending_key: str
