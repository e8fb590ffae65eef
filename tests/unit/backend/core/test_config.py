"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project files (YAML configs).
Failure scenarios use tmp_path to create controlled filesystems.
No mocking: the config loader is the system under test.
"""

from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
import yaml

from modules.backend.core.config import (
    AppConfig,
    Settings,
    find_project_root,
    get_app_config,
    get_display_timezone,
    get_settings,
    get_storage_path,
    load_yaml_config,
    validate_project_root,
)
from modules.backend.core.config_schema import (
    ApplicationSchema,
    LoggingSchema,
    NotificationsSchema,
)

APPLICATION = {
    "name": "Test Notes",
    "version": "0.0.1",
    "description": "test",
    "storage": {
        "path": "var/prefs.json",
        "notes_key": "notes",
        "preserve_corrupt_blob": False,
    },
    "view": {"default_sort": "date"},
}

LOGGING = {
    "level": "DEBUG",
    "format": "json",
    "handlers": {
        "console": {"enabled": False},
        "file": {
            "enabled": False,
            "path": "logs/system.jsonl",
            "max_bytes": 1024,
            "backup_count": 1,
        },
    },
}

NOTIFICATIONS = {
    "title": "Note Reminder",
    "body_template": "Don't forget about your note: {title}",
    "timezone": None,
    "pending_key": "pending_notifications",
}


def make_project(root: Path, **overrides: dict) -> Path:
    """Write a minimal project (marker + settings) under root."""
    (root / ".project_root").touch()
    settings = root / "config" / "settings"
    settings.mkdir(parents=True)
    files = {
        "application.yaml": APPLICATION,
        "logging.yaml": LOGGING,
        "notifications.yaml": NOTIFICATIONS,
    }
    for filename, data in files.items():
        data = overrides.get(filename.removesuffix(".yaml"), data)
        (settings / filename).write_text(yaml.safe_dump(data))
    return root


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# find_project_root
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert root.is_dir()
        assert (root / ".project_root").exists()

    def test_config_directory_exists_at_root(self):
        root = find_project_root()
        assert (root / "config" / "settings").is_dir()

    def test_finds_root_from_subdirectory(self, tmp_path, monkeypatch):
        make_project(tmp_path)
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert find_project_root() == tmp_path

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()


class TestValidateProjectRoot:
    """Tests for the SystemExit wrapper around find_project_root."""

    def test_returns_path_when_marker_exists(self):
        root = validate_project_root()
        assert (root / ".project_root").exists()

    def test_exits_when_marker_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            validate_project_root()


# =============================================================================
# load_yaml_config
# =============================================================================


class TestLoadYamlConfig:
    """Tests for YAML file loading from config/settings/."""

    def test_loads_all_config_files(self):
        for filename in ["application.yaml", "logging.yaml", "notifications.yaml"]:
            data = load_yaml_config(filename)
            assert isinstance(data, dict), f"{filename} did not return a dict"
            assert len(data) > 0, f"{filename} returned empty dict"

    def test_raises_for_nonexistent_file(self):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_yaml_config("does_not_exist.yaml")

    def test_returns_empty_dict_for_empty_yaml(self, tmp_path, monkeypatch):
        make_project(tmp_path)
        (tmp_path / "config" / "settings" / "empty.yaml").write_text("")
        monkeypatch.chdir(tmp_path)

        assert load_yaml_config("empty.yaml") == {}


# =============================================================================
# AppConfig
# =============================================================================


class TestAppConfig:
    """Tests for validated configuration."""

    def test_project_config_validates(self):
        config = AppConfig()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert isinstance(config.notifications, NotificationsSchema)

    def test_project_defaults(self):
        config = get_app_config()

        assert config.application.storage.notes_key == "notes"
        assert config.application.view.default_sort == "title"
        assert config.notifications.title == "Note Reminder"
        assert "{title}" in config.notifications.body_template

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_is_rejected(self, tmp_path, monkeypatch):
        make_project(tmp_path, application={**APPLICATION, "surprise": True})
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="application.yaml"):
            AppConfig()

    def test_invalid_sort_is_rejected(self, tmp_path, monkeypatch):
        make_project(tmp_path, application={**APPLICATION, "view": {"default_sort": "size"}})
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="Invalid configuration"):
            AppConfig()


# =============================================================================
# Settings and derived values
# =============================================================================


class TestStoragePath:
    """Tests for preference file resolution."""

    def test_relative_path_resolves_against_root(self, tmp_path, monkeypatch):
        make_project(tmp_path)
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("NOTES_STORAGE_PATH", raising=False)

        assert get_storage_path() == tmp_path / "var" / "prefs.json"

    def test_environment_override_wins(self, tmp_path, monkeypatch):
        make_project(tmp_path)
        monkeypatch.chdir(tmp_path)
        override = tmp_path / "elsewhere.json"
        monkeypatch.setenv("NOTES_STORAGE_PATH", str(override))

        assert get_storage_path() == override

    def test_env_file_override(self, tmp_path, monkeypatch):
        make_project(tmp_path)
        (tmp_path / "config" / ".env").write_text("NOTES_STORAGE_PATH=from-env-file.json\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("NOTES_STORAGE_PATH", raising=False)

        assert get_settings().storage_path == "from-env-file.json"
        assert get_storage_path() == tmp_path / "from-env-file.json"

    def test_settings_default_to_no_override(self, monkeypatch):
        monkeypatch.delenv("NOTES_STORAGE_PATH", raising=False)

        assert Settings(_env_file=None).storage_path is None


class TestDisplayTimezone:
    """Tests for the reminder display timezone."""

    def test_unset_means_system_local(self, tmp_path, monkeypatch):
        make_project(tmp_path)
        monkeypatch.chdir(tmp_path)

        assert get_display_timezone() is None

    def test_named_zone(self, tmp_path, monkeypatch):
        make_project(tmp_path, notifications={**NOTIFICATIONS, "timezone": "UTC"})
        monkeypatch.chdir(tmp_path)

        assert get_display_timezone() == ZoneInfo("UTC")
