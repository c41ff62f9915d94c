"""Persistent settings for ai-commit.

Handles the user-level settings file stored in the platform config directory
(e.g. ~/.config/ai-commit/config.toml on Linux):
- api_key: Secret for the chat-completion endpoint (stored in plaintext)
- url: Chat-completion endpoint URL
- model: Model identifier sent with each request
- language: Language the commit message is written in
- prompt: Optional extra instruction for the model
- timeout: HTTP timeout in seconds
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

import platformdirs
import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError

from ai_commit.config import (
    APP_NAME,
    CONFIG_DIR_ENV_VAR,
    CONFIG_FILE_NAME,
    DEFAULT_LANGUAGE,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    DEFAULT_URL,
)


class ConfigError(Exception):
    """Raised when settings cannot be read, validated or written."""

    pass


class Settings(BaseModel):
    """The persisted user configuration record.

    Every field has a default, so a missing config file or a file that only
    sets some keys still yields a complete record. Mis-typed values and
    unknown keys are rejected instead of being silently replaced.
    """

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    api_key: Optional[str] = None
    url: str = DEFAULT_URL
    model: str = DEFAULT_MODEL
    language: str = DEFAULT_LANGUAGE
    prompt: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT


def get_config_dir() -> Path:
    """Get the ai-commit configuration directory.

    Returns:
        Path from $AI_COMMIT_CONFIG_DIR if set, otherwise the platform
        user config directory for ai-commit.
    """
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return platformdirs.user_config_path(APP_NAME)


def get_config_file_path() -> Path:
    """Get path to the config.toml file."""
    return get_config_dir() / CONFIG_FILE_NAME


def load_settings() -> Settings:
    """Load settings from config.toml.

    Returns:
        The stored settings, or an all-default record if the file doesn't exist.

    Raises:
        ConfigError: If the file exists but is not valid TOML or doesn't
            match the settings schema.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return Settings()

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse config file {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_file}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}:\n{e}") from e


def save_settings(settings: Settings) -> None:
    """Save settings to config.toml, replacing the whole file.

    Fields that are unset (None) are left out since TOML has no null value.

    Args:
        settings: The settings to persist.

    Raises:
        ConfigError: If the directory or file cannot be written.
    """
    config_file = get_config_file_path()
    data = settings.model_dump(exclude_none=True)

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "wb") as f:
            tomli_w.dump(data, f)
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}") from e


def _validated_update(settings: Settings, updates: dict[str, Any]) -> Settings:
    unknown = sorted(set(updates) - set(Settings.model_fields))
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    data = settings.model_dump()
    data.update(updates)
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration value:\n{e}") from e


def set_field(key: str, value: Any) -> Settings:
    """Load settings, change a single field and save them back.

    Args:
        key: Settings field name (e.g. "model").
        value: The new value for the field.

    Returns:
        The settings as written to disk.

    Raises:
        ConfigError: If the key is unknown, the value has the wrong type,
            or the file cannot be read or written.
    """
    settings = _validated_update(load_settings(), {key: value})
    save_settings(settings)
    return settings


def merge_overrides(settings: Settings, **overrides: Any) -> Settings:
    """Merge one-off overrides (e.g. CLI options) into stored settings.

    Overrides that are None are ignored, so unspecified fields keep their
    stored values. The result is never persisted.

    Args:
        settings: The stored settings.
        **overrides: Field values that take precedence for this run.

    Returns:
        A new Settings record with the overrides applied.
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return settings
    return _validated_update(settings, updates)


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display.

    Long keys keep a short prefix and suffix, short keys are hidden entirely.
    The full key is never returned.
    """
    if len(api_key) > 12:
        return api_key[:3] + "..." + api_key[-4:]
    return "***"


def render_settings(settings: Settings) -> str:
    """Render settings for 'ai-commit config show'.

    Args:
        settings: The settings to render.

    Returns:
        Multi-line text with the config path and every field, API key masked.
    """
    api_key = mask_api_key(settings.api_key) if settings.api_key else "[not set]"
    prompt = f'"{settings.prompt}"' if settings.prompt else "[not set]"

    lines = [
        f"Current configuration file path: {get_config_file_path()}",
        "---",
        f"api_key = {api_key}",
        f'url = "{settings.url}"',
        f'model = "{settings.model}"',
        f'language = "{settings.language}"',
        f"prompt = {prompt}",
        f"timeout = {settings.timeout}",
        "---",
    ]
    return "\n".join(lines)
