"""Configuration loader wrapping the localization schema models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .schema import (
    BackendMode,
    ConfigurationError,
    DEFAULT_DOMAIN,
    LanguageSettings,
    LocalizationSettings,
)

CONFIG_ENVIRONMENT_VARIABLE = "LOCALEGLUE_CONFIG"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _resolve_path(value: Any, base_directory: Path) -> Any:
    if value is None:
        return value
    path = Path(value)
    return path if path.is_absolute() else base_directory / path


def settings_from_mapping(
    data: Mapping[str, Any],
    base_directory: Path | None = None,
) -> LocalizationSettings:
    """Validate raw configuration values, resolving relative paths."""

    raw = dict(data)
    if base_directory is not None:
        for key in ("locales", "locale_directory"):
            if key in raw:
                raw[key] = _resolve_path(raw[key], base_directory)
        if "locales" not in raw and "locale_directory" not in raw:
            raw["locales"] = base_directory / "locales"

        domains = raw.get("domains")
        if isinstance(domains, Mapping):
            raw["domains"] = {
                name: _resolve_path(directory, base_directory)
                for name, directory in domains.items()
            }

    try:
        return LocalizationSettings.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Configuration validation failed: {error}") from error


def load_settings(path: Path | str) -> LocalizationSettings:
    """Load settings from a YAML file; relative paths resolve against its folder."""

    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    raw_config = _load_yaml(config_file)
    return settings_from_mapping(raw_config, base_directory=config_file.resolve().parent)


def load_settings_from_environment() -> LocalizationSettings:
    """Load the file named by ``LOCALEGLUE_CONFIG`` or fall back to defaults."""

    configured = os.getenv(CONFIG_ENVIRONMENT_VARIABLE)
    if configured:
        return load_settings(configured)
    return LocalizationSettings()


__all__ = [
    "BackendMode",
    "CONFIG_ENVIRONMENT_VARIABLE",
    "ConfigurationError",
    "DEFAULT_DOMAIN",
    "LanguageSettings",
    "LocalizationSettings",
    "load_settings",
    "load_settings_from_environment",
    "settings_from_mapping",
]
