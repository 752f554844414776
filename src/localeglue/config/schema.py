"""Pydantic models describing the localization configuration snapshot."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

DEFAULT_DOMAIN = "ssp"


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class BackendMode(str, Enum):
    """Translation mechanisms the domain activator can drive."""

    ENVIRONMENT = "environment"
    CATALOG = "catalog"


_LEGACY_BACKEND_NAMES = {
    "twig.i18n": BackendMode.ENVIRONMENT,
    "twig.gettextgettext": BackendMode.CATALOG,
}


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class LanguageSettings(ImmutableModel):
    """Languages offered to clients and their POSIX locale names."""

    default: str = "en"
    available: tuple[str, ...] = ("en",)
    posix: Mapping[str, str] = Field(
        default_factory=lambda: {"no": "nb_NO", "nn": "nn_NO"}
    )

    @field_validator("available", mode="before")
    @classmethod
    def _coerce_available(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            return (value,)
        return tuple(value)

    @model_validator(mode="after")
    def _validate_default(self) -> Self:
        if not self.available:
            raise ConfigurationError("At least one available language is required")
        if self.default not in self.available:
            raise ConfigurationError(
                f"Default language '{self.default}' is not listed as available"
            )
        return self


class LocalizationSettings(ImmutableModel):
    """Read-only settings consumed when a domain activator is constructed."""

    locale_directory: Path = Field(default=Path("locales"), alias="locales")
    backend: BackendMode | None = Field(default=None, alias="i18n_backend")
    language: LanguageSettings = Field(default_factory=LanguageSettings)
    domains: Mapping[str, Path] = Field(default_factory=dict)
    strict_domains: bool = True

    @field_validator("backend", mode="before")
    @classmethod
    def _coerce_backend(cls, value: Any) -> Any:
        if value is None or isinstance(value, BackendMode):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if not normalized:
                return None
            if normalized in _LEGACY_BACKEND_NAMES:
                return _LEGACY_BACKEND_NAMES[normalized]
            try:
                return BackendMode(normalized)
            except ValueError as exc:
                raise ConfigurationError(
                    f"Unknown translation backend '{value}'"
                ) from exc
        raise ConfigurationError("Translation backend must be a string")

    @model_validator(mode="after")
    def _validate_domains(self) -> Self:
        if DEFAULT_DOMAIN in self.domains:
            raise ConfigurationError(
                f"Domain '{DEFAULT_DOMAIN}' is reserved for the default catalogue"
            )
        for name in self.domains:
            if not name.strip():
                raise ConfigurationError("Domain names must be non-empty strings")
        return self


__all__ = [
    "BackendMode",
    "ConfigurationError",
    "DEFAULT_DOMAIN",
    "ImmutableModel",
    "LanguageSettings",
    "LocalizationSettings",
]
