"""Locale configuration models."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field, ValidationError

from glossa.exceptions import ConfigurationError

TextDirection = Literal["ltr", "rtl"]


class LocaleConfig(BaseModel):
    """One locale served by the site."""

    locale: str | None = None
    lang: str | None = None
    dir: TextDirection = "ltr"
    label: str | None = None


class SiteI18nConfig(BaseModel):
    """Locale setup of a site: the default locale plus any others."""

    default_locale: LocaleConfig
    locales: dict[str, LocaleConfig] = Field(default_factory=dict)

    @classmethod
    def coerce(cls, value: SiteI18nConfig | Mapping[str, Any]) -> SiteI18nConfig:
        """
        Accept an already-built config or validate a plain mapping.

        Raises:
            ConfigurationError: If the mapping does not describe a valid config
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                f"i18n configuration must be a mapping, got {type(value).__name__}"
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise ConfigurationError(f"i18n configuration validation failed: {e}") from e
