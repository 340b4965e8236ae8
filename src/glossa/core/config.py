"""
Glossa site configuration.

Handles loading and validating glossa.yaml, and turning it into the
inputs of the translation system.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from glossa.exceptions import ConfigurationError
from glossa.i18n.config import LocaleConfig, SiteI18nConfig
from glossa.i18n.plugins import PluginTranslations

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATIONS_DIR = "src/content/i18n"


class TranslationsConfig(BaseModel):
    """Where user dictionaries live."""

    dir: str = DEFAULT_TRANSLATIONS_DIR


class PluginDefinition(BaseModel):
    """Plugin declared in configuration, with inline translations."""

    name: str
    translations: dict[str, dict[str, str | None]] = Field(default_factory=dict)


class AdvancedConfig(BaseModel):
    """Advanced configuration."""

    log_level: Literal["debug", "info", "warning", "error", "critical"] = "info"


class SiteConfig(BaseModel):
    """Root configuration model."""

    title: str = ""
    i18n: SiteI18nConfig = Field(
        default_factory=lambda: SiteI18nConfig(default_locale=LocaleConfig(lang="en"))
    )
    translations: TranslationsConfig = Field(default_factory=TranslationsConfig)
    plugins: list[PluginDefinition] = Field(default_factory=list)
    advanced: AdvancedConfig = Field(default_factory=AdvancedConfig)

    # Directory of the loaded file, used to resolve relative paths
    base_dir: Path = Field(default_factory=Path.cwd, exclude=True)

    @classmethod
    def from_file(cls, path: str | Path) -> SiteConfig:
        """
        Create a SiteConfig from a YAML configuration file.

        Args:
            path: Path to glossa.yaml

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If config is invalid or missing
        """
        config_path = Path(path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax: {e}") from e

        if raw_config is None:
            raise ConfigurationError("Configuration file is empty")

        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        try:
            config = cls.model_validate({**raw_config, "base_dir": config_path.parent.resolve()})
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        logger.debug(f"Loaded configuration from {config_path}")
        return config

    def plugin_translations(self) -> PluginTranslations:
        """Collect the translations injected by configured plugins, in order."""
        collected = PluginTranslations()
        for plugin in self.plugins:
            if not plugin.translations:
                logger.warning(f"Plugin {plugin.name!r} declares no translations, ignoring")
                continue
            collected.inject_translations(plugin.name, plugin.translations)
        return collected

    def translations_dir(self) -> Path:
        """User dictionary directory, resolved against the config file."""
        directory = Path(self.translations.dir)
        if not directory.is_absolute():
            directory = self.base_dir / directory
        return directory


def find_config_file(explicit_path: Path | None = None) -> Path:
    """
    Locate configuration file.

    Search order:
    1. Explicit path from --config
    2. glossa.yaml in current directory
    3. /etc/glossa/glossa.yaml
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise ConfigurationError(f"Configuration file not found: {explicit_path}")

    candidates = [
        Path("glossa.yaml"),
        Path("/etc/glossa/glossa.yaml"),
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    raise ConfigurationError(
        "No configuration file found.\n"
        "Create glossa.yaml or specify: glossa --config path/to/glossa.yaml"
    )

