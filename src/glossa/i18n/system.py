"""
Translation system.

Builds the per-language effective dictionaries once, from the site
locale configuration and the built-in, plugin and user dictionaries,
then hands out BoundTranslator objects on demand.

Usage:
    system = TranslationSystem.build(config, plugin_dictionaries, user_dictionaries)
    t = system.translator_for("fr")
    t("search.label")  # "Rechercher"

    # Reading user dictionaries from disk
    system = await load_translation_system(config, "src/content/i18n")
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from glossa.i18n.builtin import load_builtin_dictionaries
from glossa.i18n.config import SiteI18nConfig
from glossa.i18n.layering import (
    DictionaryMap,
    EffectiveDictionary,
    default_language_sources,
    describe_sources,
    locale_sources,
    merge,
)
from glossa.i18n.locales import default_lang, resolve_lang
from glossa.i18n.translator import BoundTranslator
from glossa.loaders.fs import read_dictionary_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationSystem:
    """
    Immutable map of language tag -> effective dictionary.

    Build it once per site with build(); it is then safe to share
    between any number of concurrent renders.
    """

    translation_map: Mapping[str, EffectiveDictionary]
    default_lang: str

    @classmethod
    def build(
        cls,
        config: SiteI18nConfig | Mapping[str, Any] | None,
        plugin_dictionaries: DictionaryMap | None = None,
        user_dictionaries: DictionaryMap | None = None,
        builtin_dictionaries: DictionaryMap | None = None,
    ) -> TranslationSystem:
        """
        Build the effective dictionary of every configured language.

        Args:
            config: Site locale configuration, a mapping to validate, or
                None for a single-language English site
            plugin_dictionaries: Plugin dictionaries keyed by language tag
            user_dictionaries: User dictionaries keyed by language tag
            builtin_dictionaries: Overrides the shipped dictionaries

        Returns:
            Ready-to-use TranslationSystem

        Raises:
            ConfigurationError: If config is structurally invalid
        """
        site_config = SiteI18nConfig.coerce(config) if config is not None else None
        plugin = plugin_dictionaries or {}
        user = user_dictionaries or {}
        builtin = builtin_dictionaries if builtin_dictionaries is not None else load_builtin_dictionaries()

        default = default_lang(site_config)
        sources = default_language_sources(default, builtin, plugin, user)
        translations: dict[str, EffectiveDictionary] = {default: merge(sources)}
        logger.debug(f"Built default language {default} from {describe_sources(sources)}")

        locales = site_config.locales if site_config is not None else {}
        for locale in locales:
            lang = resolve_lang(locale, site_config)
            # Replaces an earlier entry for the same tag, default included
            sources = locale_sources(lang, builtin, plugin, user)
            translations[lang] = merge(sources)
            logger.debug(f"Built {lang} (locale {locale}) from {describe_sources(sources)}")

        logger.info(f"Translation system ready: {', '.join(translations)} (default {default})")
        return cls(translation_map=MappingProxyType(translations), default_lang=default)

    @property
    def languages(self) -> list[str]:
        """Language tags with an effective dictionary, default first."""
        return list(self.translation_map)

    def translator_for(self, lang: str | None = None) -> BoundTranslator:
        """
        Get a translator bound to lang, or to the default language.

        Cheap and side-effect free; call it once per render.
        """
        return BoundTranslator(lang or self.default_lang, self.translation_map, self.default_lang)


def create_translation_system_from_fs(
    config: SiteI18nConfig | Mapping[str, Any] | None,
    user_dir: Path | str | None = None,
    plugin_dictionaries: DictionaryMap | None = None,
) -> TranslationSystem:
    """
    Build a TranslationSystem, reading user dictionaries from a directory.

    A missing directory means no user dictionaries.

    Raises:
        ConfigurationError: If config is structurally invalid
        SourceReadError: If a dictionary file cannot be read or parsed
    """
    user_dictionaries: DictionaryMap = {}
    if user_dir is not None:
        user_dictionaries = read_dictionary_dir(user_dir).unwrap()
    return TranslationSystem.build(config, plugin_dictionaries, user_dictionaries)


async def load_translation_system(
    config: SiteI18nConfig | Mapping[str, Any] | None,
    user_dir: Path | str | None = None,
    plugin_dictionaries: DictionaryMap | None = None,
) -> TranslationSystem:
    """Async variant of create_translation_system_from_fs; file reads run in a worker thread."""
    return await asyncio.to_thread(
        create_translation_system_from_fs, config, user_dir, plugin_dictionaries
    )
