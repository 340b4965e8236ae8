"""
Glossa Internationalization (i18n) System.

Resolves the UI strings of every configured language from built-in,
plugin and user dictionaries.
"""

from glossa.i18n.config import LocaleConfig, SiteI18nConfig
from glossa.i18n.layering import DictionaryOrigin, DictionarySource, merge
from glossa.i18n.locales import direction, resolve_lang, strip_region
from glossa.i18n.plugins import PluginTranslations
from glossa.i18n.system import (
    TranslationSystem,
    create_translation_system_from_fs,
    load_translation_system,
)
from glossa.i18n.translator import BoundTranslator

__all__ = [
    # Configuration
    "LocaleConfig",
    "SiteI18nConfig",
    # Locale helpers
    "direction",
    "resolve_lang",
    "strip_region",
    # Layering
    "DictionaryOrigin",
    "DictionarySource",
    "merge",
    # System
    "BoundTranslator",
    "PluginTranslations",
    "TranslationSystem",
    "create_translation_system_from_fs",
    "load_translation_system",
]
