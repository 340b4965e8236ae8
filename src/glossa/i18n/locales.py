"""
Locale resolution helpers.

Maps site locale identifiers to BCP-47 language tags and
language tags to a text direction.
"""

from __future__ import annotations

import logging
import re

from glossa.i18n.config import SiteI18nConfig, TextDirection
from glossa.i18n.languages import BUILTIN_DEFAULT_LANG, RTL_LANGUAGES, RTL_SCRIPTS

logger = logging.getLogger(__name__)

# First two-letter subtag after the primary one, e.g. "-GB" in "en-GB"
REGION_SUBTAG = re.compile(r"-[a-zA-Z]{2}(?=-|$)")

ROOT_LOCALE = "root"


def default_lang(config: SiteI18nConfig | None) -> str:
    """
    Language tag of the default locale.

    Falls back to the locale identifier, then to the built-in default.
    """
    if config is None:
        return BUILTIN_DEFAULT_LANG
    default = config.default_locale
    return default.lang or default.locale or BUILTIN_DEFAULT_LANG


def resolve_lang(locale: str | None, config: SiteI18nConfig | None) -> str:
    """
    Get the language tag for a locale identifier.

    Args:
        locale: Locale identifier, or None for the root locale
        config: Site locale configuration

    Returns:
        Language tag (never empty)
    """
    lang = None
    entry = None
    if config is not None:
        entry = config.locales.get(locale if locale else ROOT_LOCALE)
        if entry is not None:
            lang = entry.lang

    if not lang:
        lang = default_lang(config)
        if entry is not None:
            logger.warning(f"Locale {locale or ROOT_LOCALE!r} has no lang, using {lang}")
        else:
            logger.debug(f"Locale {locale or ROOT_LOCALE!r} is not configured, using {lang}")

    return lang


def strip_region(lang: str) -> str:
    """
    Strip the region subtag from a language tag.

    Example:
        strip_region("en-GB")  # "en"
    """
    return REGION_SUBTAG.sub("", lang, count=1)


def direction(lang: str) -> TextDirection:
    """Text direction for a language tag."""
    subtags = lang.lower().split("-")
    if subtags[0] in RTL_LANGUAGES:
        return "rtl"
    if any(subtag in RTL_SCRIPTS for subtag in subtags[1:]):
        return "rtl"
    return "ltr"
