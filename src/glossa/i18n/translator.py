"""
Per-language translation lookup.

A BoundTranslator resolves UI string keys for one language, falling
back to the default language and finally to the key itself.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from glossa.i18n.config import TextDirection
from glossa.i18n.layering import EMPTY_DICTIONARY, EffectiveDictionary
from glossa.i18n.locales import direction

logger = logging.getLogger(__name__)

# {{name}} placeholders, whitespace inside the braces allowed
PLACEHOLDER = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def interpolate(template: str, options: Mapping[str, Any]) -> str:
    """
    Replace {{name}} placeholders with values from options.

    Placeholders without a matching option are left untouched.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in options:
            return match.group(0)
        return str(options[name])

    return PLACEHOLDER.sub(replace, template)


class BoundTranslator:
    """
    UI strings for one fixed language.

    Lookup order for a key:
    1. The bound language's effective dictionary
    2. The default language's effective dictionary
    3. The key itself

    Example:
        t = system.translator_for("fr")
        t("search.label")              # "Rechercher"
        t.exists("search.label")       # True
        t.dir()                        # "ltr"
    """

    __slots__ = ("_lang", "_default_lang", "_translations")

    def __init__(
        self,
        lang: str,
        translations: Mapping[str, EffectiveDictionary],
        default_lang: str,
    ) -> None:
        self._lang = lang
        self._default_lang = default_lang
        self._translations = translations

    def __repr__(self) -> str:
        return f"BoundTranslator(lang={self._lang!r}, default_lang={self._default_lang!r})"

    def __call__(self, key: str, options: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        return self.t(key, options, **kwargs)

    @property
    def lang(self) -> str:
        """Bound language tag."""
        return self._lang

    @property
    def default_lang(self) -> str:
        """Fallback language tag."""
        return self._default_lang

    def _lookup(self, key: str) -> str | None:
        value = self._translations.get(self._lang, EMPTY_DICTIONARY).get(key)
        if value is None and self._lang != self._default_lang:
            value = self._translations.get(self._default_lang, EMPTY_DICTIONARY).get(key)
        return value

    def t(self, key: str, options: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """
        Get a translated string.

        Args:
            key: Translation key, e.g. "search.label"
            options: Values for {{name}} placeholders
            **kwargs: Additional placeholder values

        Returns:
            Translated string, or the key itself if no translation exists
        """
        value = self._lookup(key)

        if value is None:
            logger.debug(f"Missing translation: [{self._lang}] {key}")
            return key

        if options or kwargs:
            value = interpolate(value, {**(options or {}), **kwargs})

        return value

    def exists(self, key: str) -> bool:
        """Check if a key resolves in the bound or default language."""
        return self._lookup(key) is not None

    def all(self) -> EffectiveDictionary:
        """The bound language's own dictionary, without default-language fallback."""
        return self._translations.get(self._lang, EMPTY_DICTIONARY)

    def dir(self, lang: str | None = None) -> TextDirection:
        """Text direction of the bound language, or of lang when given."""
        return direction(lang or self._lang)
