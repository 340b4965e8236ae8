"""
Plugin-contributed translations.

Plugins inject dictionaries per language. Contributions for the same
language are merged key by key, the plugin registered last winning.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from glossa.exceptions import SourceReadError, TranslationErrorCode

logger = logging.getLogger(__name__)

_translations_adapter = TypeAdapter(dict[str, dict[str, str | None]])


class PluginTranslations:
    """Collects the dictionaries injected by plugins."""

    def __init__(self) -> None:
        self._translations: dict[str, dict[str, str | None]] = {}
        self._contributors: dict[str, list[str]] = {}

    def inject_translations(self, plugin_name: str, translations: Mapping[str, Any]) -> None:
        """
        Add a plugin's dictionaries.

        Args:
            plugin_name: Name of the contributing plugin
            translations: Mapping of language tag -> dictionary

        Raises:
            SourceReadError: If the dictionaries are not string mappings
        """
        try:
            validated = _translations_adapter.validate_python(dict(translations))
        except ValidationError as e:
            raise SourceReadError(
                f"Plugin {plugin_name} injected invalid translations: {e}",
                code=TranslationErrorCode.INVALID_DICTIONARY,
                details={"plugin": plugin_name},
            ) from e

        for lang, dictionary in validated.items():
            self._translations.setdefault(lang, {}).update(dictionary)
            self._contributors.setdefault(lang, []).append(plugin_name)
            logger.debug(f"Plugin {plugin_name} injected {len(dictionary)} keys for {lang}")

    def contributors(self, lang: str) -> list[str]:
        """Plugins that contributed to lang, in injection order."""
        return list(self._contributors.get(lang, []))

    def as_dict(self) -> dict[str, dict[str, str | None]]:
        """Merged dictionaries keyed by language tag."""
        return {lang: dict(dictionary) for lang, dictionary in self._translations.items()}

    def __len__(self) -> int:
        return len(self._translations)
