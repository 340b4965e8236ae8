"""
Dictionary layering.

Builds one effective dictionary for a language out of an ordered list
of tagged sources. Earlier sources establish defaults; later sources
override them only with non-empty values.

Source order per language:

    default language:  builtin(lang), builtin(stripped lang), plugin(lang), user(lang)
    other languages:   builtin(lang) or builtin(stripped lang), plugin(lang), user(lang)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from glossa.i18n.locales import strip_region

RawDictionary = Mapping[str, str | None]
DictionaryMap = Mapping[str, RawDictionary]
EffectiveDictionary = Mapping[str, str]

EMPTY_DICTIONARY: EffectiveDictionary = MappingProxyType({})


class DictionaryOrigin(str, Enum):
    """Where a raw dictionary comes from."""

    BUILTIN = "builtin"
    PLUGIN = "plugin"
    USER = "user"


@dataclass(frozen=True)
class DictionarySource:
    """One merge input: a raw dictionary (or nothing) tagged with its origin."""

    origin: DictionaryOrigin
    lang: str
    dictionary: RawDictionary | None = None

    @property
    def present(self) -> bool:
        """True if this source supplied a dictionary."""
        return self.dictionary is not None


def merge(sources: Iterable[DictionarySource | RawDictionary | None]) -> EffectiveDictionary:
    """
    Layer sources into a single read-only dictionary.

    Only truthy values are copied, so an empty or missing translation
    in a later source never blanks a value set by an earlier one.

    Args:
        sources: Tagged sources or bare dictionaries, most generic first

    Returns:
        Read-only mapping of key to translated string
    """
    result: dict[str, str] = {}
    for source in sources:
        dictionary = source.dictionary if isinstance(source, DictionarySource) else source
        if not dictionary:
            continue
        for key, value in dictionary.items():
            if value:
                result[key] = value
    return MappingProxyType(result)


def default_language_sources(
    lang: str,
    builtin: DictionaryMap,
    plugin: DictionaryMap,
    user: DictionaryMap,
) -> list[DictionarySource]:
    """Sources for the default language: exact and region-stripped built-ins both layer."""
    return [
        DictionarySource(DictionaryOrigin.BUILTIN, lang, builtin.get(lang)),
        DictionarySource(DictionaryOrigin.BUILTIN, strip_region(lang), builtin.get(strip_region(lang))),
        DictionarySource(DictionaryOrigin.PLUGIN, lang, plugin.get(lang)),
        DictionarySource(DictionaryOrigin.USER, lang, user.get(lang)),
    ]


def locale_sources(
    lang: str,
    builtin: DictionaryMap,
    plugin: DictionaryMap,
    user: DictionaryMap,
) -> list[DictionarySource]:
    """Sources for a non-default language: a single built-in, exact tag first."""
    builtin_lang = lang if builtin.get(lang) else strip_region(lang)
    return [
        DictionarySource(DictionaryOrigin.BUILTIN, builtin_lang, builtin.get(builtin_lang)),
        DictionarySource(DictionaryOrigin.PLUGIN, lang, plugin.get(lang)),
        DictionarySource(DictionaryOrigin.USER, lang, user.get(lang)),
    ]


def describe_sources(sources: Iterable[DictionarySource]) -> str:
    """Short human-readable summary, e.g. "builtin:en, user:en"."""
    return ", ".join(f"{s.origin.value}:{s.lang}" for s in sources if s.present) or "none"
