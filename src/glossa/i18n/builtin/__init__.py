"""
Built-in UI dictionaries shipped with Glossa.

One YAML file per language tag. English is the reference key set;
other languages may cover only part of it.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Mapping

import yaml
from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

REFERENCE_LANG = "en"

_dictionary_adapter = TypeAdapter(dict[str, str])


def _parse(name: str, text: str) -> dict[str, str]:
    try:
        return _dictionary_adapter.validate_python(yaml.safe_load(text) or {})
    except (yaml.YAMLError, ValidationError) as e:
        raise RuntimeError(f"Invalid built-in dictionary {name}: {e}") from e


@lru_cache(maxsize=1)
def load_builtin_dictionaries() -> Mapping[str, Mapping[str, str]]:
    """
    Load every built-in dictionary, keyed by language tag.

    Returns:
        Read-only mapping of language tag -> read-only dictionary
    """
    dictionaries: dict[str, Mapping[str, str]] = {}
    for entry in resources.files(__name__).iterdir():
        if not entry.name.endswith(".yaml"):
            continue
        lang = entry.name.removesuffix(".yaml")
        dictionaries[lang] = MappingProxyType(_parse(entry.name, entry.read_text(encoding="utf-8")))

    logger.debug(f"Loaded {len(dictionaries)} built-in dictionaries")
    return MappingProxyType(dictionaries)


def builtin_languages() -> list[str]:
    """Sorted language tags with a built-in dictionary."""
    return sorted(load_builtin_dictionaries())


def missing_keys(lang: str) -> list[str]:
    """Keys of the reference dictionary that lang does not translate."""
    dictionaries = load_builtin_dictionaries()
    reference = dictionaries[REFERENCE_LANG]
    own = dictionaries.get(lang, {})
    return sorted(key for key in reference if key not in own)
