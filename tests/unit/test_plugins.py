"""Unit tests for plugin-contributed translations."""

import pytest

from glossa.exceptions import SourceReadError, TranslationErrorCode
from glossa.i18n.plugins import PluginTranslations


class TestPluginTranslations:
    """Tests for PluginTranslations."""

    def test_empty(self) -> None:
        collected = PluginTranslations()
        assert len(collected) == 0
        assert collected.as_dict() == {}

    def test_later_plugin_wins(self) -> None:
        """Keys injected twice for one language keep the last value."""
        collected = PluginTranslations()
        collected.inject_translations("first", {"en": {"a": "1", "b": "1"}})
        collected.inject_translations("second", {"en": {"b": "2"}, "fr": {"a": "un"}})

        assert collected.as_dict() == {"en": {"a": "1", "b": "2"}, "fr": {"a": "un"}}
        assert collected.contributors("en") == ["first", "second"]
        assert collected.contributors("de") == []

    def test_as_dict_is_a_copy(self) -> None:
        collected = PluginTranslations()
        collected.inject_translations("p", {"en": {"a": "1"}})
        collected.as_dict()["en"]["a"] = "changed"
        assert collected.as_dict()["en"]["a"] == "1"

    def test_invalid_translations_raise(self) -> None:
        collected = PluginTranslations()
        with pytest.raises(SourceReadError, match="bad-plugin") as exc_info:
            collected.inject_translations("bad-plugin", {"en": ["not", "a", "mapping"]})
        assert exc_info.value.code is TranslationErrorCode.INVALID_DICTIONARY
        assert exc_info.value.to_dict()["details"] == {"plugin": "bad-plugin"}
