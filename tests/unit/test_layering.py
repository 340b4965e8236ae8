"""Unit tests for dictionary layering."""

import pytest

from glossa.i18n.layering import (
    DictionaryOrigin,
    DictionarySource,
    default_language_sources,
    describe_sources,
    locale_sources,
    merge,
)


class TestMerge:
    """Tests for merge()."""

    def test_later_truthy_wins_and_falsy_ignored(self) -> None:
        """Truthy values override, falsy values never do."""
        result = merge([{"a": "1"}, {"a": None, "b": "2"}, {"a": "3"}])
        assert dict(result) == {"a": "3", "b": "2"}

    def test_empty_string_does_not_blank(self) -> None:
        """An empty translation should keep the earlier value."""
        result = merge([{"a": "Search"}, {"a": ""}])
        assert result["a"] == "Search"

    def test_absent_sources_skipped(self) -> None:
        """None sources should be ignored."""
        assert dict(merge([None, {"a": "1"}, None])) == {"a": "1"}

    def test_tagged_sources(self) -> None:
        """DictionarySource inputs should be unwrapped."""
        sources = [
            DictionarySource(DictionaryOrigin.BUILTIN, "en", {"a": "builtin"}),
            DictionarySource(DictionaryOrigin.PLUGIN, "en", None),
            DictionarySource(DictionaryOrigin.USER, "en", {"a": "user"}),
        ]
        assert dict(merge(sources)) == {"a": "user"}

    def test_result_is_read_only(self) -> None:
        """The effective dictionary should not be mutable."""
        result = merge([{"a": "1"}])
        with pytest.raises(TypeError):
            result["a"] = "2"  # type: ignore[index]

    def test_no_sources(self) -> None:
        assert dict(merge([])) == {}


class TestSourceOrdering:
    """Tests for per-language source ordering."""

    BUILTIN = {"en-GB": {"K1": "exact"}, "en": {"K2": "stripped"}}

    def test_default_language_layers_both_builtins(self) -> None:
        """The default language should layer the exact and the stripped built-in."""
        sources = default_language_sources("en-GB", self.BUILTIN, {}, {})
        assert [(s.origin, s.lang) for s in sources] == [
            (DictionaryOrigin.BUILTIN, "en-GB"),
            (DictionaryOrigin.BUILTIN, "en"),
            (DictionaryOrigin.PLUGIN, "en-GB"),
            (DictionaryOrigin.USER, "en-GB"),
        ]
        assert dict(merge(sources)) == {"K1": "exact", "K2": "stripped"}

    def test_other_language_uses_exact_builtin_only(self) -> None:
        """A non-default language with an exact built-in should not layer the stripped one."""
        sources = locale_sources("en-GB", self.BUILTIN, {}, {})
        assert len(sources) == 3
        assert sources[0].lang == "en-GB"
        assert dict(merge(sources)) == {"K1": "exact"}

    def test_other_language_falls_back_to_stripped_builtin(self) -> None:
        """Without an exact built-in the stripped one is used."""
        sources = locale_sources("en-AU", self.BUILTIN, {}, {})
        assert sources[0].lang == "en"
        assert dict(merge(sources)) == {"K2": "stripped"}

    def test_user_overrides_plugin_overrides_builtin(self) -> None:
        """Precedence should be builtin < plugin < user."""
        builtin = {"fr": {"a": "builtin", "b": "builtin", "c": "builtin"}}
        plugin = {"fr": {"b": "plugin", "c": "plugin"}}
        user = {"fr": {"c": "user"}}
        result = merge(locale_sources("fr", builtin, plugin, user))
        assert dict(result) == {"a": "builtin", "b": "plugin", "c": "user"}

    def test_describe_sources(self) -> None:
        sources = locale_sources("fr", {"fr": {"a": "x"}}, {}, {"fr": {"b": "y"}})
        assert describe_sources(sources) == "builtin:fr, user:fr"
        assert describe_sources(locale_sources("xx", {}, {}, {})) == "none"
