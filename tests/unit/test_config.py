"""Unit tests for Glossa site configuration."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from glossa.core.config import SiteConfig, find_config_file
from glossa.exceptions import ConfigurationError


class TestSiteConfig:
    """Tests for configuration models."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = SiteConfig()
        assert config.title == ""
        assert config.i18n.default_locale.lang == "en"
        assert config.i18n.locales == {}
        assert config.plugins == []
        assert config.advanced.log_level == "info"

    def test_plugin_requires_mapping(self) -> None:
        """A plugin must be declared with a name and its translations."""
        with pytest.raises(ValidationError):
            SiteConfig(plugins=["search"])

    def test_plugin_translations_collected_in_order(self, caplog: pytest.LogCaptureFixture) -> None:
        config = SiteConfig(
            plugins=[
                {"name": "a", "translations": {"en": {"k": "from a"}}},
                {"name": "no-translations"},
                {"name": "b", "translations": {"en": {"k": "from b"}}},
            ]
        )
        with caplog.at_level(logging.WARNING, logger="glossa.core.config"):
            collected = config.plugin_translations()
        assert collected.as_dict() == {"en": {"k": "from b"}}
        assert collected.contributors("en") == ["a", "b"]
        assert "'no-translations' declares no translations" in caplog.text


class TestFromFile:
    """Tests for SiteConfig.from_file."""

    def test_config_file_not_found(self) -> None:
        """Test error when config file doesn't exist."""
        with pytest.raises(ConfigurationError, match="not found"):
            SiteConfig.from_file("/nonexistent/path.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "glossa.yaml"
        config_file.write_text("")
        with pytest.raises(ConfigurationError, match="empty"):
            SiteConfig.from_file(config_file)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "glossa.yaml"
        config_file.write_text("i18n: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            SiteConfig.from_file(config_file)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "glossa.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            SiteConfig.from_file(config_file)

    def test_missing_default_locale(self, tmp_path: Path) -> None:
        config_file = tmp_path / "glossa.yaml"
        config_file.write_text("""
i18n:
  locales:
    fr: { lang: fr }
""")
        with pytest.raises(ConfigurationError, match="validation failed"):
            SiteConfig.from_file(config_file)

    def test_invalid_direction(self, tmp_path: Path) -> None:
        config_file = tmp_path / "glossa.yaml"
        config_file.write_text("""
i18n:
  default_locale: { lang: en, dir: sideways }
""")
        with pytest.raises(ConfigurationError, match="validation failed"):
            SiteConfig.from_file(config_file)

    def test_full_config_loaded(self, tmp_path: Path) -> None:
        """Test locale configuration loading."""
        config_file = tmp_path / "glossa.yaml"
        config_file.write_text("""
title: "My Docs"
i18n:
  default_locale: { locale: root, lang: en }
  locales:
    root: { lang: en, label: English }
    ar: { lang: ar, dir: rtl, label: العربية }
translations:
  dir: content/i18n
advanced:
  log_level: debug
""", encoding="utf-8")

        config = SiteConfig.from_file(config_file)

        assert config.title == "My Docs"
        assert config.i18n.locales["ar"].dir == "rtl"
        assert config.i18n.locales["root"].label == "English"
        assert config.advanced.log_level == "debug"
        assert config.translations_dir() == tmp_path.resolve() / "content" / "i18n"

    def test_absolute_translations_dir(self, tmp_path: Path) -> None:
        config = SiteConfig(translations={"dir": str(tmp_path)})
        assert config.translations_dir() == tmp_path


class TestFindConfigFile:
    """Tests for configuration discovery."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "site.yaml"
        config_file.write_text("title: x\n")
        assert find_config_file(config_file) == config_file

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            find_config_file(tmp_path / "missing.yaml")

    def test_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "glossa.yaml").write_text("title: x\n")
        assert find_config_file() == Path("glossa.yaml")
