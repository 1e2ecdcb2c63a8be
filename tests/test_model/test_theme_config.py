"""Tests for the theme configuration model."""

from pathlib import Path

import pytest

from stylescale.model import ColorTheme, ConfigError, ElementQuery, ThemeConfiguration

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestColorTheme:
    def test_text_defaults_to_white(self):
        theme = ColorTheme.from_dict("t", {"main": "#3b82f6", "light": "#60a5fa", "dark": "#2563eb"})
        assert theme.text == "#ffffff"

    def test_missing_role_raises(self):
        with pytest.raises(ConfigError, match="missing the 'dark' color"):
            ColorTheme.from_dict("t", {"main": "#3b82f6", "light": "#60a5fa"})

    def test_non_string_role_raises(self):
        with pytest.raises(ConfigError):
            ColorTheme.from_dict("t", {"main": 1, "light": "#60a5fa", "dark": "#2563eb"})

    def test_role_lookup(self):
        theme = ColorTheme(main="#3b82f6", light="#60a5fa", dark="#2563eb")
        assert theme.role("light") == "#60a5fa"
        with pytest.raises(KeyError):
            theme.role("accent")

    def test_theme_is_frozen(self):
        theme = ColorTheme(main="#3b82f6", light="#60a5fa", dark="#2563eb")
        with pytest.raises(AttributeError):
            theme.main = "#000000"  # type: ignore[misc]


class TestThemeConfiguration:
    def test_fixture_loads(self):
        config = ThemeConfiguration.from_json((FIXTURES / "theme.config.json").read_text())
        assert set(config.colors) == {"primary", "secondary", "purple", "success", "danger", "warning"}
        assert config.components["Clock"] == "primary"
        assert config.rules[0] == "button:primary*"
        assert config.dark_mode == {"Clock": "purple", "Dashboard": "secondary"}

    def test_missing_sections_default_empty(self):
        config = ThemeConfiguration.from_dict({})
        assert config == ThemeConfiguration.empty()
        assert config.rules == ()

    def test_snake_case_dark_mode_alias(self):
        config = ThemeConfiguration.from_dict({"dark_mode": {"Clock": "primary"}})
        assert config.dark_mode == {"Clock": "primary"}

    def test_rules_must_be_list(self):
        with pytest.raises(ConfigError):
            ThemeConfiguration.from_dict({"rules": "button:primary"})

    def test_rule_entries_must_be_strings(self):
        with pytest.raises(ConfigError):
            ThemeConfiguration.from_dict({"rules": ["button:primary", 3]})

    def test_component_values_must_be_strings(self):
        with pytest.raises(ConfigError):
            ThemeConfiguration.from_dict({"components": {"Clock": ["primary"]}})

    def test_invalid_json(self):
        with pytest.raises(ConfigError, match="Invalid JSON"):
            ThemeConfiguration.from_json("{not json")

    def test_is_theme(self):
        config = ThemeConfiguration.from_dict(
            {"colors": {"primary": {"main": "#3b82f6", "light": "#60a5fa", "dark": "#2563eb"}}}
        )
        assert config.is_theme("primary")
        assert not config.is_theme("secondary")


class TestElementQuery:
    def test_classes_split_on_whitespace(self):
        query = ElementQuery(tag="div", class_name="  card\tcta  big ")
        assert query.classes == ("card", "cta", "big")

    def test_no_class_name(self):
        assert ElementQuery(tag="div").classes == ()
