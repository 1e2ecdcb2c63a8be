"""Theme configuration model: ColorTheme and ThemeConfiguration."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_TEXT_COLOR = "#ffffff"

_ROLES = ("main", "light", "dark", "text")


class ConfigError(ValueError):
    """Raised when a theme configuration mapping is structurally invalid."""


@dataclass(frozen=True)
class ColorTheme:
    """Four related color roles usable by any component."""

    main: str
    light: str
    dark: str
    text: str = DEFAULT_TEXT_COLOR

    def role(self, name: str) -> str:
        """Return the color literal for role *name* (main/light/dark/text)."""
        if name not in _ROLES:
            raise KeyError(name)
        return getattr(self, name)

    @classmethod
    def from_dict(cls, name: str, data: Any) -> ColorTheme:
        if not isinstance(data, Mapping):
            raise ConfigError(f"Theme {name!r} must be a mapping of color roles")
        values: dict[str, str] = {}
        for role in _ROLES:
            value = data.get(role)
            if value is None:
                if role == "text":
                    continue
                raise ConfigError(f"Theme {name!r} is missing the {role!r} color")
            if not isinstance(value, str):
                raise ConfigError(f"Theme {name!r} color {role!r} must be a string")
            values[role] = value
        return cls(**values)


def _string_map(section: str, data: Any) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{section!r} must be a mapping of component names to themes")
    result: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigError(f"{section!r} entries must map strings to strings")
        result[key] = value
    return result


@dataclass(frozen=True)
class ThemeConfiguration:
    """Named color themes, component theme map, pattern rules and dark-mode map.

    Treated as read-only for the lifetime of a resolution session.
    """

    colors: dict[str, ColorTheme] = field(default_factory=dict)
    components: dict[str, str] = field(default_factory=dict)
    rules: tuple[str, ...] = ()
    dark_mode: dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> ThemeConfiguration:
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThemeConfiguration:
        """Build a configuration from an already-deserialized mapping."""
        if not isinstance(data, Mapping):
            raise ConfigError("Theme configuration must be a mapping")

        raw_colors = data.get("colors") or {}
        if not isinstance(raw_colors, Mapping):
            raise ConfigError("'colors' must be a mapping of theme names to themes")
        colors = {
            str(name): ColorTheme.from_dict(str(name), theme)
            for name, theme in raw_colors.items()
        }

        raw_rules = data.get("rules") or []
        if isinstance(raw_rules, str) or not isinstance(raw_rules, (list, tuple)):
            raise ConfigError("'rules' must be a list of rule strings")
        for rule in raw_rules:
            if not isinstance(rule, str):
                raise ConfigError(f"Rule {rule!r} must be a string")

        dark_mode = data.get("darkMode", data.get("dark_mode"))
        return cls(
            colors=colors,
            components=_string_map("components", data.get("components")),
            rules=tuple(raw_rules),
            dark_mode=_string_map("darkMode", dark_mode),
        )

    @classmethod
    def from_json(cls, source: str) -> ThemeConfiguration:
        try:
            data = json.loads(source)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON theme configuration: {exc}") from exc
        return cls.from_dict(data)

    def is_theme(self, name: str) -> bool:
        return name in self.colors
