"""StyleResolver: per-tag, per-theme class token tables."""

from __future__ import annotations

from functools import lru_cache

from stylescale.model.theme import ColorTheme, ThemeConfiguration
from stylescale.styles.colors import DEFAULT_FRAGMENT, parse_custom_color, resolve_color
from stylescale.styles.templates import CUSTOM_TEMPLATES, THEME_TEMPLATES

__all__ = ["StyleResolver", "custom_styles", "theme_styles"]


def _prefixed(tokens: list[str], prefix: str) -> tuple[str, ...]:
    return tuple(prefix + token for token in tokens)


@lru_cache(maxsize=1024)
def theme_styles(
    tag: str,
    theme: ColorTheme,
    dark_prefix: str = "",
    fallback: str = DEFAULT_FRAGMENT,
) -> tuple[str, ...]:
    """Expand the theme template for *tag* with *theme*'s palette fragments."""
    template = THEME_TEMPLATES.get(tag)
    if template is None:
        return ()
    fragments = {
        "main": resolve_color(theme.main, fallback),
        "light": resolve_color(theme.light, fallback),
        "dark": resolve_color(theme.dark, fallback),
        "text": resolve_color(theme.text, fallback),
    }
    return _prefixed([token.format(**fragments) for token in template], dark_prefix)


@lru_cache(maxsize=1024)
def custom_styles(tag: str, color: str, dark_prefix: str = "") -> tuple[str, ...]:
    """Expand the custom-color template for *tag* with the raw CSS value *color*."""
    template = CUSTOM_TEMPLATES.get(tag)
    if template is None:
        return ()
    return _prefixed([token.format(color=color) for token in template], dark_prefix)


class StyleResolver:
    """Resolve a theme name or custom color literal to class tokens for a tag.

    Unknown themes and tags without a template yield an empty list.
    """

    def __init__(
        self,
        config: ThemeConfiguration,
        dark_prefix: str = "dark:",
        fallback: str = DEFAULT_FRAGMENT,
    ) -> None:
        self._config = config
        self._dark_prefix = dark_prefix
        self._fallback = fallback

    def styles_for(self, tag: str, theme_or_color: str, dark: bool = False) -> list[str]:
        prefix = self._dark_prefix if dark else ""
        custom = parse_custom_color(theme_or_color)
        if custom is not None:
            return list(custom_styles(tag, custom, prefix))
        theme = self._config.colors.get(theme_or_color)
        if theme is None:
            return []
        return list(theme_styles(tag, theme, prefix, self._fallback))
