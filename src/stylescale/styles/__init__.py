from stylescale.styles.colors import DEFAULT_FRAGMENT, PALETTE, parse_custom_color, resolve_color
from stylescale.styles.resolver import StyleResolver
from stylescale.styles.templates import CUSTOM_TEMPLATES, RECOGNIZED_TAGS, THEME_TEMPLATES

__all__ = [
    "DEFAULT_FRAGMENT",
    "PALETTE",
    "parse_custom_color",
    "resolve_color",
    "StyleResolver",
    "CUSTOM_TEMPLATES",
    "RECOGNIZED_TAGS",
    "THEME_TEMPLATES",
]
