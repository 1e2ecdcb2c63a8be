"""StyleScale model layer -- public type re-exports."""

from stylescale.model.diagnostic import Diagnostic, Severity
from stylescale.model.query import ElementQuery
from stylescale.model.theme import ColorTheme, ConfigError, ThemeConfiguration

__all__ = [
    # theme
    "ColorTheme",
    "ThemeConfiguration",
    "ConfigError",
    # query
    "ElementQuery",
    # diagnostic
    "Severity",
    "Diagnostic",
]
