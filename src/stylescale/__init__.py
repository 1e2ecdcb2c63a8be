"""StyleScale: theme-driven class resolution for UI elements."""

__version__ = "1.0.0"
