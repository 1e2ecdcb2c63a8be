"""Color resolution: palette lookup and custom (bracket) color detection."""

from __future__ import annotations

import re

__all__ = ["DEFAULT_FRAGMENT", "PALETTE", "parse_custom_color", "resolve_color"]

DEFAULT_FRAGMENT = "gray-500"

# Canonical hex literal -> palette fragment.
PALETTE: dict[str, str] = {
    "#3b82f6": "blue-500",
    "#60a5fa": "blue-400",
    "#2563eb": "blue-600",
    "#1d4ed8": "blue-700",
    "#8b5cf6": "purple-500",
    "#a78bfa": "purple-400",
    "#7c3aed": "purple-600",
    "#6d28d9": "purple-700",
    "#a855f7": "fuchsia-500",
    "#c084fc": "fuchsia-400",
    "#9333ea": "fuchsia-600",
    "#7e22ce": "fuchsia-700",
    "#10b981": "green-500",
    "#34d399": "green-400",
    "#059669": "green-600",
    "#047857": "green-700",
    "#ef4444": "red-500",
    "#f87171": "red-400",
    "#dc2626": "red-600",
    "#b91c1c": "red-700",
    "#f59e0b": "amber-500",
    "#fbbf24": "amber-400",
    "#d97706": "amber-600",
    "#b45309": "amber-700",
    "#ffffff": "white",
    "#000000": "black",
}

# [#hex], [rgb()], [rgba()], [oklch()], [var(--name)]
_CUSTOM_RE = re.compile(r"\[(?P<value>.*)\]", re.DOTALL)


def resolve_color(literal: str | None, default: str = DEFAULT_FRAGMENT) -> str:
    """Map a color literal to its palette fragment, or *default* when unknown."""
    if not literal:
        return default
    return PALETTE.get(literal.strip().lower(), default)


def parse_custom_color(value: str | None) -> str | None:
    """Return the raw CSS value of a ``[...]`` literal, or None if *value* is not one."""
    if not value:
        return None
    match = _CUSTOM_RE.fullmatch(value.strip())
    if match is None:
        return None
    return match.group("value")
