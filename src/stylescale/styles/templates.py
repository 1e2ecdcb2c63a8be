"""Per-tag style templates.

Theme templates use ``{main}``, ``{light}``, ``{dark}`` and ``{text}``
placeholders, filled with palette fragments. Custom templates use ``{color}``,
filled with the raw CSS value of a bracket literal.
"""

from __future__ import annotations

__all__ = ["CUSTOM_TEMPLATES", "RECOGNIZED_TAGS", "THEME_TEMPLATES"]

THEME_TEMPLATES: dict[str, tuple[str, ...]] = {
    "div": (
        "bg-gradient-to-br", "from-{main}", "to-{dark}", "text-{text}",
        "p-6", "rounded-lg", "shadow-lg",
    ),
    "h1": ("text-4xl", "font-bold", "text-{light}", "mb-4"),
    "h2": ("text-3xl", "font-bold", "text-{light}", "mb-4"),
    "h3": ("text-2xl", "font-semibold", "text-{light}", "mb-3"),
    "h4": ("text-xl", "font-semibold", "text-{text}", "mb-2"),
    "p": ("text-{text}", "opacity-90", "mb-2"),
    "button": (
        "bg-{dark}", "hover:bg-{main}", "text-{text}",
        "px-4", "py-2", "rounded-lg", "font-medium",
        "transition-colors", "duration-200",
        "shadow-md", "hover:shadow-lg", "cursor-pointer",
    ),
    "input": (
        "border-2", "border-{light}", "focus:border-{dark}",
        "rounded-lg", "px-4", "py-2",
        "bg-white", "text-gray-900",
        "focus:outline-none", "focus:ring-2", "focus:ring-{main}",
        "focus:ring-opacity-50",
    ),
    "a": ("text-{light}", "hover:text-{text}", "underline", "transition-colors"),
    "span": ("text-{text}",),
    "label": ("text-{text}", "font-medium", "mb-2", "block"),
}

CUSTOM_TEMPLATES: dict[str, tuple[str, ...]] = {
    "div": (
        "[background-color:{color}]", "[color:white]",
        "p-6", "rounded-lg", "shadow-lg",
    ),
    "h1": ("text-4xl", "font-bold", "[color:white]", "mb-4"),
    "h2": ("text-3xl", "font-bold", "[color:white]", "mb-4"),
    "h3": ("text-2xl", "font-semibold", "[color:white]", "mb-3"),
    "h4": ("text-xl", "font-semibold", "[color:white]", "mb-2"),
    "p": ("[color:white]", "opacity-90", "mb-2"),
    "button": (
        "[background-color:{color}]", "hover:[background-color:{color}]/90",
        "[color:white]", "px-4", "py-2", "rounded-lg", "font-medium",
        "transition-colors", "cursor-pointer",
    ),
    "input": (
        "border-2", "[border-color:{color}]", "focus:[border-color:{color}]/90",
        "rounded-lg", "px-4", "py-2", "bg-white", "text-gray-900",
        "focus:outline-none",
    ),
    "a": ("[color:{color}]", "hover:underline", "transition-colors"),
    "span": ("[color:{color}]",),
    "label": ("[color:{color}]", "font-medium", "mb-2", "block"),
}

# Tags a two-segment rule recognizes as a tag constraint.
RECOGNIZED_TAGS = frozenset(
    {"div", "button", "h1", "h2", "h3", "h4", "p", "input", "a", "span", "label"}
)
