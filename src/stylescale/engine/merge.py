"""Class merging: add generated tokens without clobbering user-authored ones."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

__all__ = [
    "ClassPatch",
    "DynamicClass",
    "LiteralClass",
    "PrefixedExpression",
    "merge_class_names",
    "patch_class_attribute",
    "property_prefix",
]


@dataclass(frozen=True)
class DynamicClass:
    """A class attribute holding a computed value that cannot be inspected here."""

    expression: Any


@dataclass(frozen=True)
class LiteralClass:
    """Replace (or create) the class attribute with a literal string."""

    value: str


@dataclass(frozen=True)
class PrefixedExpression:
    """Prepend a literal token prefix to the preserved original expression."""

    prefix: str
    expression: Any


ClassPatch = Union[LiteralClass, PrefixedExpression]


def property_prefix(token: str) -> str:
    """The part of *token* before its first ``-`` (the whole token if none)."""
    return token.split("-", 1)[0]


def merge_class_names(existing: str | None, new_tokens: Sequence[str]) -> str:
    """Append each new token unless an existing token already styles its property.

    Existing tokens are never removed or reordered.
    """
    if not existing:
        return " ".join(new_tokens)

    existing_tokens = existing.split()
    merged = list(existing_tokens)
    for token in new_tokens:
        prefix = property_prefix(token)
        conflict = any(
            current == prefix or current.startswith(prefix + "-")
            for current in existing_tokens
        )
        if not conflict:
            merged.append(token)
    return " ".join(merged)


def patch_class_attribute(
    current: str | DynamicClass | None, new_tokens: Sequence[str]
) -> ClassPatch | None:
    """Work out how the host should rewrite an element's class attribute.

    Returns None when there is nothing to add.
    """
    if not new_tokens:
        return None
    if isinstance(current, DynamicClass):
        return PrefixedExpression(
            prefix=" ".join(new_tokens) + " ", expression=current.expression
        )
    return LiteralClass(merge_class_names(current, new_tokens))
