"""Rule pattern parser.

Syntax examples:
    button:primary*              every button, global
    Dashboard:button:warning     buttons inside Dashboard
    .cta:danger*                 every element with class "cta"
    Settings:#save:success       element with id "save" inside Settings
    Header:[#1a1a1a]             custom color for everything in Header
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from stylescale.rules.errors import RuleSyntaxError
from stylescale.rules.model import ClassOrId, Selector
from stylescale.styles.templates import RECOGNIZED_TAGS

__all__ = ["parse_rule"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

MAX_SEGMENTS = 3


@dataclass(frozen=True)
class _Segment:
    text: str
    custom: bool = False

    @property
    def is_class_or_id(self) -> bool:
        return not self.custom and self.text[:1] in (".", "#")


@dataclass(frozen=True)
class _RawRule:
    segments: tuple[_Segment, ...]
    is_global: bool


class RuleTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a flat list of segments."""

    def custom_segment(self, items: list[Token]) -> _Segment:
        return _Segment(str(items[0]), custom=True)

    def name_segment(self, items: list[Token]) -> _Segment:
        return _Segment(str(items[0]))

    def start(self, items: list[object]) -> _RawRule:
        segments = tuple(item for item in items if isinstance(item, _Segment))
        is_global = any(
            isinstance(item, Token) and item.type == "GLOBAL" for item in items
        )
        return _RawRule(segments=segments, is_global=is_global)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _build_selector(rule: str, raw: _RawRule) -> Selector:
    """Decide what each segment means from the segment count and markers."""
    segments = raw.segments
    if len(segments) > MAX_SEGMENTS:
        raise RuleSyntaxError(
            f"Rule {rule!r} has {len(segments)} segments; at most {MAX_SEGMENTS} are allowed",
            rule=rule,
        )
    for segment in segments[:-1]:
        if segment.custom:
            raise RuleSyntaxError(
                f"Rule {rule!r}: a custom color must be the last segment", rule=rule
            )

    theme = segments[-1].text
    if len(segments) == 1:
        return Selector(theme_or_color=theme, is_global=raw.is_global)

    if len(segments) == 2:
        first = segments[0]
        if first.is_class_or_id:
            return Selector(
                theme_or_color=theme,
                is_global=raw.is_global,
                class_or_id=ClassOrId.from_marker(first.text),
            )
        if first.text in RECOGNIZED_TAGS:
            return Selector(
                theme_or_color=theme, is_global=raw.is_global, element_tag=first.text
            )
        return Selector(
            theme_or_color=theme, is_global=raw.is_global, component_name=first.text
        )

    component, target = segments[0], segments[1]
    if target.is_class_or_id:
        return Selector(
            theme_or_color=theme,
            is_global=raw.is_global,
            component_name=component.text,
            class_or_id=ClassOrId.from_marker(target.text),
        )
    return Selector(
        theme_or_color=theme,
        is_global=raw.is_global,
        component_name=component.text,
        element_tag=target.text,
    )


@lru_cache(maxsize=512)
def parse_rule(rule: str) -> Selector:
    """Parse a single rule pattern into a Selector.

    Raises :class:`RuleSyntaxError` for empty rules, empty segments, more than
    three segments, or a custom color anywhere but the last segment.
    """
    if not rule or not rule.strip():
        raise RuleSyntaxError("Empty rule", rule=rule)
    try:
        tree = _parser().parse(rule)
    except LarkError as exc:
        column = getattr(exc, "column", None)
        raise RuleSyntaxError(
            f"Invalid rule {rule!r}: {exc}", rule=rule, column=column
        ) from exc
    raw = RuleTransformer().transform(tree)
    return _build_selector(rule, raw)
