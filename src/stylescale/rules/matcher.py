"""Rule matching: does an element query satisfy a selector's constraints?"""

from __future__ import annotations

from collections.abc import Iterable

from stylescale.model.query import ElementQuery
from stylescale.rules.model import Selector

__all__ = ["matches", "matching_selectors"]


def matches(query: ElementQuery, selector: Selector) -> bool:
    """Return True if *query* satisfies every constraint *selector* declares.

    Undeclared constraints are wildcards, so a bare theme selector matches
    every element.
    """
    if selector.component_name is not None:
        if selector.component_name != query.component_name:
            return False
    if selector.element_tag is not None:
        if selector.element_tag != query.tag:
            return False
    target = selector.class_or_id
    if target is not None:
        if target.kind == "class":
            return target.value in query.classes
        if target.kind == "id":
            return query.element_id is not None and query.element_id == target.value
        return False
    return True


def matching_selectors(
    query: ElementQuery, selectors: Iterable[Selector]
) -> list[Selector]:
    """Return every selector that matches *query*, in the given order."""
    return [selector for selector in selectors if matches(query, selector)]
