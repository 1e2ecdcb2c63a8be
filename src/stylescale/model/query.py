"""Element query: the per-element input to resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ElementQuery:
    """One UI element encountered by the host.

    ``class_name`` is the literal class attribute (if any), ``element_id`` the
    literal id attribute, and ``component_name`` the enclosing component.
    """

    tag: str
    class_name: str | None = None
    element_id: str | None = None
    component_name: str | None = None

    @property
    def classes(self) -> tuple[str, ...]:
        """Whitespace-separated class tokens of the existing class attribute."""
        if not self.class_name:
            return ()
        return tuple(self.class_name.split())
