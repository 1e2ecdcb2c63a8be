"""Rule model: ClassOrId and Selector dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from stylescale.styles.colors import parse_custom_color


@dataclass(frozen=True)
class ClassOrId:
    """A class (``.name``) or id (``#name``) constraint."""

    kind: str  # "class", "id"
    value: str

    @classmethod
    def from_marker(cls, raw: str) -> ClassOrId:
        if raw.startswith("."):
            return cls(kind="class", value=raw[1:])
        if raw.startswith("#"):
            return cls(kind="id", value=raw[1:])
        raise ValueError(f"Invalid class/id selector: {raw!r}")

    def __str__(self) -> str:
        return ("." if self.kind == "class" else "#") + self.value


@dataclass(frozen=True)
class Selector:
    """A parsed rule: optional constraints plus the theme or custom color to apply.

    A selector names either an element tag or a class/id, never both.
    """

    theme_or_color: str
    is_global: bool = False
    component_name: str | None = None
    element_tag: str | None = None
    class_or_id: ClassOrId | None = None

    def __post_init__(self) -> None:
        if self.element_tag is not None and self.class_or_id is not None:
            raise ValueError("A selector cannot constrain both a tag and a class/id")

    @property
    def custom_color(self) -> str | None:
        """Raw CSS value when the target is a ``[...]`` literal."""
        return parse_custom_color(self.theme_or_color)

    @property
    def is_unconstrained(self) -> bool:
        return (
            self.component_name is None
            and self.element_tag is None
            and self.class_or_id is None
        )
