"""Component-name context tracked by the host while walking a source file."""

from __future__ import annotations

from pathlib import PurePath

from stylescale.model.query import ElementQuery

__all__ = ["ComponentScope", "component_name_from_path"]


def component_name_from_path(path: str | PurePath | None) -> str | None:
    """Logical component name for a source file.

    ``Clock.jsx`` gives ``Clock``; ``Clock/index.jsx`` gives ``Clock``.
    """
    if not path:
        return None
    file_path = PurePath(path)
    if file_path.stem == "index":
        return file_path.parent.name or None
    return file_path.stem or None


class ComponentScope:
    """The current component name for one compilation unit.

    Starts from the file's logical name; the host calls
    :meth:`enter_declaration` when it enters a named function or a variable
    initialized with a function. Last writer wins.
    """

    def __init__(self, filename: str | PurePath | None = None) -> None:
        self.current: str | None = component_name_from_path(filename)

    def enter_declaration(self, name: str | None) -> None:
        if name:
            self.current = name

    def query(
        self,
        tag: str,
        class_name: str | None = None,
        element_id: str | None = None,
    ) -> ElementQuery:
        return ElementQuery(
            tag=tag,
            class_name=class_name,
            element_id=element_id,
            component_name=self.current,
        )
