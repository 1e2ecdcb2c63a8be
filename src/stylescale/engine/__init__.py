from stylescale.engine.merge import (
    ClassPatch,
    DynamicClass,
    LiteralClass,
    PrefixedExpression,
    merge_class_names,
    patch_class_attribute,
    property_prefix,
)
from stylescale.engine.resolution import ResolutionEngine
from stylescale.engine.scope import ComponentScope, component_name_from_path

__all__ = [
    "ClassPatch",
    "DynamicClass",
    "LiteralClass",
    "PrefixedExpression",
    "merge_class_names",
    "patch_class_attribute",
    "property_prefix",
    "ResolutionEngine",
    "ComponentScope",
    "component_name_from_path",
]
