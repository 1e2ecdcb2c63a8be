from stylescale.validation.rules import ALL_RULES
from stylescale.validation.validator import (
    ValidationError,
    severity_counts,
    validate,
    validate_or_raise,
)

__all__ = [
    "ALL_RULES",
    "ValidationError",
    "severity_counts",
    "validate",
    "validate_or_raise",
]
