"""Configuration validator: runs every lint rule over a ThemeConfiguration."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Iterable

from stylescale.model.diagnostic import Diagnostic, Severity
from stylescale.model.theme import ThemeConfiguration
from stylescale.validation.rules import ALL_RULES

LintRule = Callable[[ThemeConfiguration], list[Diagnostic]]


class ValidationError(Exception):
    """A theme configuration has ERROR-severity diagnostics.

    ``diagnostics`` holds only the errors; ``subjects`` the rules or
    components they refer to, in report order.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        self.subjects = [d.subject for d in diagnostics if d.subject]
        super().__init__(
            f"Theme configuration has {len(diagnostics)} error(s): "
            + "; ".join(str(d) for d in diagnostics)
        )


def severity_counts(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    """Number of diagnostics per severity, with every severity present."""
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts.get(severity, 0) for severity in Severity}


def validate(
    config: ThemeConfiguration, extra_rules: list[LintRule] | None = None
) -> list[Diagnostic]:
    """Lint *config* with the built-in rules, then any *extra_rules*."""
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or [])]:
        diagnostics.extend(rule(config))
    return diagnostics


def validate_or_raise(
    config: ThemeConfiguration, extra_rules: list[LintRule] | None = None
) -> list[Diagnostic]:
    """Lint *config*, raising :class:`ValidationError` if anything is an error.

    Returns the warnings and info diagnostics otherwise.
    """
    diagnostics = validate(config, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
