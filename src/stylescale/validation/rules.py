"""Lint rules for theme configurations.

Each rule is a function taking a ThemeConfiguration and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from stylescale.model.diagnostic import Diagnostic, Severity
from stylescale.model.theme import ThemeConfiguration
from stylescale.rules.errors import RuleSyntaxError
from stylescale.rules.model import Selector
from stylescale.rules.parser import parse_rule
from stylescale.styles.colors import DEFAULT_FRAGMENT, PALETTE
from stylescale.styles.templates import THEME_TEMPLATES


def _parsed_rules(config: ThemeConfiguration) -> list[tuple[str, Selector]]:
    parsed: list[tuple[str, Selector]] = []
    for rule in config.rules:
        try:
            parsed.append((rule, parse_rule(rule)))
        except RuleSyntaxError:
            continue  # reported by check_rule_syntax
    return parsed


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_rule_syntax(config: ThemeConfiguration) -> list[Diagnostic]:
    """Every rule must match ``[component:]([tag]|[.class]|[#id]):theme[*]``."""
    diagnostics: list[Diagnostic] = []
    for rule in config.rules:
        try:
            parse_rule(rule)
        except RuleSyntaxError as exc:
            diagnostics.append(
                Diagnostic(
                    rule="check_rule_syntax",
                    severity=Severity.ERROR,
                    message=str(exc),
                    subject=rule,
                    fix="Use at most three ':'-separated segments, theme or [color] last.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Reference rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_rule_themes(config: ThemeConfiguration) -> list[Diagnostic]:
    """A rule must target a defined theme or a ``[...]`` custom color."""
    diagnostics: list[Diagnostic] = []
    for rule, selector in _parsed_rules(config):
        if selector.custom_color is not None or config.is_theme(selector.theme_or_color):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_rule_themes",
                severity=Severity.WARNING,
                message=f"Rule targets unknown theme '{selector.theme_or_color}'; it will add no classes.",
                subject=rule,
                fix="Define the theme under 'colors' or use a [custom] color.",
            )
        )
    return diagnostics


def _check_theme_map(
    config: ThemeConfiguration, mapping: dict[str, str], rule_name: str, section: str
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for component, theme in mapping.items():
        if config.is_theme(theme):
            continue
        diagnostics.append(
            Diagnostic(
                rule=rule_name,
                severity=Severity.WARNING,
                message=f"{section} maps '{component}' to unknown theme '{theme}'.",
                subject=component,
                fix="Define the theme under 'colors'.",
            )
        )
    return diagnostics


def check_component_themes(config: ThemeConfiguration) -> list[Diagnostic]:
    """Component map values must name defined themes."""
    return _check_theme_map(config, config.components, "check_component_themes", "components")


def check_dark_mode_themes(config: ThemeConfiguration) -> list[Diagnostic]:
    """Dark-mode map values must name defined themes."""
    return _check_theme_map(config, config.dark_mode, "check_dark_mode_themes", "darkMode")


def check_global_markers(config: ThemeConfiguration) -> list[Diagnostic]:
    """A global ``*`` rule should not also be scoped to a component."""
    diagnostics: list[Diagnostic] = []
    for rule, selector in _parsed_rules(config):
        if selector.is_global and selector.component_name is not None:
            diagnostics.append(
                Diagnostic(
                    rule="check_global_markers",
                    severity=Severity.WARNING,
                    message=(
                        f"Rule is marked global but only applies inside "
                        f"'{selector.component_name}'."
                    ),
                    subject=rule,
                    fix="Drop the component segment or the trailing '*'.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (INFO severity)
# ---------------------------------------------------------------------------


def check_unscoped_rules(config: ThemeConfiguration) -> list[Diagnostic]:
    """Rules without a component segment apply everywhere, marked or not."""
    diagnostics: list[Diagnostic] = []
    for rule, selector in _parsed_rules(config):
        if selector.component_name is None and not selector.is_global:
            diagnostics.append(
                Diagnostic(
                    rule="check_unscoped_rules",
                    severity=Severity.INFO,
                    message="Rule has no component segment and applies to every component.",
                    subject=rule,
                    fix="Append '*' to mark it global.",
                )
            )
    return diagnostics


def check_palette_colors(config: ThemeConfiguration) -> list[Diagnostic]:
    """Theme colors outside the palette table fall back to the neutral default."""
    diagnostics: list[Diagnostic] = []
    for name, theme in config.colors.items():
        for role in ("main", "light", "dark", "text"):
            literal = theme.role(role)
            if literal.strip().lower() in PALETTE:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_palette_colors",
                    severity=Severity.INFO,
                    message=(
                        f"Theme '{name}' {role} color {literal} has no palette entry "
                        f"and renders as {DEFAULT_FRAGMENT}."
                    ),
                    subject=name,
                )
            )
    return diagnostics


def check_tag_constraints(config: ThemeConfiguration) -> list[Diagnostic]:
    """A tag constraint on a tag with no style template never adds classes."""
    diagnostics: list[Diagnostic] = []
    for rule, selector in _parsed_rules(config):
        tag = selector.element_tag
        if tag is not None and tag not in THEME_TEMPLATES:
            diagnostics.append(
                Diagnostic(
                    rule="check_tag_constraints",
                    severity=Severity.INFO,
                    message=f"Tag '{tag}' has no style template; the rule adds no classes.",
                    subject=rule,
                )
            )
    return diagnostics


ALL_RULES = [
    check_rule_syntax,
    check_rule_themes,
    check_component_themes,
    check_dark_mode_themes,
    check_global_markers,
    check_unscoped_rules,
    check_palette_colors,
    check_tag_constraints,
]
