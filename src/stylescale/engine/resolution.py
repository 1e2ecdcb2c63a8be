"""Resolution engine: priority policy over rules, component themes and dark mode."""

from __future__ import annotations

import logging

from stylescale.config import StyleScaleConfig
from stylescale.engine.merge import ClassPatch, DynamicClass, patch_class_attribute
from stylescale.model.diagnostic import Diagnostic, Severity
from stylescale.model.query import ElementQuery
from stylescale.model.theme import ThemeConfiguration
from stylescale.rules.errors import RuleSyntaxError
from stylescale.rules.matcher import matching_selectors
from stylescale.rules.model import Selector
from stylescale.rules.parser import parse_rule
from stylescale.styles.resolver import StyleResolver

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """Resolve the class tokens for elements under one theme configuration.

    Priority, per element:
        1. Every matching rule, in configuration order, contributes tokens.
        2. Only if rules produced nothing: the component's mapped theme.
        3. Always: the component's dark-mode theme, dark-prefixed, appended.

    Malformed rules are parsed once, skipped, and reported in
    :attr:`diagnostics` unless ``settings.strict_rules`` is set.
    """

    def __init__(
        self,
        config: ThemeConfiguration | None = None,
        settings: StyleScaleConfig | None = None,
    ) -> None:
        self.config = config if config is not None else ThemeConfiguration.empty()
        self.settings = settings or StyleScaleConfig()
        self.styles = StyleResolver(
            self.config,
            dark_prefix=self.settings.dark_prefix,
            fallback=self.settings.fallback_color,
        )
        self.diagnostics: list[Diagnostic] = []
        self.selectors: list[Selector] = self._parse_rules()

    def _parse_rules(self) -> list[Selector]:
        selectors: list[Selector] = []
        for rule in self.config.rules:
            try:
                selectors.append(parse_rule(rule))
            except RuleSyntaxError as exc:
                if self.settings.strict_rules:
                    raise
                logger.warning("Skipping rule %r: %s", rule, exc)
                self.diagnostics.append(
                    Diagnostic(
                        rule="check_rule_syntax",
                        severity=Severity.ERROR,
                        message=str(exc),
                        subject=rule,
                    )
                )
        return selectors

    def resolve(self, query: ElementQuery) -> list[str]:
        """Return the ordered class tokens for *query* (empty means leave it alone)."""
        component = query.component_name
        if not component:
            return []

        tokens: list[str] = []
        sources: list[str] = []
        for selector in matching_selectors(query, self.selectors):
            tokens.extend(self.styles.styles_for(query.tag, selector.theme_or_color))
        if tokens:
            sources.append("rules")
        else:
            theme = self.config.components.get(component)
            if theme is not None:
                tokens.extend(self.styles.styles_for(query.tag, theme))
                if tokens:
                    sources.append("component")

        dark_theme = self.config.dark_mode.get(component)
        if dark_theme is not None:
            dark_tokens = self.styles.styles_for(query.tag, dark_theme, dark=True)
            if dark_tokens:
                tokens.extend(dark_tokens)
                sources.append("dark mode")

        if tokens:
            logger.debug(
                "Resolved <%s> in %s from %s: %d token(s)",
                query.tag, component, " + ".join(sources), len(tokens),
            )
        return tokens

    def apply(
        self, query: ElementQuery, class_value: str | DynamicClass | None = None
    ) -> ClassPatch | None:
        """Resolve *query* and work out the class attribute rewrite, if any."""
        return patch_class_attribute(class_value, self.resolve(query))
