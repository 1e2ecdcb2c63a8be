"""Tests for the rule pattern parser."""

import pytest

from stylescale.rules import ClassOrId, RuleSyntaxError, Selector, parse_rule


# ---------------------------------------------------------------------------
# Single segment
# ---------------------------------------------------------------------------


class TestBareTheme:
    def test_theme_only(self):
        assert parse_rule("primary") == Selector(theme_or_color="primary")

    def test_global_theme_only(self):
        assert parse_rule("primary*") == Selector(theme_or_color="primary", is_global=True)

    def test_bare_selector_is_unconstrained(self):
        assert parse_rule("primary").is_unconstrained

    def test_custom_color_only(self):
        selector = parse_rule("[#1a1a1a]")
        assert selector.theme_or_color == "[#1a1a1a]"
        assert selector.custom_color == "#1a1a1a"


# ---------------------------------------------------------------------------
# Two segments
# ---------------------------------------------------------------------------


class TestTwoSegments:
    def test_global_tag(self):
        assert parse_rule("button:primary*") == Selector(
            theme_or_color="primary", is_global=True, element_tag="button"
        )

    def test_global_class(self):
        assert parse_rule(".cta:danger*") == Selector(
            theme_or_color="danger",
            is_global=True,
            class_or_id=ClassOrId(kind="class", value="cta"),
        )

    def test_global_id(self):
        selector = parse_rule("#submit-btn:success*")
        assert selector.class_or_id == ClassOrId(kind="id", value="submit-btn")
        assert selector.element_tag is None

    def test_component_theme(self):
        assert parse_rule("Clock:secondary") == Selector(
            theme_or_color="secondary", component_name="Clock"
        )

    def test_every_recognized_tag(self):
        for tag in ("div", "button", "h1", "h2", "h3", "h4", "p", "input", "a", "span", "label"):
            assert parse_rule(f"{tag}:primary").element_tag == tag

    def test_unrecognized_tag_is_component(self):
        selector = parse_rule("section:primary")
        assert selector.component_name == "section"
        assert selector.element_tag is None

    def test_component_custom_color(self):
        selector = parse_rule("Footer:[rgb(26,26,26)]")
        assert selector.component_name == "Footer"
        assert selector.custom_color == "rgb(26,26,26)"


# ---------------------------------------------------------------------------
# Three segments
# ---------------------------------------------------------------------------


class TestThreeSegments:
    def test_component_tag_theme(self):
        assert parse_rule("Dashboard:button:warning") == Selector(
            theme_or_color="warning", component_name="Dashboard", element_tag="button"
        )

    def test_component_class_theme(self):
        selector = parse_rule("UserCard:.avatar:purple")
        assert selector.component_name == "UserCard"
        assert selector.class_or_id == ClassOrId(kind="class", value="avatar")
        assert selector.element_tag is None

    def test_component_id_theme(self):
        selector = parse_rule("Settings:#save-button:success")
        assert selector.class_or_id == ClassOrId(kind="id", value="save-button")

    def test_oklch_with_spaces(self):
        selector = parse_rule("Card:button:[oklch(0.7 0.2 180)]")
        assert selector.custom_color == "oklch(0.7 0.2 180)"

    def test_css_variable(self):
        selector = parse_rule("Theme:.accent:[var(--brand-color)]")
        assert selector.custom_color == "var(--brand-color)"

    def test_bracket_literal_may_contain_colon(self):
        selector = parse_rule("Header:[var(--a:b)]")
        assert selector.component_name == "Header"
        assert selector.custom_color == "var(--a:b)"

    def test_three_segment_global(self):
        assert parse_rule("Header:button:primary*").is_global

    def test_first_of_three_is_always_component(self):
        selector = parse_rule(".cta:button:primary")
        assert selector.component_name == ".cta"
        assert selector.element_tag == "button"
        assert selector.class_or_id is None


# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------


class TestWhitespace:
    def test_theme_name_with_space(self):
        selector = parse_rule("Header:dark blue")
        assert selector.component_name == "Header"
        assert selector.theme_or_color == "dark blue"

    def test_segments_are_not_trimmed(self):
        selector = parse_rule("button : primary")
        assert selector.component_name == "button "
        assert selector.element_tag is None
        assert selector.theme_or_color == " primary"

    def test_trailing_space_after_global_marker(self):
        with pytest.raises(RuleSyntaxError):
            parse_rule("button:primary* ")


# ---------------------------------------------------------------------------
# Malformed rules
# ---------------------------------------------------------------------------


class TestMalformedRules:
    @pytest.mark.parametrize(
        "rule",
        [
            "",
            "   ",
            "*",
            "button:",
            ":primary",
            "button::primary",
            "A:button:primary:extra",
            "A:B:C:D*",
            "[#fff]:primary",
            "Header:[#fff]:primary",
        ],
    )
    def test_rejected(self, rule: str) -> None:
        with pytest.raises(RuleSyntaxError):
            parse_rule(rule)

    def test_error_carries_rule(self):
        with pytest.raises(RuleSyntaxError) as exc_info:
            parse_rule("A:B:C:D")
        assert exc_info.value.rule == "A:B:C:D"
        assert "at most 3" in str(exc_info.value)

    def test_syntax_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_rule("button::primary")


class TestSelectorModel:
    def test_tag_and_class_are_exclusive(self):
        with pytest.raises(ValueError):
            Selector(
                theme_or_color="primary",
                element_tag="div",
                class_or_id=ClassOrId(kind="class", value="cta"),
            )

    def test_selector_is_frozen(self):
        selector = parse_rule("button:primary")
        with pytest.raises(AttributeError):
            selector.element_tag = "div"  # type: ignore[misc]

    def test_class_or_id_str(self):
        assert str(ClassOrId.from_marker(".cta")) == ".cta"
        assert str(ClassOrId.from_marker("#save")) == "#save"
