"""Tests for component-name context tracking."""

from pathlib import Path

from stylescale.engine import ComponentScope, component_name_from_path


class TestComponentNameFromPath:
    def test_file_stem(self):
        assert component_name_from_path("src/components/Clock.jsx") == "Clock"

    def test_index_uses_parent_directory(self):
        assert component_name_from_path("src/components/UserCard/index.tsx") == "UserCard"

    def test_path_object(self):
        assert component_name_from_path(Path("Dashboard.tsx")) == "Dashboard"

    def test_empty(self):
        assert component_name_from_path(None) is None
        assert component_name_from_path("") is None


class TestComponentScope:
    def test_starts_from_file_name(self):
        assert ComponentScope("Header.jsx").current == "Header"

    def test_declaration_overrides(self):
        scope = ComponentScope("Header.jsx")
        scope.enter_declaration("NavItem")
        assert scope.current == "NavItem"
        scope.enter_declaration("NavList")
        assert scope.current == "NavList"

    def test_anonymous_declaration_keeps_current(self):
        scope = ComponentScope("Header.jsx")
        scope.enter_declaration(None)
        scope.enter_declaration("")
        assert scope.current == "Header"

    def test_query_carries_component(self):
        query = ComponentScope("Footer.jsx").query("a", class_name="link", element_id="home")
        assert query.component_name == "Footer"
        assert query.tag == "a"
        assert query.classes == ("link",)
        assert query.element_id == "home"
