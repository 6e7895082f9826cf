"""
Prop table tests

The static tables must stay consistent: style and pseudo names never
overlap, and no name is both disallowed and conditionally allowed.
"""

import pytest

from starstyle.exceptions import PropTableError
from starstyle.props import tables
from starstyle.props.tables import (
    CSS_PROPS, DISALLOWED_PROPS, NON_STANDARD_PROPS, PSEUDO_PROPS, SVG_ELEMENTS,
    is_svg_element, is_valid_for_element
)


class TestTableConsistency:
    """Load-time invariants over the full tables"""

    def test_style_and_pseudo_tables_are_disjoint(self):
        assert not CSS_PROPS.intersection(PSEUDO_PROPS)

    def test_disallowed_and_conditional_tables_are_disjoint(self):
        assert not DISALLOWED_PROPS.intersection(NON_STANDARD_PROPS)

    def test_check_tables_passes_on_shipped_data(self):
        tables.check_tables()

    def test_overlapping_style_and_pseudo_names_are_fatal(self, monkeypatch):
        monkeypatch.setattr(tables, "CSS_PROPS", CSS_PROPS | {"_hover"})
        with pytest.raises(PropTableError, match="_hover"):
            tables.check_tables()

    def test_conflicting_allow_and_disallow_is_fatal(self, monkeypatch):
        monkeypatch.setattr(tables, "DISALLOWED_PROPS", DISALLOWED_PROPS | {"loading"})
        with pytest.raises(PropTableError, match="loading"):
            tables.check_tables()

    def test_unusable_pseudo_template_is_fatal(self, monkeypatch):
        monkeypatch.setattr(tables, "PSEUDO_PROPS", {**PSEUDO_PROPS, "_broken": ":hover"})
        with pytest.raises(PropTableError, match="_broken"):
            tables.check_tables()

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            NON_STANDARD_PROPS["color"] = frozenset({"div"})
        with pytest.raises(AttributeError):
            CSS_PROPS.add("gap")


class TestElementValidity:
    """Context rules for base elements"""

    def test_svg_elements_match_case_insensitively(self):
        assert is_svg_element("clipPath")
        assert is_svg_element("clippath")
        assert not is_svg_element("div")
        assert "lineargradient" in SVG_ELEMENTS

    @pytest.mark.parametrize("name,element,expected", [
        ("width", "img", True),
        ("width", "div", False),
        ("width", "rect", True),
        ("height", "canvas", True),
        ("color", "link", True),
        ("color", "span", False),
        ("action", "form", True),
        ("loading", "iframe", True),
        ("open", "details", True),
        ("open", "section", False),
        ("wrap", "textarea", True),
        ("hover", "div", False),
        ("keyboard_focus", "button", False),
        ("seamless", "iframe", False),
        ("selected", "option", False),
        ("stroke_width", "path", True),
        ("stroke_width", "div", False),
        ("viewBox", "svg", True),
        ("id", "div", True),
    ])
    def test_context_rules(self, name, element, expected):
        assert is_valid_for_element(name, element) is expected
