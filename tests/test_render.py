"""
Rendering tests

Targets, refs and element rendering through fastcore.
"""

import pytest
from fastcore.xml import to_xml

from starstyle.ui import (
    ComponentTarget, ElementTarget, Ref, as_target, assign_ref, create_ref,
    display_name, is_base_element, render, render_element
)


def Badge(*children, **props):
    return ("badge", children, props)


class TestTargets:
    def test_as_target(self):
        assert as_target("div") == ElementTarget("div")
        assert as_target(Badge) == ComponentTarget(Badge)
        assert as_target(ElementTarget("p")) == ElementTarget("p")

    @pytest.mark.parametrize("bad,error", [("", ValueError), ("  ", ValueError), (42, TypeError), (None, TypeError)])
    def test_invalid_targets(self, bad, error):
        with pytest.raises(error):
            as_target(bad)

    def test_is_base_element(self):
        assert is_base_element("span")
        assert is_base_element(ElementTarget("circle"))
        assert not is_base_element(Badge)

    def test_display_name(self):
        assert display_name("div") == "div"
        assert display_name(Badge) == "Badge"
        assert display_name(ComponentTarget(Badge)) == "Badge"


class TestRender:
    def test_element(self):
        node = render("section", ("a", "b"), {"cls": "x", "id": "main"})
        assert node.tag == "section"
        assert node.children == ("a", "b")
        assert node.attrs == {"class": "x", "id": "main"}

    def test_keyword_attributes_are_mapped(self):
        node = render("label", ("Name",), {"_for": "name", "data_x": "1", "hx_get": "/a"})
        assert node.attrs == {"for": "name", "data-x": "1", "hx-get": "/a"}

    def test_void_element(self):
        html = to_xml(render("img", props={"src": "a.png"}))
        assert "<img" in html
        assert "</img>" not in html

    def test_svg_element_keeps_its_case(self):
        assert render_element("clipPath", id="c").tag == "clipPath"
        assert render_element("circle", r=4).tag == "circle"

    def test_name_attribute_is_not_the_tag(self):
        node = render_element("input", name="q", type="text")
        assert node.tag == "input"
        assert node.attrs == {"name": "q", "type": "text"}
        assert render("select", props={"name": "size"}).attrs == {"name": "size"}

    def test_component(self):
        assert render(Badge, ("new",), {"tone": "info"}) == ("badge", ("new",), {"tone": "info"})

    def test_props_are_not_mutated(self):
        props = {"tone": "info"}
        render(Badge, (), props, ref=Ref())
        assert props == {"tone": "info"}


class TestRefs:
    def test_ref_box(self):
        ref = create_ref()
        node = render("div", ref=ref)
        assert ref.current is node

    def test_callback(self):
        seen = []
        assign_ref(seen.append, "node")
        assert seen == ["node"]

    def test_none_is_a_no_op(self):
        assign_ref(None, "node")

    def test_invalid_ref(self):
        with pytest.raises(TypeError):
            render("div", ref="not-a-ref")
