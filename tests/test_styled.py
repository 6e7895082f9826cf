"""
Styled component tests

End-to-end behaviour of the styled factory: class precedence, attribute
forwarding, `as_` retargeting, refs and nesting.
"""

import pytest
from fastcore.xml import FT, to_xml

from starstyle import Ref, Styled, StyledComponent, create_styled


def Recorder(*children, **props):
    """Custom component returning what it was rendered with."""
    return {"children": children, "props": props}


class TestScenarios:
    """The canonical render scenarios"""

    def test_style_shorthand_compiles_and_handlers_pass(self, sheet):
        Comp = create_styled("div", {"padding": 20}, sheet=sheet)
        node = Comp(width=100, onclick="go()")

        assert isinstance(node, FT)
        assert node.tag == "div"
        assert "width" not in node.attrs
        assert node.attrs["onclick"] == "go()"
        assert sheet.registered[node.attrs["class"]] == "padding:20px;width:100px;"

    def test_width_shorthand_on_img_is_a_style(self, sheet):
        Img = create_styled("img", sheet=sheet)
        node = Img(src="a.png", width="100")

        assert node.attrs["src"] == "a.png"
        assert "width" not in node.attrs
        assert sheet.registered[node.attrs["class"]] == "width:100;"

    def test_pseudo_shorthand_is_compiled_once(self, sheet):
        Comp = create_styled("div", {"padding": 20}, sheet=sheet)
        node = Comp(margin=4, _hover="red")

        assert sheet.registered[node.attrs["class"]] == "padding:20px;margin:4px;&:hover{color:red;}"
        assert list(sheet.registered.values()).count("&:hover{color:red;}") == 1
        assert "_hover" not in node.attrs
        assert "-hover" not in node.attrs

    def test_disallowed_attribute_is_dropped(self, sheet):
        Button = create_styled("button", sheet=sheet)
        node = Button("Save", seamless=True, type="submit")

        assert node.attrs == {"type": "submit"}
        assert node.children == ("Save",)


class TestClassPrecedence:
    """static < style props < pseudo props < cls < css"""

    def test_style_props_win_over_static_styles(self, sheet):
        Comp = create_styled("div", {"color": "red"}, sheet=sheet)
        class_name = Comp(color="blue", cls="override").attrs["class"]

        raw, merged = class_name.split()
        assert raw == "override"
        assert sheet.registered[merged] == "color:red;color:blue;"

    def test_css_prop_wins_over_everything(self, sheet):
        Comp = create_styled("div", {"color": "red"}, sheet=sheet)
        node = Comp(color="blue", _hover={"color": "black"}, css={"color": "green"})

        assert sheet.registered[node.attrs["class"]] == (
            "color:red;color:blue;&:hover{color:black;}color:green;"
        )

    def test_registered_cls_is_merged_before_css(self, sheet):
        extra = sheet.css({"margin": 1})
        Comp = create_styled("div", {"margin": 2}, sheet=sheet)
        node = Comp(cls=extra, css={"margin": 3})

        assert sheet.registered[node.attrs["class"]] == "margin:2px;margin:1px;margin:3px;"

    def test_no_class_without_styles(self, sheet):
        Comp = create_styled("div", sheet=sheet)
        node = Comp(id="x")

        assert node.attrs == {"id": "x"}
        assert len(sheet) == 0

    def test_style_name_with_non_primitive_value_passes_through(self, sheet):
        Comp = create_styled(Recorder, sheet=sheet)
        result = Comp(color=["red", "blue"], opacity=True)

        assert result["props"] == {"color": ["red", "blue"], "opacity": True}


class TestTargets:
    """`as_` retargeting and custom components"""

    def test_as_swaps_the_element(self, sheet):
        Header = create_styled("h1", {"padding": 20}, sheet=sheet)
        node = Header("Hello", as_="h2", margin=20)

        assert node.tag == "h2"
        assert node.children == ("Hello",)
        assert "margin" not in node.attrs
        assert sheet.registered[node.attrs["class"]] == "padding:20px;margin:20px;"

    def test_as_element_filters_for_the_new_element(self, sheet):
        Comp = create_styled("div", sheet=sheet)
        node = Comp(as_="a", href="/home", open=True)

        assert node.tag == "a"
        assert node.attrs == {"href": "/home"}

    def test_custom_component_gets_every_passthrough_prop(self, sheet):
        Comp = create_styled(Recorder, {"padding": 4}, sheet=sheet)
        result = Comp("child", seamless=True, onclick="go()", variant="big", foo=1, padding=8)

        assert result["children"] == ("child",)
        props = result["props"]
        assert props == {"seamless": True, "onclick": "go()", "variant": "big", "foo": 1, "cls": props["cls"]}
        assert list(props)[:4] == ["seamless", "onclick", "variant", "foo"]
        assert sheet.registered[props["cls"]] == "padding:4px;padding:8px;"

    def test_empty_as_falls_back_to_the_base(self, sheet):
        Comp = create_styled("section", sheet=sheet)
        assert Comp("x", as_="").tag == "section"
        assert Comp("x", as_=None).tag == "section"

    def test_as_component(self, sheet):
        Comp = create_styled("div", sheet=sheet)
        result = Comp("x", as_=Recorder, title="t")

        assert result == {"children": ("x",), "props": {"title": "t"}}

    def test_nested_styled_components_outer_wins(self, sheet):
        Inner = create_styled("div", {"color": "red"}, sheet=sheet)
        Outer = create_styled(Inner, {"color": "blue"}, sheet=sheet)
        node = Outer("hi")

        assert node.tag == "div"
        assert sheet.registered[node.attrs["class"]] == "color:red;color:blue;"


class TestFormElements:
    """The `name` attribute reaches form controls"""

    @pytest.mark.parametrize("tag", ["input", "select", "textarea", "button", "form"])
    def test_name_attribute(self, sheet, tag):
        node = create_styled(tag, {"margin": 2}, sheet=sheet)(name="q")

        assert node.tag == tag
        assert node.attrs["name"] == "q"
        assert sheet.registered[node.attrs["class"]] == "margin:2px;"

    def test_input_renders_name_and_type(self, sheet):
        html = to_xml(create_styled("input", sheet=sheet)(name="q", type="text"))
        assert 'name="q"' in html
        assert 'type="text"' in html

    def test_label_for_spellings(self, sheet):
        Label = create_styled("label", sheet=sheet)

        assert Label("Name", _for="v").attrs == {"for": "v"}
        assert Label("Name", htmlFor="v").attrs == {"for": "v"}
        assert Label("Name", html_for="v", for_="v", class_="c").attrs == {}


class TestRefs:
    def test_ref_receives_the_element(self, sheet):
        ref = Ref()
        node = create_styled("input", sheet=sheet)(ref=ref, name="q")

        assert ref.current is node
        assert "ref" not in node.attrs

    def test_callback_ref(self, sheet):
        seen = []
        node = create_styled("div", sheet=sheet)(ref=seen.append)
        assert seen == [node]

    def test_ref_is_handed_to_custom_components(self, sheet):
        ref = Ref()
        result = create_styled(Recorder, sheet=sheet)(ref=ref)
        assert result["props"]["ref"] is ref

    def test_no_ref_prop_without_a_ref(self, sheet):
        result = create_styled(Recorder, sheet=sheet)()
        assert "ref" not in result["props"]


class TestFactory:
    """`styled` entry point and component metadata"""

    def test_display_name(self, sheet):
        Inner = create_styled("div", sheet=sheet)
        assert Inner.display_name == "Styled(div)"
        assert create_styled(Inner, sheet=sheet).display_name == "Styled(Styled(div))"
        assert create_styled(Recorder, sheet=sheet).display_name == "Styled(Recorder)"
        assert repr(Inner) == "<Styled(div)>"

    def test_styled_call_and_shortcuts(self, sheet):
        styled = Styled(sheet=sheet)
        Button = styled.button({"padding": 2})
        Box = styled("div")({"margin": 1})

        assert isinstance(Button, StyledComponent)
        assert Button.sheet is sheet
        assert Button().tag == "button"
        assert Box().tag == "div"

    def test_unknown_shortcut_raises(self):
        with pytest.raises(AttributeError):
            Styled().notatag

    def test_invalid_base_raises(self):
        with pytest.raises(TypeError):
            Styled()(42)
        with pytest.raises(ValueError):
            create_styled("")

    def test_static_styles_compiled_once(self, sheet):
        calls = []

        class CountingSheet(type(sheet)):
            def css(self, *styles):
                calls.append(styles)
                return super().css(*styles)

        counting = CountingSheet()
        Comp = create_styled("div", {"padding": 20}, sheet=counting)
        first = Comp()
        second = Comp()

        assert len(calls) == 1
        assert first.attrs["class"] == second.attrs["class"] == Comp.base_class

    def test_renders_to_html(self, sheet):
        Comp = create_styled("a", {"color": "red"}, sheet=sheet)
        node = Comp("Docs", href="/docs", width=10)
        html = to_xml(node)

        assert f'class="{node.attrs["class"]}"' in html
        assert 'href="/docs"' in html
        assert "width=" not in html
