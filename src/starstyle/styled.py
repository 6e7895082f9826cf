"""
Styled components

`styled(base)(styles)` returns a component that compiles style shorthand
props, pseudo props and ad-hoc `css` overrides into classes, forwards only
valid attributes to base elements, and renders the result.

```python
from starstyle import styled

Header = styled("h1")({
    "background": "rgba(0, 25, 255, 0.1)",
    "color": "#0055ff",
    "text_align": "center",
    "padding": 20,
})

Header("Hello", as_="h2", margin=20, _hover={"color": "black"})
```

Only object styles are supported. Variant styles keyed by business logic
are out of scope.
"""

from typing import Any, Mapping, Optional

from .compiler import sheet as default_sheet
from .compiler.sheet import StyleSheet
from .props.router import forward_html_props
from .props.splitter import compile_split, split_props
from .ui.render import render
from .ui.tags import is_known_tag
from .ui.targets import as_target, display_name, is_base_element


class StyledComponent:
    """
    A component rendering `base` with compiled styles.

    Reserved props: `as_` (render another element or component instead),
    `cls` (class names to merge), `css` (ad-hoc style object, wins over
    everything else) and `ref`. All other props are split into style
    shorthands, pseudo shorthands and passthrough props.
    """

    def __init__(self, base: Any, styles: Optional[Mapping[str, Any]] = None, sheet: Optional[StyleSheet] = None):
        self._base = base
        self._target = as_target(base)
        self._sheet = sheet if sheet is not None else default_sheet
        self._styles = styles
        # Compiled once here, never per render
        self._base_class = self._sheet.css(styles) if styles else ""
        self.display_name = f"Styled({display_name(base)})"
        self.__name__ = self.display_name

    @property
    def base(self) -> Any:
        return self._base

    @property
    def base_class(self) -> str:
        return self._base_class

    @property
    def sheet(self) -> StyleSheet:
        return self._sheet

    def __call__(self, *children: Any, as_: Any = None, cls: Any = None, css: Any = None, ref=None, **props: Any) -> Any:
        target = as_target(as_) if as_ else self._target
        sheet = self._sheet

        adhoc_class = sheet.css(css) if css else ""

        split = split_props(props)
        style_class, pseudo_class = compile_split(split, sheet)

        final_props = split.passthrough_props
        if is_base_element(target):
            final_props = forward_html_props(final_props, target)

        # Order is the precedence: static < style props < pseudo props < cls < css
        class_name = sheet.cx(self._base_class, style_class, pseudo_class, cls, adhoc_class)
        if class_name:
            final_props = {**final_props, "cls": class_name}

        return render(target, children, final_props, ref)

    def __repr__(self) -> str:
        return f"<{self.display_name}>"


def create_styled(base: Any, styles: Optional[Mapping[str, Any]] = None, sheet: Optional[StyleSheet] = None) -> StyledComponent:
    """Create a styled component for `base` in one call."""
    return StyledComponent(base, styles, sheet=sheet)


class Styled:
    """
    The `styled` entry point.

    `styled(base)` returns a factory taking the static styles;
    `styled.div`, `styled.button`, ... are shortcuts for known tags.
    """

    def __init__(self, sheet: Optional[StyleSheet] = None):
        self._sheet = sheet

    def __call__(self, base: Any):
        as_target(base)

        def factory(styles: Optional[Mapping[str, Any]] = None) -> StyledComponent:
            return StyledComponent(base, styles, sheet=self._sheet)

        factory.__name__ = f"styled_{display_name(base)}"
        return factory

    def __getattr__(self, name: str):
        if name.startswith("_") or not is_known_tag(name):
            raise AttributeError(name)
        return self(name)


styled = Styled()
