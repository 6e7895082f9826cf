"""
Prop splitting

Partitions a prop map into style shorthands, pseudo shorthands and
passthrough props, and compiles the first two groups into classes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from .classifier import PropKind, classify, pseudo_selector
from .values import ValueKind, value_kind


@dataclass
class SplitProps:
    """The three disjoint groups of a prop map, each in insertion order"""
    style_props: Dict[str, Any] = field(default_factory=dict)
    pseudo_props: Dict[str, Any] = field(default_factory=dict)
    passthrough_props: Dict[str, Any] = field(default_factory=dict)


def split_props(props: Mapping[str, Any]) -> SplitProps:
    """
    Route every prop by name and by value shape.

    Style shorthands only accept primitive values (str or number); any other
    value is passed through, so a prop that shares its name with a CSS
    property can still reach the element. Pseudo shorthands accept a
    primitive (shorthand for a text color) or a style mapping.
    """
    split = SplitProps()

    for name, value in props.items():
        kind = classify(name)
        shape = value_kind(value)

        if kind is PropKind.STYLE and shape is ValueKind.PRIMITIVE:
            split.style_props[name] = value
        elif kind is PropKind.PSEUDO and shape is not ValueKind.OPAQUE:
            split.pseudo_props[name] = value
        else:
            split.passthrough_props[name] = value

    return split


def pseudo_style(name: str, value: Any) -> Dict[str, Any]:
    """Build the single-key style object for a pseudo prop: `{template: styles}`."""
    styles = value if value_kind(value) is ValueKind.STYLE_OBJECT else {"color": value}
    return {pseudo_selector(name): styles}


def compile_split(split: SplitProps, sheet) -> Tuple[str, str]:
    """
    Compile the style and pseudo groups of `split` with `sheet`.

    Style props are compiled together as one style object so that later
    keys win over earlier ones. Each pseudo prop is compiled on its own,
    then the pseudo classes are composed in insertion order.

    Returns:
        (style_class, pseudo_class), either of which may be empty
    """
    style_class = sheet.css(split.style_props) if split.style_props else ""
    pseudo_class = sheet.cx(
        [sheet.css(pseudo_style(name, value)) for name, value in split.pseudo_props.items()]
    )
    return style_class, pseudo_class
