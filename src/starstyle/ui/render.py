"""
Rendering

Mounts a target with its final props: base elements become fastcore `FT`
nodes, custom components are called.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from fastcore.xml import FT, ft

from .tags import is_void_element
from .targets import ElementTarget, as_target, assign_ref


def render(target: Any, children: Iterable[Any] = (), props: Optional[Mapping[str, Any]] = None, ref=None) -> Any:
    """
    Render `target` with `children` and `props`.

    Args:
        target: Tag name, custom component, or wrapped target
        children: Positional children
        props: Final props; `cls` becomes the `class` attribute for elements
        ref: Optional `Ref` or callback receiving the rendered element

    Returns:
        An `FT` node for base elements, or whatever the component returns
    """
    target = as_target(target)
    props: Dict[str, Any] = dict(props or {})

    if isinstance(target, ElementTarget):
        node = render_element(target.name, *children, **props)
        assign_ref(ref, node)
        return node

    if ref is not None:
        props["ref"] = ref
    return target.component(*children, **props)


def render_element(tag: str, /, *children: Any, **attrs: Any) -> FT:
    node = ft(tag, *children, void_=is_void_element(tag), **attrs)
    # ft lower-cases tags; SVG elements such as clipPath keep their case
    if node.tag != tag:
        node.tag = tag
    return node
