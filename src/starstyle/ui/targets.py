"""
Render targets and refs.

A styled component renders either a base element, named by its tag, or a
custom component, any callable taking `(*children, **props)`. The two are
wrapped in explicit variants so routing never guesses from the type.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union


@dataclass(frozen=True)
class ElementTarget:
    """A base markup element, e.g. `div` or `circle`."""
    name: str


@dataclass(frozen=True)
class ComponentTarget:
    """A custom component: a callable returning rendered output."""
    component: Callable[..., Any]


Target = Union[ElementTarget, ComponentTarget]


def as_target(obj: Any) -> Target:
    """
    Wrap a tag name or a component as a render target.

    Raises:
        ValueError: If `obj` is an empty tag name
        TypeError: If `obj` is neither a tag name nor a callable
    """
    if isinstance(obj, (ElementTarget, ComponentTarget)):
        return obj
    if isinstance(obj, str):
        if not obj.strip():
            raise ValueError("Element tag name cannot be empty")
        return ElementTarget(obj.strip())
    if callable(obj):
        return ComponentTarget(obj)
    raise TypeError(f"Cannot render {obj!r}: expected a tag name or a callable component")


def is_base_element(target: Any) -> bool:
    return isinstance(as_target(target), ElementTarget)


def display_name(obj: Any) -> str:
    """Name used in diagnostics: the tag name, a component's `display_name` or `__name__`."""
    if isinstance(obj, ElementTarget):
        return obj.name
    if isinstance(obj, ComponentTarget):
        obj = obj.component
    if isinstance(obj, str):
        return obj
    return getattr(obj, "display_name", None) or getattr(obj, "__name__", None) or "Component"


class Ref:
    """Mutable box that receives the rendered node."""
    __slots__ = ("current",)

    def __init__(self, current: Any = None):
        self.current = current

    def __repr__(self) -> str:
        return f"Ref({self.current!r})"


def create_ref() -> Ref:
    return Ref()


def assign_ref(ref: Optional[Union[Ref, Callable[[Any], Any]]], node: Any) -> None:
    """Hand `node` to a `Ref` box or a callback ref. No-op without a ref."""
    if ref is None:
        return
    if isinstance(ref, Ref):
        ref.current = node
    elif callable(ref):
        ref(node)
    else:
        raise TypeError(f"ref must be a Ref or a callable, got {type(ref).__name__}")
