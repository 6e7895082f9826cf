"""
StarStyle UI Module

Render targets, refs and the element renderer.
"""

from .tags import html_tags, self_closing_tags, is_known_tag, is_void_element
from .targets import (
    ElementTarget, ComponentTarget, Target, Ref,
    as_target, is_base_element, display_name, create_ref, assign_ref
)
from .render import render, render_element

__all__ = [
    "html_tags",
    "self_closing_tags",
    "is_known_tag",
    "is_void_element",
    "ElementTarget",
    "ComponentTarget",
    "Target",
    "Ref",
    "as_target",
    "is_base_element",
    "display_name",
    "create_ref",
    "assign_ref",
    "render",
    "render_element",
]
