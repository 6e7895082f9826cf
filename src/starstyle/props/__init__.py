"""
StarStyle Props Module

Prop classification, attribute validity and prop routing.
"""

from .classifier import PropKind, classify, pseudo_selector
from .oracle import is_prop_valid
from .router import forward_html_props
from .splitter import SplitProps, compile_split, split_props
from .tables import is_svg_element, is_valid_for_element
from .values import ValueKind, value_kind

__all__ = [
    "PropKind",
    "classify",
    "pseudo_selector",
    "is_prop_valid",
    "forward_html_props",
    "SplitProps",
    "split_props",
    "compile_split",
    "is_svg_element",
    "is_valid_for_element",
    "ValueKind",
    "value_kind",
]
