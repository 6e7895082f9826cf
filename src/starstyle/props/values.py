"""
Prop value tagging.

Routing depends on the shape of a value as well as on its name, so every
value is tagged before it is routed.
"""

from enum import Enum
from numbers import Real
from typing import Any, Mapping


class ValueKind(Enum):
    PRIMITIVE = "primitive"        # str or number, eligible for style shorthands
    STYLE_OBJECT = "style_object"  # a mapping, eligible for pseudo shorthands
    OPAQUE = "opaque"              # anything else: callables, elements, bools, None


def value_kind(value: Any) -> ValueKind:
    # bool is an int subclass but is never a CSS value
    if isinstance(value, bool):
        return ValueKind.OPAQUE
    if isinstance(value, (str, Real)):
        return ValueKind.PRIMITIVE
    if isinstance(value, Mapping):
        return ValueKind.STYLE_OBJECT
    return ValueKind.OPAQUE
