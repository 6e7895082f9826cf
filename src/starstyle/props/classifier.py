"""
Style prop classification.

Every prop name is exactly one of: a style shorthand, a pseudo shorthand,
or a passthrough prop. The style and pseudo tables are checked for
disjointness when `tables` is imported.
"""

from enum import Enum
from typing import Optional

from .tables import CSS_PROPS, PSEUDO_PROPS


class PropKind(Enum):
    STYLE = "style"
    PSEUDO = "pseudo"
    PASSTHROUGH = "passthrough"


def classify(name: str) -> PropKind:
    if name in CSS_PROPS:
        return PropKind.STYLE
    if name in PSEUDO_PROPS:
        return PropKind.PSEUDO
    return PropKind.PASSTHROUGH


def pseudo_selector(name: str) -> Optional[str]:
    """Selector template for a pseudo prop, e.g. `_hover` -> `&:hover`."""
    return PSEUDO_PROPS.get(name)
