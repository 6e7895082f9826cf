"""
HTML prop forwarding

Filters a prop map down to the props that are safe to render as markup
attributes on a target element.

Usage:

```python
from starstyle.props import forward_html_props
from fastcore.xml import ft

def TextArea(*children, **props):
    # Only valid HTML props are sent into the textarea element
    return ft("textarea", *children, **forward_html_props(props, "textarea"))
```
"""

import logging
from typing import Any, Dict, Mapping

from ..config import get_config
from ..ui.targets import ElementTarget, as_target
from .oracle import is_prop_valid
from .tables import is_valid_for_element

logger = logging.getLogger(__name__)


def forward_html_props(props: Mapping[str, Any], target) -> Dict[str, Any]:
    """
    Return the subset of `props` that may be forwarded to `target`.

    Base elements get the element-specific filtering (restricted names,
    hit-area flags, disallowed names, SVG-only names) before the generic
    attribute check. Custom components only get the generic check.

    Order and values are preserved. Dropped names are logged at debug
    level when `log_dropped_props` is on.

    Args:
        props: Candidate props, in insertion order
        target: Tag name, custom component, or an already wrapped target

    Returns:
        New dict with the surviving props
    """
    target = as_target(target)
    element = target.name if isinstance(target, ElementTarget) else None
    results = {}
    dropped = []

    for name, value in props.items():
        if element is not None and not is_valid_for_element(name, element):
            dropped.append(name)
            continue
        if is_prop_valid(name):
            results[name] = value
        else:
            dropped.append(name)

    if dropped and get_config().log_dropped_props:
        logger.debug(f"Dropped props for <{element or 'component'}>: {', '.join(dropped)}")

    return results
