"""
Style object serialization

Turns nested style dicts into a normalised rule tree, a canonical text form
(used for hashing) and finally CSS rules scoped to a selector.

    {"padding": 20, "&:hover": {"color": "red"}, "@media (min-width: 768px)": {"gap": 32}}

scoped to `.css-abc` compiles to

    .css-abc{padding:20px;}
    .css-abc:hover{color:red;}
    @media (min-width: 768px){.css-abc{gap:32px;}}
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from numbers import Real
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..exceptions import StyleCompileError

# Properties whose numeric values take no `px` suffix
UNITLESS_PROPERTIES = frozenset("""
    animation-iteration-count aspect-ratio border-image-outset border-image-slice
    border-image-width box-flex box-flex-group box-ordinal-group column-count columns flex
    flex-grow flex-positive flex-shrink flex-negative flex-order grid-row grid-row-end
    grid-row-span grid-row-start grid-column grid-column-end grid-column-span grid-column-start
    -ms-grid-row -ms-grid-row-span -ms-grid-column -ms-grid-column-span font-weight line-height
    opacity order orphans scale tab-size widows z-index zoom -webkit-line-clamp fill-opacity
    flood-opacity stop-opacity stroke-dasharray stroke-dashoffset stroke-miterlimit
    stroke-opacity stroke-width
""".split())

_SELECTOR_START = ("&", "@", ":", "[", ".", "#", ">", "+", "~", "*")


@dataclass(frozen=True)
class Declaration:
    prop: str
    value: str


@dataclass(frozen=True)
class Block:
    """A nested rule: a selector relative to its parent, or an at-rule"""
    selector: str
    entries: Tuple['Entry', ...]


Entry = Union[Declaration, Block]


@lru_cache(maxsize=1024)
def css_property(key: str) -> str:
    """`background_color` / `backgroundColor` -> `background-color`. Custom properties pass through."""
    if key.startswith("--"):
        return key
    key = re.sub(r"[A-Z]|^ms(?=[A-Z])", lambda m: "-" + m.group(0).lower(), key)
    key = key.replace("_", "-")
    if key.startswith(("webkit-", "moz-", "ms-", "o-")):
        key = "-" + key
    return key


def css_number(value: Real) -> str:
    """Plain decimal text for a number: no exponent, no trailing `.0`."""
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if not math.isfinite(value):
        raise StyleCompileError(f"CSS numbers must be finite, got {value!r}")
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def css_value(prop: str, value: Union[str, Real]) -> str:
    if isinstance(value, Real):
        number = css_number(value)
        if number == "0" or prop in UNITLESS_PROPERTIES or prop.startswith("--"):
            return number
        return f"{number}px"
    return str(value).strip()


def is_selector(key: str) -> bool:
    return key.lstrip().startswith(_SELECTOR_START) or "&" in key


def normalize_styles(*styles: Any) -> Tuple[Entry, ...]:
    """
    Normalise style objects into a tuple of entries, in order.

    Accepts mappings, lists/tuples of style objects (flattened in order) and
    already normalised entry tuples. `None` and `False` are skipped.
    """
    entries: List[Entry] = []
    for style in styles:
        _collect(style, entries)
    return tuple(entries)


def _collect(style: Any, out: List[Entry]) -> None:
    if style is None or style is False:
        return
    if isinstance(style, (Declaration, Block)):
        out.append(style)
        return
    if isinstance(style, (list, tuple)):
        for item in style:
            _collect(item, out)
        return
    if not isinstance(style, Mapping):
        raise StyleCompileError(f"Expected a style object, got {type(style).__name__}: {style!r}")

    for key, value in style.items():
        if not isinstance(key, str):
            raise StyleCompileError(f"Style keys must be strings, got {key!r}")
        if value is None or isinstance(value, bool):
            continue
        if isinstance(value, Mapping):
            out.append(Block(" ".join(key.split()), normalize_styles(value)))
            continue
        if is_selector(key):
            raise StyleCompileError(f"Selector {key!r} needs a style object, got {value!r}")

        prop = css_property(key)
        # A list holds fallbacks: `display: ["-webkit-box", "flex"]`
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if isinstance(item, bool) or not isinstance(item, (str, Real)):
                raise StyleCompileError(f"Unsupported value for {key!r}: {item!r}")
            out.append(Declaration(prop, css_value(prop, item)))


def serialize(entries: Tuple[Entry, ...]) -> str:
    """Canonical text for a rule tree. Equal trees give equal text."""
    parts = []
    for entry in entries:
        if isinstance(entry, Declaration):
            parts.append(f"{entry.prop}:{entry.value};")
        else:
            parts.append(f"{entry.selector}{{{serialize(entry.entries)}}}")
    return "".join(parts)


def split_selector(selector: str) -> List[str]:
    """Split a selector list on top-level commas (not inside `:is(a, b)` or `[x="a,b"]`)."""
    parts, depth, quote, current = [], 0, None, []
    for char in selector:
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return [part for part in parts if part]


def resolve_selector(parent: Optional[str], selector: str) -> str:
    """Resolve a nested selector against its parent: `&` is the parent, no `&` means descendant."""
    if not parent:
        return ",".join(part.replace("&", "").strip() or part for part in split_selector(selector))
    resolved = []
    for parent_part in split_selector(parent):
        for part in split_selector(selector):
            resolved.append(part.replace("&", parent_part) if "&" in part else f"{parent_part} {part}")
    return ",".join(resolved)


def compile_rules(selector: Optional[str], entries: Tuple[Entry, ...]) -> List[str]:
    """
    Compile entries into CSS rules scoped to `selector`.

    Consecutive declarations share one rule, nested blocks are emitted in
    place so source order (and so cascade order) is preserved. At-rules wrap
    the rules of their block. With no selector, declarations are emitted bare,
    which is what `@font-face` bodies and keyframe steps need.
    """
    rules: List[str] = []
    pending: List[str] = []

    def flush_pending():
        if pending:
            body = "".join(pending)
            rules.append(f"{selector}{{{body}}}" if selector else body)
            pending.clear()

    for entry in entries:
        if isinstance(entry, Declaration):
            pending.append(f"{entry.prop}:{entry.value};")
            continue

        flush_pending()
        if entry.selector.startswith("@"):
            inner = "".join(compile_rules(selector, entry.entries))
            rules.append(f"{entry.selector}{{{inner}}}")
        else:
            rules.extend(compile_rules(resolve_selector(selector, entry.selector), entry.entries))

    flush_pending()
    return rules
