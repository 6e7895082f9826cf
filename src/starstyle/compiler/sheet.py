"""
Style Sheet

The style compiler: compiles style objects into stable class names, keeps
the registry of compiled classes and the list of inserted CSS rules, and
composes classes while honouring their order.
"""

import hashlib
import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Set, Tuple

from .serializer import Entry, compile_rules, normalize_styles, serialize

logger = logging.getLogger(__name__)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def hash_string(text: str) -> str:
    """Short, stable base-36 hash of `text`."""
    number = int.from_bytes(hashlib.blake2b(text.encode("utf-8"), digest_size=5).digest(), "big")
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits)) or "0"


def class_names(*args: Any) -> str:
    """
    Join class name arguments into one class string.

    Strings and numbers are kept, lists are flattened, mappings contribute
    the keys whose values are truthy, and falsy values are skipped.
    """
    names: List[str] = []
    for arg in args:
        if not arg or isinstance(arg, bool):
            continue
        if isinstance(arg, (str, int, float)):
            names.append(str(arg))
        elif isinstance(arg, (list, tuple)):
            nested = class_names(*arg)
            if nested:
                names.append(nested)
        elif isinstance(arg, Mapping):
            names.extend(str(key) for key, value in arg.items() if value)
    return " ".join(name for name in " ".join(names).split())


class StyleSheet:
    """
    Compiled style registry and rule sheet.

    `css()` compiles style objects into a `<key>-<hash>` class name (the same
    styles always give the same class) and inserts its rules once. `cx()`
    composes class names: registered classes are merged, in argument order,
    into one new class so that later styles win; other class names are kept
    as they are, in front.
    """

    def __init__(self, key: str = "css"):
        self.key = key
        self._registered: Dict[str, Tuple[Entry, ...]] = {}
        self._inserted: Set[str] = set()
        self._rules: List[str] = []
        self._lock = threading.RLock()

    # Compiling

    def css(self, *styles: Any) -> str:
        """Compile style objects into a class name. Empty styles give an empty string."""
        entries = normalize_styles(*styles)
        if not entries:
            return ""
        name = f"{self.key}-{hash_string(serialize(entries))}"
        with self._lock:
            self._registered.setdefault(name, entries)
            self._insert(name, lambda: compile_rules(f".{name}", entries))
        return name

    def keyframes(self, *frames: Any) -> str:
        """Compile keyframe steps (`{"from": {...}, "to": {...}}`) into an animation name."""
        entries = normalize_styles(*frames)
        name = f"animation-{hash_string(serialize(entries))}"
        with self._lock:
            self._insert(name, lambda: [f"@keyframes {name}{{{''.join(compile_rules(None, entries))}}}"])
        return name

    def inject_global(self, *styles: Any) -> None:
        """Insert unscoped rules, keyed by selector: `{"body": {"margin": 0}}`."""
        entries = normalize_styles(*styles)
        if not entries:
            return
        name = f"global-{hash_string(serialize(entries))}"
        with self._lock:
            self._insert(name, lambda: compile_rules(None, entries))

    def _insert(self, name: str, build) -> None:
        if name in self._inserted:
            return
        rules = build()
        self._rules.extend(rules)
        self._inserted.add(name)
        logger.debug(f"Inserted {len(rules)} rule(s) for {name}")

    # Composing

    def cx(self, *args: Any) -> str:
        """Compose class names, merging registered classes in order."""
        return self.merge(class_names(*args))

    def merge(self, class_name: str) -> str:
        registered, raw = self._split_registered(class_name)
        if len(registered) < 2:
            return class_name
        merged = self.css(registered)
        return f"{raw} {merged}".strip()

    def get_registered_styles(self, class_name: str) -> Tuple[List[str], str]:
        """
        Split a class string into registered styles and raw class names.

        Returns:
            (serialized styles of the registered classes in order, raw class names)
        """
        registered, raw = self._split_registered(class_name)
        return [serialize(entries) for entries in registered], raw

    def _split_registered(self, class_name: str) -> Tuple[List[Tuple[Entry, ...]], str]:
        registered, raw = [], []
        for name in class_name.split():
            entries = self._registered.get(name)
            if entries is None:
                raw.append(name)
            else:
                registered.append(entries)
        return registered, " ".join(raw)

    # Sheet state

    def hydrate(self, ids: Iterable[str]) -> None:
        """Mark classes as already inserted, e.g. when their CSS was server-rendered."""
        with self._lock:
            for id_ in ids:
                self._inserted.add(id_ if "-" in id_ else f"{self.key}-{id_}")

    def flush(self) -> None:
        """Forget every registered class and inserted rule."""
        with self._lock:
            self._registered.clear()
            self._inserted.clear()
            self._rules.clear()
        logger.debug(f"Flushed style sheet {self.key}")

    def is_registered(self, class_name: str) -> bool:
        return class_name in self._registered

    @property
    def registered(self) -> Mapping[str, str]:
        """Registered class names and their serialized styles."""
        with self._lock:
            return {name: serialize(entries) for name, entries in self._registered.items()}

    @property
    def rules(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._rules)

    @property
    def text(self) -> str:
        """The whole sheet as CSS text."""
        return "\n".join(self.rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"StyleSheet(key={self.key!r}, classes={len(self._registered)}, rules={len(self._rules)})"
