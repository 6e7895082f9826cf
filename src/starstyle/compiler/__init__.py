"""
StarStyle Compiler Module

The style compiler. A process-wide default sheet is created here and its
methods are exported as plain functions:

```python
from starstyle.compiler import css, cx, sheet

title = css({"font_size": 18, "&:hover": {"color": "red"}})
print(sheet.text)
```
"""

from ..config import get_config
from .serializer import css_property, css_value, normalize_styles, compile_rules, serialize
from .sheet import StyleSheet, class_names, hash_string

sheet = StyleSheet(key=get_config().key)

css = sheet.css
cx = sheet.cx
merge = sheet.merge
keyframes = sheet.keyframes
inject_global = sheet.inject_global
get_registered_styles = sheet.get_registered_styles
hydrate = sheet.hydrate
flush = sheet.flush

__all__ = [
    "StyleSheet",
    "sheet",
    "css",
    "cx",
    "merge",
    "keyframes",
    "inject_global",
    "get_registered_styles",
    "hydrate",
    "flush",
    "class_names",
    "hash_string",
    "css_property",
    "css_value",
    "normalize_styles",
    "compile_rules",
    "serialize",
]
