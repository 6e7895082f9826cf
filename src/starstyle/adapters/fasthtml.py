"""
FastHTML Adapter

Serves compiled styles to FastHTML apps, either inline in the page head or
as a stylesheet route:

```python
from fasthtml.common import fast_app
from starstyle.adapters.fasthtml import register_stylesheet, stylesheet_link

app, rt = fast_app(hdrs=[stylesheet_link()])
register_stylesheet(app)
```
"""

from typing import Optional

from fasthtml.common import Link, Style
from starlette.responses import Response

from ..compiler import sheet as default_sheet
from ..compiler.sheet import StyleSheet

STYLESHEET_PATH = "/starstyle.css"


def stylesheet_tag(sheet: Optional[StyleSheet] = None, **attrs):
    """Inline `<style>` element holding the current rules of `sheet`."""
    sheet = sheet if sheet is not None else default_sheet
    return Style(sheet.text, data_starstyle=sheet.key, **attrs)


def stylesheet_link(path: str = STYLESHEET_PATH):
    return Link(rel="stylesheet", href=path)


def register_stylesheet(app, path: str = STYLESHEET_PATH, sheet: Optional[StyleSheet] = None):
    """
    Mount a route serving `sheet` as `text/css`.

    Rules are read per request, so classes compiled while rendering earlier
    pages are included.
    """
    sheet = sheet if sheet is not None else default_sheet

    def stylesheet():
        return Response(sheet.text, media_type="text/css")

    app.route(path, methods=["get"])(stylesheet)
    return stylesheet
